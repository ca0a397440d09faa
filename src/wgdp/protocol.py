"""WGDP packet encoding and decoding.

Implements the binary wire format for the WatchGuard access point
discovery exchange. The client broadcasts an 8-byte probe; each access
point answers with a 16-byte header followed by a newline-delimited
sysinfo text payload.

All multi-byte integers are big-endian (network byte order).
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

# Port assignments
SEND_PORT = 2528
RECEIVE_PORT = 2529

# Probe discriminators ("WGWC", "DISC")
PROBE_TYPE_GWC = 0x57475743
PROBE_CODE_DISCOVERY = 0x44495343

# Response discriminators ("WGAP", "IP4@")
RESPONSE_TYPE_AP = 0x57474150
RESPONSE_CODE_IP4 = 0x49503440

PROBE_FORMAT = ">II"


class ResponseParseError(ValueError):
    """A received datagram is not a usable access point response."""


class TruncatedResponseError(ResponseParseError):
    """The datagram carries no payload or claims more bytes than it holds."""


class UnrecognizedResponseError(ResponseParseError):
    """The header discriminators do not identify an IPv4 AP response.

    Attributes:
        response_type: The 4-byte type value found in the header.
        response_code: The 4-byte code value found in the header.
    """

    def __init__(self, response_type: int, response_code: int) -> None:
        self.response_type = response_type
        self.response_code = response_code
        super().__init__(
            f"Unrecognized response 0x{response_type:08X}/0x{response_code:08X} "
            f"(expected 0x{RESPONSE_TYPE_AP:08X}/0x{RESPONSE_CODE_IP4:08X})"
        )


def encode_probe() -> bytes:
    """Encode the discovery probe datagram.

    Returns:
        8 bytes: the GWC type discriminator then the DISCOVERY code.
    """
    return struct.pack(PROBE_FORMAT, PROBE_TYPE_GWC, PROBE_CODE_DISCOVERY)


@dataclass(frozen=True)
class APResponse:
    """A decoded access point response datagram.

    The header structure is:
      - 4-byte type (RESPONSE_TYPE_AP)
      - 4-byte code (RESPONSE_CODE_IP4)
      - 4-byte IPv4 address the AP can be reached on
      - 2-byte port
      - 2 reserved bytes

    Attributes:
        address: Raw 4 address bytes from the header.
        port: Port number advertised by the AP.
        payload: Sysinfo bytes following the header.
    """

    HEADER_SIZE = 16
    HEADER_FORMAT = ">II4sHH"

    address: bytes
    port: int
    payload: bytes = b""

    @property
    def sysinfo(self) -> str:
        """The payload as text; undecodable bytes become U+FFFD."""
        return self.payload.decode("utf-8", errors="replace")

    @classmethod
    def decode(cls, data: bytes, length: int | None = None) -> APResponse:
        """Decode an access point response from raw datagram bytes.

        Args:
            data: Receive buffer.
            length: Number of valid bytes in ``data`` (default: all of it).

        Returns:
            Decoded APResponse with the payload in ``[16, length)``.

        Raises:
            TruncatedResponseError: If ``length`` leaves no payload after
                the header or exceeds the buffer.
            UnrecognizedResponseError: If either discriminator is wrong.
        """
        if length is None:
            length = len(data)
        if length <= cls.HEADER_SIZE or length > len(data):
            msg = (
                f"Response length {length} outside ({cls.HEADER_SIZE}, {len(data)}]"
            )
            raise TruncatedResponseError(msg)

        (
            response_type, response_code,
            address, port,
            _reserved,
        ) = struct.unpack_from(cls.HEADER_FORMAT, data, 0)

        if response_type != RESPONSE_TYPE_AP or response_code != RESPONSE_CODE_IP4:
            raise UnrecognizedResponseError(response_type, response_code)

        return cls(
            address=address,
            port=port,
            payload=bytes(data[cls.HEADER_SIZE:length]),
        )
