"""WGDP response parsers.

Converts a decoded APResponse into an AccessPointDescriptor. The header
gives the address and port; everything else comes from the sysinfo
payload, one field per line.

Access point firmware has grown this payload over time by appending
lines, so the extractor is positional: each known position maps to a
field, positions beyond the received line count stay None, and lines
beyond the known table are ignored. Two layouts have been observed:

  - 9 lines: name, model, MAC, serial, firmware, uptime, two unused
    lines, hardware revision.
  - 11 lines: as above, plus a line 10 model string which replaces the
    line 1 model when it is not blank.

Nothing in the wire format says which layout was sent; the line count
is the only signal, so both are handled by one table.
"""

from __future__ import annotations

import socket

from wgdp.protocol import APResponse
from wgdp.types import AccessPointDescriptor

# Sysinfo line position -> AccessPointDescriptor field. Positions 6 and 7
# are sent by the firmware but carry nothing we use.
SYSINFO_FIELDS: dict[int, str] = {
    0: "name",
    1: "model",
    2: "mac_address",
    3: "serial_number",
    4: "firmware_version",
    5: "raw_uptime_seconds",
    8: "revision_or_alternate_model",
}

# Extended (11-line) layout only.
OVERRIDE_MODEL_POSITION = 10


def parse_ipv4(data: bytes) -> str:
    """Parse a 4-byte IPv4 address into dotted-quad notation.

    Raises ValueError if data is not exactly 4 bytes.
    """
    if len(data) != 4:
        raise ValueError(f"IPv4 address must be 4 bytes, got {len(data)}: {data!r}")
    return socket.inet_ntoa(data)


def split_sysinfo(text: str) -> list[str]:
    """Split sysinfo text into lines.

    Trailing empty lines are dropped, so a final newline does not add an
    empty field and an empty payload has no lines at all.
    """
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_sysinfo(text: str) -> dict[str, str]:
    """Extract descriptor fields from sysinfo text.

    Never raises: a short payload just means fewer fields.

    Returns:
        Mapping of AccessPointDescriptor field name to line text, holding
        only the fields present in this payload.
    """
    lines = split_sysinfo(text)
    fields: dict[str, str] = {}

    for position, line in enumerate(lines):
        name = SYSINFO_FIELDS.get(position)
        if name is not None:
            fields[name] = line

    if len(lines) > OVERRIDE_MODEL_POSITION:
        # Extended layout: a non-blank line 10 replaces both the line 8
        # revision and the model. A blank one changes nothing.
        override = lines[OVERRIDE_MODEL_POSITION]
        if override.strip():
            fields["revision_or_alternate_model"] = override
            fields["model"] = override.strip()

    return fields


def parse_response(data: bytes, length: int | None = None) -> AccessPointDescriptor:
    """Decode a response datagram into an AccessPointDescriptor.

    Args:
        data: Receive buffer.
        length: Number of valid bytes in ``data`` (default: all of it).

    Returns:
        AccessPointDescriptor for the responding access point.

    Raises:
        TruncatedResponseError: If the datagram has no sysinfo payload.
        UnrecognizedResponseError: If the datagram is not an AP response.
    """
    response = APResponse.decode(data, length)
    try:
        address = parse_ipv4(response.address)
    except ValueError:
        address = None
    return AccessPointDescriptor(
        address=address,
        port=response.port,
        **parse_sysinfo(response.sysinfo),
    )
