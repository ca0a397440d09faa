"""WGDP UDP client for access point discovery.

Broadcasts a single probe and yields one AccessPointDescriptor per valid
response until no datagram arrives within the timeout. Responses are
collected on UDP port 2529, which must be free on the local host.

Usage:
    for ap in discover("192.168.1.255", timeout=1.0):
        print(ap)

Leaving the loop early (``break``, an exception, or dropping the
iterator) closes the socket without waiting for the timeout.
"""

from __future__ import annotations

import socket
import sys
from collections.abc import Iterator

from wgdp.parsers import parse_response
from wgdp.protocol import (
    RECEIVE_PORT,
    SEND_PORT,
    ResponseParseError,
    encode_probe,
)
from wgdp.types import AccessPointDescriptor

DEFAULT_TIMEOUT = 1.0
# Largest possible UDP payload, so no datagram is ever cut short.
RECEIVE_BUFFER_SIZE = 65535


class DiscoveryClient:
    """UDP client for one access point discovery exchange.

    Owns a single UDP socket bound to the response port with SO_BROADCAST
    enabled. The socket is created on first use and released by close()
    or on leaving a ``with`` block.

    Args:
        broadcast_address: Address to send the probe to, normally the
            broadcast address of a local IPv4 network.
        timeout: Seconds to keep listening after the last datagram.
        send_port: Destination port for the probe.
        receive_port: Local port responses arrive on.
        bind_address: Local address to bind (default: all interfaces).
        buffer_size: Receive buffer size; the default fits any datagram.
        verbose: Print discarded datagrams to stderr.

    Raises:
        OSError: If the response port is already bound by another
            session (errno EADDRINUSE; the port is never shared), or on
            any other socket failure except the receive timeout.
    """

    def __init__(
        self,
        broadcast_address: str,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        send_port: int = SEND_PORT,
        receive_port: int = RECEIVE_PORT,
        bind_address: str = "",
        buffer_size: int = RECEIVE_BUFFER_SIZE,
        verbose: bool = False,
    ) -> None:
        self._broadcast_address = broadcast_address
        self._timeout = timeout
        self._send_port = send_port
        self._receive_port = receive_port
        self._bind_address = bind_address
        self._buffer_size = buffer_size
        self._verbose = verbose
        self._sock: socket.socket | None = None

    @property
    def broadcast_address(self) -> str:
        return self._broadcast_address

    def _get_socket(self) -> socket.socket:
        """Create or return the cached UDP socket."""
        if self._sock is None:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
                sock.bind((self._bind_address, self._receive_port))
                sock.settimeout(self._timeout)
            except OSError:
                sock.close()
                raise
            self._sock = sock
        return self._sock

    def _log(self, message: str) -> None:
        if self._verbose:
            print(message, file=sys.stderr)

    def send_probe(self) -> None:
        """Broadcast one discovery probe."""
        sock = self._get_socket()
        sock.sendto(encode_probe(), (self._broadcast_address, self._send_port))

    def receive(self) -> Iterator[AccessPointDescriptor]:
        """Yield descriptors from incoming responses until the timeout.

        Datagrams that are not valid AP responses are skipped and the
        listen continues.
        """
        sock = self._get_socket()
        while True:
            try:
                data, addr = sock.recvfrom(self._buffer_size)
            except socket.timeout:
                return

            try:
                descriptor = parse_response(data)
            except ResponseParseError as e:
                self._log(f"  Ignoring {len(data)} bytes from {addr[0]}: {e}")
                continue

            yield descriptor

    def discover(self) -> Iterator[AccessPointDescriptor]:
        """Broadcast a probe and yield each access point that answers.

        Returns:
            Iterator of AccessPointDescriptor, in arrival order. Not
            deduplicated: an AP answering twice is yielded twice.
        """
        self.send_probe()
        yield from self.receive()

    def close(self) -> None:
        """Close the UDP socket."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> DiscoveryClient:
        return self

    def __exit__(self, *_exc) -> None:
        self.close()


def discover(
    broadcast_address: str,
    timeout: float = DEFAULT_TIMEOUT,
    **kwargs,
) -> Iterator[AccessPointDescriptor]:
    """Run one discovery exchange on its own socket.

    The socket lives exactly as long as the returned iterator: it is
    closed when the timeout ends the listen, when an error propagates,
    or when the caller stops iterating and the generator is closed.

    Args:
        broadcast_address: Address to send the probe to.
        timeout: Seconds to keep listening after the last datagram.
        **kwargs: Passed through to DiscoveryClient.
    """
    with DiscoveryClient(broadcast_address, timeout, **kwargs) as client:
        yield from client.discover()
