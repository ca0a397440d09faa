"""Runtime configuration for a wgprobe run, taken from the command line."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from wgdp.client import DEFAULT_TIMEOUT
from wgdp.protocol import RECEIVE_PORT, SEND_PORT


def _check_port(name: str, value: int) -> None:
    if not 1 <= value <= 0xFFFF:
        raise ValueError(f"{name} must be between 1 and 65535, got {value}")


@dataclass(frozen=True)
class ProbeConfig:
    """Settings for probing one interface.

    Attributes:
        interface: Network interface whose broadcast addresses are probed.
        timeout: Seconds to keep listening after the last response.
        send_port: Port the probe is sent to.
        receive_port: Local port responses arrive on.
        bind_address: Local address for the response socket ("" = any).
        json: Print one JSON object per access point instead of text.
        verbose: Print discarded datagrams and progress to stderr.
    """

    interface: str
    timeout: float = DEFAULT_TIMEOUT
    send_port: int = SEND_PORT
    receive_port: int = RECEIVE_PORT
    bind_address: str = ""
    json: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        _check_port("send port", self.send_port)
        _check_port("receive port", self.receive_port)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ProbeConfig:
        """Build a config from parsed command-line arguments.

        Raises ValueError for out-of-range values.
        """
        return cls(
            interface=args.interface,
            timeout=args.timeout,
            send_port=args.send_port,
            receive_port=args.receive_port,
            bind_address=args.bind,
            json=args.json,
            verbose=args.verbose,
        )

    def client_options(self) -> dict:
        """Keyword arguments for wgdp.discover()."""
        return {
            "timeout": self.timeout,
            "send_port": self.send_port,
            "receive_port": self.receive_port,
            "bind_address": self.bind_address,
            "verbose": self.verbose,
        }
