"""CLI entry point for wgprobe.

Usage:
    wgprobe [options] INTERFACE

Sends one WatchGuard discovery probe to each broadcast address of
INTERFACE, in turn, and prints every access point that answers.
"""

from __future__ import annotations

import argparse
import errno
import sys

from wgdp import discover
from wgprobe.config import ProbeConfig
from wgprobe.interfaces import get_broadcast_addresses, list_interfaces
from wgprobe.output import error, format_access_point, status


def probe_address(broadcast_address: str, config: ProbeConfig) -> int:
    """Run one discovery session and print each access point found.

    Returns:
        Number of access points printed.

    Raises:
        OSError: If the socket cannot be set up or the probe not sent.
    """
    count = 0
    for ap in discover(broadcast_address, **config.client_options()):
        print(format_access_point(ap, as_json=config.json), flush=True)
        count += 1
    return count


def cmd_probe(config: ProbeConfig) -> int:
    """Probe every broadcast address of the configured interface."""
    addresses = get_broadcast_addresses(config.interface)
    if not addresses:
        available = ", ".join(list_interfaces()) or "none"
        error(
            f"No broadcast addresses for interface {config.interface!r}",
            hint=f"Interfaces that are up: {available}",
        )
        return 1

    failures = 0
    total = 0
    for address in addresses:
        status(f"Broadcasting on {address!r}...")
        try:
            total += probe_address(address, config)
        except PermissionError as e:
            error(
                f"discovery on {address!r} not permitted: {e}",
                hint="Ports below 1024 need elevated privileges, "
                "and a firewall may block broadcasts.",
            )
            failures += 1
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                error(
                    f"UDP port {config.receive_port} already in use",
                    hint="Another discovery is probably running; wait for it to finish.",
                )
            else:
                error(f"discovery on {address!r} failed: {e}")
            failures += 1

    if config.verbose:
        status(f"Found {total} access point(s) on {len(addresses)} network(s).")
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wgprobe",
        description="Discover WatchGuard wireless access points on a local network.",
    )
    parser.add_argument(
        "interface",
        help="Network interface to probe on (e.g. eth0)",
    )
    parser.add_argument(
        "-t", "--timeout", type=float, default=ProbeConfig.timeout,
        help="Seconds to wait after the last response (default: %(default)s)",
    )
    parser.add_argument(
        "--send-port", type=int, default=ProbeConfig.send_port,
        help="Port the probe is sent to (default: %(default)s)",
    )
    parser.add_argument(
        "--receive-port", type=int, default=ProbeConfig.receive_port,
        help="Local port responses arrive on (default: %(default)s)",
    )
    parser.add_argument(
        "--bind", default="",
        help="Local address to listen on (default: all)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print one JSON object per access point",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Report ignored datagrams and totals on stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ProbeConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    return cmd_probe(config)


if __name__ == "__main__":
    sys.exit(main())
