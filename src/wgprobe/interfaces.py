"""Local network interface lookup.

Resolves an interface name to the IPv4 broadcast addresses a discovery
probe should be sent to.
"""

from __future__ import annotations

import ipaddress
import socket

import psutil


def list_interfaces() -> list[str]:
    """Names of the network interfaces that are currently up."""
    return sorted(name for name, stats in psutil.net_if_stats().items() if stats.isup)


def _broadcast_for(address: str, netmask: str | None, broadcast: str | None) -> str | None:
    """Broadcast address for one interface address, or None if it has none."""
    if broadcast:
        return broadcast
    if not netmask:
        return None
    try:
        network = ipaddress.IPv4Network(f"{address}/{netmask}", strict=False)
    except ValueError:
        return None
    # Point-to-point and host routes have no broadcast domain.
    if network.prefixlen >= 31:
        return None
    return str(network.broadcast_address)


def get_broadcast_addresses(name: str) -> list[str]:
    """Return the IPv4 broadcast addresses of the named interface.

    Interfaces that are down and loopback addresses are skipped. If the
    OS does not report a broadcast address it is derived from the
    address and netmask.

    Args:
        name: Interface name (e.g. "eth0", "enp0s31f6").

    Returns:
        Broadcast addresses in the order the OS lists them, without
        duplicates. Empty if the interface is unknown or down.
    """
    stats = psutil.net_if_stats().get(name)
    if stats is None or not stats.isup:
        return []

    addresses: list[str] = []
    for addr in psutil.net_if_addrs().get(name, []):
        if addr.family != socket.AF_INET:
            continue
        if ipaddress.IPv4Address(addr.address).is_loopback:
            continue
        broadcast = _broadcast_for(addr.address, addr.netmask, addr.broadcast)
        if broadcast is not None and broadcast not in addresses:
            addresses.append(broadcast)
    return addresses
