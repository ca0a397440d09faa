"""WGDP (WatchGuard access point discovery protocol) — pure-Python implementation.

A standalone protocol library for finding WatchGuard wireless access
points on a local network by broadcasting the vendor's UDP discovery
probe and decoding the sysinfo replies.

This package has no external dependencies beyond the Python standard library.

Quick start:
    from wgdp import discover

    for ap in discover("192.168.1.255", timeout=1.0):
        print(f"{ap.name} ({ap.model}) at {ap.address}")
"""

from wgdp.client import DEFAULT_TIMEOUT, DiscoveryClient, discover
from wgdp.parsers import SYSINFO_FIELDS, parse_response, parse_sysinfo
from wgdp.protocol import (
    RECEIVE_PORT,
    SEND_PORT,
    APResponse,
    ResponseParseError,
    TruncatedResponseError,
    UnrecognizedResponseError,
    encode_probe,
)
from wgdp.types import AccessPointDescriptor
from wgdp.uptime import format_uptime

__all__ = [
    "APResponse",
    "AccessPointDescriptor",
    "DEFAULT_TIMEOUT",
    "DiscoveryClient",
    "RECEIVE_PORT",
    "ResponseParseError",
    "SEND_PORT",
    "SYSINFO_FIELDS",
    "TruncatedResponseError",
    "UnrecognizedResponseError",
    "discover",
    "encode_probe",
    "format_uptime",
    "parse_response",
    "parse_sysinfo",
]
