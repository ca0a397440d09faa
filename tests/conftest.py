"""Shared test fixtures for wgdp and wgprobe."""

import struct

import pytest

from wgdp.protocol import RESPONSE_CODE_IP4, RESPONSE_TYPE_AP


def build_response(
    sysinfo: str | bytes,
    address: bytes = b"\xc0\xa8\x01\x32",
    port: int = 80,
    response_type: int = RESPONSE_TYPE_AP,
    response_code: int = RESPONSE_CODE_IP4,
) -> bytes:
    """Assemble a response datagram: 16-byte header + sysinfo payload."""
    if isinstance(sysinfo, str):
        sysinfo = sysinfo.encode("utf-8")
    header = struct.pack(">II4sHH", response_type, response_code, address, port, 0)
    return header + sysinfo


OFFICE_AP_SYSINFO = "Office-AP\nAP-300\n00:11:22:33:44:55\nSN123\n1.2.3\n90000\n"


@pytest.fixture
def office_ap_response():
    """Response from 192.168.1.50:80 carrying a six-line sysinfo payload."""
    return build_response(OFFICE_AP_SYSINFO)


@pytest.fixture
def make_response():
    """Return the response datagram builder."""
    return build_response
