"""WGDP data types for discovery results.

The descriptor is immutable and built once per valid response. Every
sysinfo field is optional: ``None`` means the access point's firmware did
not send that line, which is distinct from sending an empty line.
"""

from __future__ import annotations

from dataclasses import dataclass

from wgdp.uptime import format_uptime


def _shown(value: str | None) -> str:
    return "?" if value is None else value


@dataclass(frozen=True)
class AccessPointDescriptor:
    """Identity and status of one discovered access point.

    Attributes:
        address: IPv4 address the AP reports for itself (from the response
            header, not the datagram source). None if the header bytes
            could not be read as an address.
        port: Port number advertised by the AP.
        name: Friendly name assigned to the AP (sysinfo line 0).
        model: Hardware model (line 1, or line 10 when present and
            non-blank).
        mac_address: Primary LAN MAC address (line 2).
        serial_number: Serial number (line 3).
        firmware_version: Firmware version (line 4).
        raw_uptime_seconds: Seconds since boot as sent (line 5).
        revision_or_alternate_model: Line 8 in the 9/10-line layout
            (hardware revision) or line 10 in the 11-line layout
            (alternate model string). Firmware gives no way to tell the
            two apart other than the line count.
    """

    address: str | None
    port: int
    name: str | None = None
    model: str | None = None
    mac_address: str | None = None
    serial_number: str | None = None
    firmware_version: str | None = None
    raw_uptime_seconds: str | None = None
    revision_or_alternate_model: str | None = None

    @property
    def uptime(self) -> str | None:
        """Formatted uptime, or None if the AP did not report one.

        Raises ValueError if the reported value is not numeric.
        """
        if self.raw_uptime_seconds is None:
            return None
        return format_uptime(self.raw_uptime_seconds)

    def to_dict(self) -> dict:
        """Return a JSON-ready mapping, omitting fields the AP did not send."""
        entry: dict = {"port": self.port}
        if self.address is not None:
            entry["address"] = self.address
        for key in (
            "name",
            "model",
            "mac_address",
            "serial_number",
            "firmware_version",
            "raw_uptime_seconds",
            "revision_or_alternate_model",
        ):
            value = getattr(self, key)
            if value is not None:
                entry[key] = value
        if self.raw_uptime_seconds is not None:
            try:
                entry["uptime"] = self.uptime
            except ValueError:
                pass
        return entry

    def __str__(self) -> str:
        if self.raw_uptime_seconds is None:
            uptime = "?"
        else:
            try:
                uptime = format_uptime(self.raw_uptime_seconds)
            except ValueError:
                uptime = self.raw_uptime_seconds
        return (
            f"{_shown(self.name)} ({_shown(self.model)} {_shown(self.serial_number)})"
            f" up: {uptime} @{_shown(self.address)}"
        )
