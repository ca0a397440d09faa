"""Rendering of the access point uptime counter."""

from __future__ import annotations

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR


def format_uptime(raw: str) -> str:
    """Convert a Linux-style uptime value into ``"{d}d, {h}:{m}+{s}s"``.

    The value is seconds since boot as decimal text; any fractional part
    is truncated toward zero, so ``"59.9"`` renders as ``"0d, 0:0+59s"``.
    Components are not zero-padded.

    Raises ValueError if the text is not a non-negative number.
    """
    try:
        remainder = int(float(raw))
    except OverflowError as e:
        raise ValueError(f"Uptime is not finite: {raw!r}") from e
    if remainder < 0:
        raise ValueError(f"Uptime must not be negative: {raw!r}")

    days, remainder = divmod(remainder, SECONDS_PER_DAY)
    hours, remainder = divmod(remainder, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)

    return f"{days}d, {hours}:{minutes}+{seconds}s"
