"""Console rendering for discovered access points and status messages.

Status lines go to stderr and are coloured when it is an interactive
terminal and NO_COLOR is not set. Access points go to stdout, either as
the descriptor's text line or as one JSON object per line.
"""

from __future__ import annotations

import json
import os
import sys
from typing import TextIO

from wgdp.types import AccessPointDescriptor

BOLD = "1"
RED = "31"
YELLOW = "33"


def use_color(stream: TextIO = sys.stderr) -> bool:
    """True if the given stream is an interactive terminal and NO_COLOR is not set."""
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(text: str, code: str, enabled: bool) -> str:
    """Wrap text in ANSI color escape if enabled."""
    if not enabled:
        return text
    return f"\033[{code}m{text}\033[0m"


def status(message: str, stream: TextIO | None = None) -> None:
    """Print a progress line (e.g. "Broadcasting on ...") to stderr."""
    stream = stream or sys.stderr
    print(colorize(message, BOLD, use_color(stream)), file=stream)


def error(message: str, hint: str = "", stream: TextIO | None = None) -> None:
    """Print ``Error: <message>`` plus an optional indented hint to stderr."""
    stream = stream or sys.stderr
    print(colorize(f"Error: {message}", RED, use_color(stream)), file=stream)
    if hint:
        print(colorize(f"  {hint}", YELLOW, use_color(stream)), file=stream)


def format_access_point(ap: AccessPointDescriptor, as_json: bool = False) -> str:
    """Render one access point as a text line or a compact JSON object."""
    if as_json:
        return json.dumps(ap.to_dict(), sort_keys=True)
    return str(ap)
