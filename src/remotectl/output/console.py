"""Rich Console factory and theme for remotectl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

REMOTE_THEME = Theme(
    {
        "remote.ok": "bold green",
        "remote.error": "bold red",
        "remote.op": "bold cyan",
        "remote.key": "dim",
        "remote.action": "bold blue",
        "remote.device.light": "yellow",
        "remote.device.thermostat": "magenta",
    }
)

_DEVICE_STYLES: dict[str, str] = {
    "light": "remote.device.light",
    "thermostat": "remote.device.thermostat",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=REMOTE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_device(device: str) -> str:
    """Return the Rich style name for a device kind."""
    return _DEVICE_STYLES.get(device, "")
