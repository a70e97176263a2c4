"""RemoteController — the invoker.

Two states: unbound (no command) and bound.  Pressing the button while
unbound is a silent no-op, not an error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from remotectl.domain.commands import Command

logger = logging.getLogger(__name__)


class RemoteController:
    """Holds at most one command and executes it on demand."""

    def __init__(self, command: Command | None = None) -> None:
        self._command: Command | None = command

    @property
    def command(self) -> Command | None:
        """The currently bound command, or None."""
        return self._command

    @property
    def is_bound(self) -> bool:
        return self._command is not None

    def set_command(self, command: Command | None) -> None:
        """Bind *command*, replacing any previous one.  ``None`` unbinds."""
        self._command = command
        logger.debug("Bound command: %r", command)

    def press_button(self) -> None:
        """Execute the bound command; do nothing when unbound."""
        if self._command is None:
            return
        logger.debug("Pressing button for %r", self._command)
        self._command.execute()
