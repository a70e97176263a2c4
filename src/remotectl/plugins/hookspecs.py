"""Pluggy hook specifications for remotectl device events."""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("remotectl")


class RemotectlHookSpec:
    """Hook specifications for the remotectl plugin system."""

    @hookspec
    def post_device_action(
        self,
        device: str,
        action: str,
        message: str,
        state: dict[str, Any],
    ) -> None:
        """Called after a device changes state.

        *message* is the human-readable status line (e.g. ``"Light is ON"``)
        and *state* a snapshot of the device taken after the change.
        """
