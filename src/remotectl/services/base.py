"""BaseService — shared foundation for remotectl services.

Services build fresh devices wired to the plugin hook relay and return
:class:`~remotectl.services.result.ServiceResult`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from remotectl.config.models import DevicesConfig
from remotectl.domain.devices import DeviceStatus, Light, Thermostat

if TYPE_CHECKING:
    from remotectl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Args:
        devices: Names given to the devices the service creates.
        plugins: Receives ``post_device_action`` for every status change.
            ``None`` disables event dispatch.
    """

    def __init__(
        self,
        devices: DevicesConfig | None = None,
        plugins: PluginManager | None = None,
    ) -> None:
        self._devices = devices or DevicesConfig()
        self._plugins = plugins

    def _build_devices(
        self, messages: list[str], warnings: list[str]
    ) -> tuple[Light, Thermostat]:
        """Create a fresh light and thermostat reporting into *messages*."""

        def on_status(status: DeviceStatus) -> None:
            messages.append(status.message)
            self._dispatch_event(status, warnings)

        light = Light(self._devices.light_name, on_status=on_status)
        thermostat = Thermostat(self._devices.thermostat_name, on_status=on_status)
        return light, thermostat

    def _dispatch_event(self, status: DeviceStatus, warnings: list[str]) -> None:
        """Dispatch a device status event. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        # Each implementation runs in isolation, in pluggy order (last registered first).
        for impl in reversed(self._plugins.hook.post_device_action.get_hookimpls()):
            try:
                impl.function(
                    device=status.device,
                    action=status.action,
                    message=status.message,
                    state=status.state,
                )
            except Exception:
                logger.debug(
                    "Plugin %s failed on %s.%s",
                    impl.plugin_name,
                    status.device,
                    status.action,
                    exc_info=True,
                )
                warnings.append(
                    f"Plugin {impl.plugin_name} failed on {status.device}.{status.action}"
                )
