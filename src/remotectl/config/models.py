"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, remotectl.toml only contains
overrides.  An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel


class DevicesConfig(BaseModel):
    """[devices] section."""

    model_config = {"frozen": True}

    light_name: str = "light"
    thermostat_name: str = "thermostat"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
