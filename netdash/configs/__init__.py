"""Configuration for netdash: settings, constants and configuration errors."""

from netdash.configs.settings import DashboardSettings, WireFormat, load_settings

__all__ = [
    "DashboardSettings",
    "WireFormat",
    "load_settings",
]
