"""Configuration for cc-switch-tools."""

from cc_switch_tools.config.paths import Paths
from cc_switch_tools.config.runtime import InstallerConfig, UpdaterConfig
from cc_switch_tools.config.settings import Settings, SettingsManager

__all__ = [
    "InstallerConfig",
    "Paths",
    "Settings",
    "SettingsManager",
    "UpdaterConfig",
]
