"""Configuration management for script-deploy.

Loads settings from environment variables with sensible defaults.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG = logging.getLogger("config")


def _log_level(value: str, default: str = "INFO") -> str:
    """Upper-cased level name, or ``default`` if logging does not know it."""
    level = value.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    LOG.warning("Unknown log level %r, using %s", value, default)
    return default


@dataclass
class DeployConfig:
    """Where scripts are read from and published to."""
    appdata_dir: str = ""  # empty = APPDATA not set
    scripts_dir: str = ""  # empty = derive from appdata_dir
    scripts_subpath: tuple[str, ...] = ("SpaceEngineers", "IngameScripts", "local")
    source_name: str = "Script.cs"
    target_name: str = "script.cs"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DeployConfig":
        return cls(
            appdata_dir=os.getenv("APPDATA", ""),
            scripts_dir=os.getenv("SCRIPT_DEPLOY_SCRIPTS_DIR", ""),
            source_name=os.getenv("SCRIPT_DEPLOY_SOURCE", "Script.cs"),
            target_name=os.getenv("SCRIPT_DEPLOY_TARGET", "script.cs"),
            log_level=_log_level(os.getenv("SCRIPT_DEPLOY_LOG_LEVEL", "INFO")),
        )
