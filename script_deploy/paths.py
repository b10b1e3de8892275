"""
Source and destination path resolution.

The source lives in the project directory. The destination is the scripts
root joined with the project name, which is the last segment of the project
directory:

    <project>/Script.cs  ->  <APPDATA>/SpaceEngineers/IngameScripts/local/<project name>/script.cs
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from script_deploy.config.settings import DeployConfig
from script_deploy.errors import ConfigurationError

LOG = logging.getLogger("paths")


@dataclass(frozen=True)
class DeployPaths:
    source: Path
    target_dir: Path
    target: Path


def get_scripts_path(config: DeployConfig) -> Path:
    """
    Resolve the root directory scripts are published under.

    An explicit ``scripts_dir`` wins; otherwise the fixed subpath is joined
    onto ``appdata_dir``.

    Raises:
        ConfigurationError: Neither scripts_dir nor appdata_dir is set
    """
    if config.scripts_dir:
        return Path(config.scripts_dir)
    if not config.appdata_dir:
        raise ConfigurationError(
            "APPDATA is not set. Set APPDATA or SCRIPT_DEPLOY_SCRIPTS_DIR to choose where scripts are written."
        )
    return Path(config.appdata_dir).joinpath(*config.scripts_subpath)


def get_project_name(cwd: Path | str | None = None) -> str:
    """Name of the project: the last segment of ``cwd`` (default: current directory)."""
    path = Path(cwd) if cwd is not None else Path.cwd()
    name = path.resolve().name
    if not name:
        raise ConfigurationError(f"Cannot derive a project name from {path}", path)
    return name


def resolve_paths(project_dir: Path | str | None, config: DeployConfig) -> DeployPaths:
    project_dir = Path(project_dir) if project_dir is not None else Path.cwd()
    target_dir = get_scripts_path(config) / get_project_name(project_dir)
    paths = DeployPaths(
        source=project_dir / config.source_name,
        target_dir=target_dir,
        target=target_dir / config.target_name,
    )
    LOG.debug("Resolved source=%s target=%s", paths.source, paths.target)
    return paths
