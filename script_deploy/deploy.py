"""
One-shot deploy of a project's Script region.

Resolves the source and destination for a project directory, copies the
Script region, and reports the outcome as a DeployResult. Fatal failures are
returned, not raised; presentation is left to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path

from script_deploy.config.settings import DeployConfig
from script_deploy.errors import DeployError
from script_deploy.extractor import copy_script
from script_deploy.models import DeployResult, DeployStatus
from script_deploy.paths import resolve_paths

LOG = logging.getLogger("deploy")


def deploy_script(
    project_dir: Path | str | None = None,
    config: DeployConfig | None = None,
) -> DeployResult:
    """
    Publish ``<project_dir>/Script.cs`` to the scripts folder.

    Args:
        project_dir: Project directory (default: current working directory)
        config: Settings (default: DeployConfig.from_env())

    Returns:
        DeployResult with status SUCCESS or the failure kind. A failed
        result names the offending path in ``failedPath`` where one is known.
    """
    config = config if config is not None else DeployConfig.from_env()

    try:
        paths = resolve_paths(project_dir, config)
    except DeployError as exc:
        LOG.debug("Deploy failed (%s): %s", exc.status.value, exc)
        return DeployResult(status=exc.status, message=str(exc))

    try:
        stats = copy_script(paths.source, paths.target)
    except DeployError as exc:
        LOG.debug("Deploy failed (%s): %s", exc.status.value, exc)
        failed_path = str(exc.path) if exc.path is not None else None
        return DeployResult(
            status=exc.status,
            message=str(exc),
            sourcePath=str(paths.source),
            targetPath=str(paths.target),
            failedPath=failed_path,
        )

    return DeployResult(
        status=DeployStatus.SUCCESS,
        message=f"Script written to {paths.target_dir}",
        sourcePath=str(paths.source),
        targetPath=str(paths.target),
        linesWritten=stats.lines_written,
        mismatchedRegions=stats.mismatched_lines,
    )
