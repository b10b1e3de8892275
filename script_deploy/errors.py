"""
Fatal error taxonomy for a deploy run.

Every error aborts the single pass immediately. Each class carries the
DeployStatus it maps to, so callers can turn any DeployError into a
DeployResult without an isinstance ladder.

A close marker with no open region is not an error; it is logged and
counted by the extractor.
"""

from __future__ import annotations

from pathlib import Path

from script_deploy.models import DeployStatus


class DeployError(Exception):
    """Base class for fatal deploy failures."""

    status: DeployStatus = DeployStatus.IO_FAILURE

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class SourceUnavailableError(DeployError):
    """Raised when the source file cannot be opened or read."""

    status = DeployStatus.SOURCE_UNAVAILABLE


class DestinationDirectoryError(DeployError):
    """Raised when the destination directory is missing and cannot be created."""

    status = DeployStatus.DESTINATION_DIRECTORY_UNAVAILABLE


class DestinationUnavailableError(DeployError):
    """Raised when the target file cannot be opened for writing."""

    status = DeployStatus.DESTINATION_UNAVAILABLE


class ScriptIOError(DeployError):
    """Raised when a read or write fails after both files were opened."""

    status = DeployStatus.IO_FAILURE


class ConfigurationError(DeployError):
    """Raised when the scripts root cannot be resolved from the environment."""

    status = DeployStatus.CONFIGURATION_ERROR
