"""
Publish the ``Script`` region of an annotated source file.

Usage:
    from script_deploy import deploy_script

    result = deploy_script("/path/to/MyProject")
    if not result.ok:
        print(result.message)
"""

from __future__ import annotations

from script_deploy.deploy import deploy_script
from script_deploy.errors import (
    ConfigurationError,
    DeployError,
    DestinationDirectoryError,
    DestinationUnavailableError,
    ScriptIOError,
    SourceUnavailableError,
)
from script_deploy.extractor import ExtractionStats, RegionScanner, copy_script, extract_region, extract_text
from script_deploy.models import DeployResult, DeployStatus

__all__ = [
    # Main interface
    "deploy_script",
    "DeployResult",
    "DeployStatus",
    # Extraction
    "RegionScanner",
    "ExtractionStats",
    "copy_script",
    "extract_region",
    "extract_text",
    # Errors
    "DeployError",
    "SourceUnavailableError",
    "DestinationDirectoryError",
    "DestinationUnavailableError",
    "ScriptIOError",
    "ConfigurationError",
]
