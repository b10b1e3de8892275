"""
Command-line entry point.

Run from a project directory containing Script.cs:

    script-deploy

Takes no arguments. Prints one message describing the outcome and exits
with status 0 on success, 1 otherwise.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from script_deploy.config.settings import DeployConfig
from script_deploy.deploy import deploy_script
from script_deploy.models import DeployResult, DeployStatus

_FAILURE_MESSAGES = {
    DeployStatus.SOURCE_UNAVAILABLE: "Unable to open source file {sourcePath}",
    DeployStatus.DESTINATION_DIRECTORY_UNAVAILABLE: "Unable to create directory {failedPath}",
    DeployStatus.DESTINATION_UNAVAILABLE: "Unable to open target file {targetPath}",
    DeployStatus.IO_FAILURE: "I/O error while copying script: {failedPath}",
    DeployStatus.CONFIGURATION_ERROR: "Unable to locate scripts folder: {message}",
}


def format_result(result: DeployResult) -> str:
    """Human-readable message for a deploy outcome."""
    if result.ok:
        lines = [result.message]
        if result.mismatchedRegions:
            where = ", ".join(str(n) for n in result.mismatchedRegions)
            lines.insert(0, f"Mismatched regions (line {where})")
        return "\n".join(lines)
    template = _FAILURE_MESSAGES[result.status]
    return template.format(**result.model_dump())


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        print(f"Error: script-deploy takes no arguments (got {' '.join(args)})", file=sys.stderr)
        return 2

    config = DeployConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    result = deploy_script(config=config)
    if result.ok:
        print(format_result(result))
        return 0

    print(f"Error: {format_result(result)}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
