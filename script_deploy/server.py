from __future__ import annotations

import logging
from typing import Optional

from script_deploy.config.settings import DeployConfig
from script_deploy.deploy import deploy_script
from script_deploy.extractor import extract_text

try:
    from mcp.server.fastmcp import FastMCP
except ImportError as exc:  # pragma: no cover - dependency is optional at import time
    FastMCP = None
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None


def _require_server() -> "FastMCP":
    if FastMCP is None:
        raise SystemExit(
            "The mcp package is required to run the server. "
            "Install it with `pip install script-deploy[server]`."
        ) from _IMPORT_ERROR
    return FastMCP("script-deploy-server")


def _validate_required(name: str, value: Optional[str]) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"Missing required field: {name}")


def deploy_script_payload(projectDirectory: str, scriptsDirectory: Optional[str] = None) -> dict:
    _validate_required("projectDirectory", projectDirectory)
    config = DeployConfig.from_env()
    if scriptsDirectory:
        config.scripts_dir = scriptsDirectory
    result = deploy_script(project_dir=projectDirectory, config=config)
    return result.model_dump(mode="json")


def preview_script_payload(source: str) -> dict:
    _validate_required("source", source)
    return {"script": extract_text(source)}


def build_server() -> "FastMCP":
    server = _require_server()

    @server.tool(
            description="Publish the Script region of <projectDirectory>/Script.cs to the in-game scripts folder."
    )
    def deploy_script_tool(projectDirectory: str, scriptsDirectory: Optional[str] = None) -> dict:
        return deploy_script_payload(projectDirectory, scriptsDirectory)

    @server.tool(
            description="Return the de-indented Script region of the given source text without writing anything."
    )
    def preview_script_tool(source: str) -> dict:
        return preview_script_payload(source)

    return server


def main() -> None:
    logging.basicConfig(
        level=DeployConfig.from_env().log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    server = build_server()
    server.run()


if __name__ == "__main__":
    main()
