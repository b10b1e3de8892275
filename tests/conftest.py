"""
Shared test fixtures.

Fixtures build a throwaway project directory named ``Foo`` holding a
Script.cs, plus a scripts root under tmp_path, so no test touches the real
APPDATA folder.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from script_deploy.config.settings import DeployConfig

SAMPLE_SOURCE = textwrap.dedent("""\
    #region Other
    junk
    #endregion
        #region Script
        line one

        line two
        #endregion
    """)

SAMPLE_OUTPUT = "line one\n\nline two\n"


@pytest.fixture
def sample_source() -> str:
    return SAMPLE_SOURCE


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Project directory ``Foo`` containing the sample Script.cs."""
    project = tmp_path / "Foo"
    project.mkdir()
    (project / "Script.cs").write_text(SAMPLE_SOURCE, encoding="utf-8")
    return project


@pytest.fixture
def scripts_root(tmp_path: Path) -> Path:
    return tmp_path / "scripts"


@pytest.fixture
def config(scripts_root: Path) -> DeployConfig:
    return DeployConfig(scripts_dir=str(scripts_root))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable DeployConfig.from_env() reads."""
    for name in (
        "APPDATA",
        "SCRIPT_DEPLOY_SCRIPTS_DIR",
        "SCRIPT_DEPLOY_SOURCE",
        "SCRIPT_DEPLOY_TARGET",
        "SCRIPT_DEPLOY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
