"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from searchscope.core.query.query_builder import QueryBuilder
from searchscope.domain.workspace import (
    MultiFolder,
    NoWorkspace,
    SingleFolder,
    Workspace,
    WorkspaceFolder,
)
from tests.helpers.fakes import FakeConfigProvider, FakeEnvironment, FakeWorkspaceProvider

# ============================================================================
# Global Config Isolation
# ============================================================================
# The TOML config provider reads ~/.config/searchscope/config.toml. Point it
# at an empty directory so a developer's own config never leaks into tests.


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the global config location to an empty temp directory."""
    config_home = tmp_path / "xdg_config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "searchscope" / "config.toml"


# ============================================================================
# Workspace Fixtures
# ============================================================================

APP_ROOT = Path("/ws/app")
LIB_ROOT = Path("/ws/lib")


@pytest.fixture
def app_folder() -> WorkspaceFolder:
    return WorkspaceFolder(name="app", path=APP_ROOT)


@pytest.fixture
def lib_folder() -> WorkspaceFolder:
    return WorkspaceFolder(name="lib", path=LIB_ROOT)


@pytest.fixture
def no_workspace() -> NoWorkspace:
    return NoWorkspace()


@pytest.fixture
def single_workspace(app_folder: WorkspaceFolder) -> SingleFolder:
    return SingleFolder(app_folder)


@pytest.fixture
def multi_workspace(app_folder: WorkspaceFolder, lib_folder: WorkspaceFolder) -> MultiFolder:
    return MultiFolder((app_folder, lib_folder))


# ============================================================================
# QueryBuilder Fixtures
# ============================================================================


@pytest.fixture
def config_provider() -> FakeConfigProvider:
    return FakeConfigProvider()


@pytest.fixture
def environment() -> FakeEnvironment:
    return FakeEnvironment(user_home="/home/tester")


@pytest.fixture
def make_builder(
    config_provider: FakeConfigProvider,
    environment: FakeEnvironment,
) -> Callable[[Workspace], QueryBuilder]:
    """Factory fixture creating a QueryBuilder over a given workspace."""

    def _make(workspace: Workspace) -> QueryBuilder:
        return QueryBuilder(
            config_provider=config_provider,
            workspace_provider=FakeWorkspaceProvider(workspace),
            environment=environment,
        )

    return _make
