"""Shared pytest fixtures for the MVI Scaffold test suite.

Provides reusable fixtures for:
- Type path settings (complete and incomplete)
- The bundled template renderer
- In-memory and on-disk target directories inside a Kotlin source tree
- Representative generation requests
"""

from __future__ import annotations

from pathlib import Path

import pytest

from mvi_scaffold.config import TypePathSettings
from mvi_scaffold.scaffolder.models import (
    FeatureConfig,
    NavigationStyle,
    NavParameter,
    RepoMethod,
)
from mvi_scaffold.scaffolder.packages import LocalDirectory, MemoryDirectory
from mvi_scaffold.scaffolder.sink import MemoryFileSink
from mvi_scaffold.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> TypePathSettings:
    """Default settings: every required path configured."""
    return TypePathSettings()


@pytest.fixture
def custom_settings() -> TypePathSettings:
    """Settings pointing at a different core library, to catch hard-coded names."""
    return TypePathSettings(
        app_view_model_path="org.demo.arch.MviViewModel",
        view_model_config_path="org.demo.arch.MviConfig",
        base_state_path="org.demo.arch.ApiState",
        base_event_path="org.demo.arch.OneShotEvent",
        base_ui_state_path="org.demo.arch.ScreenState",
        refreshable_path="org.demo.arch.CanRefresh",
        base_intent_path="org.demo.arch.UserIntent",
        composable_route_path="org.demo.nav.routeComposable",
        composable_safe_type_path="org.demo.nav.typedComposable",
    )


@pytest.fixture
def incomplete_settings() -> TypePathSettings:
    """Settings with two required paths left blank."""
    return TypePathSettings(base_state_path="", base_intent_path="   ")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Target directories
# ---------------------------------------------------------------------------

SOURCE_ROOT = "/work/app/src/main/kotlin"


@pytest.fixture
def memory_target() -> MemoryDirectory:
    """In-memory target directory resolving to package ``com.acme.features``."""
    return MemoryDirectory(f"{SOURCE_ROOT}/com/acme/features")


@pytest.fixture
def memory_sink() -> MemoryFileSink:
    return MemoryFileSink()


@pytest.fixture
def kotlin_source_dir(tmp_path: Path) -> Path:
    """On-disk target directory ``<tmp>/app/src/main/kotlin/com/acme``."""
    target = tmp_path / "app" / "src" / "main" / "kotlin" / "com" / "acme"
    target.mkdir(parents=True)
    return target


@pytest.fixture
def local_target(kotlin_source_dir: Path) -> LocalDirectory:
    return LocalDirectory(kotlin_source_dir)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@pytest.fixture
def full_feature() -> FeatureConfig:
    """A feature with every part enabled and type-safe navigation."""
    return FeatureConfig(
        feature_name="User Profile",
        generate_screen=True,
        generate_controller=True,
        generate_repository=True,
        navigation_style=NavigationStyle.TYPE_SAFE,
        nav_parameters=[NavParameter(name="userId", type="String")],
        dependency_names=["GetProfile", "SaveProfile"],
        methods=[
            RepoMethod(name="getProfile", return_type="Profile", parameters="userId: String"),
            RepoMethod(name="refresh"),
        ],
    )
