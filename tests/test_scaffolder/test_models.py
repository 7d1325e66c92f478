"""Unit tests for the request and result models (mvi_scaffold.scaffolder.models).

Tests cover:
- Input normalisation (trimming, blank return type, dropped entries)
- Feature-name validation
- FeatureConfig projection into per-generator configs
- Text parsing helpers for dependencies, navigation parameters and methods
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mvi_scaffold.scaffolder.models import (
    EmptyMethodPolicy,
    FeatureConfig,
    GeneratedFile,
    GenerationResult,
    NavigationStyle,
    NavParameter,
    RepoMethod,
    RepositoryConfig,
    ScreenConfig,
    StateContainerConfig,
    parse_dependency_names,
    parse_nav_parameter,
    parse_repo_method,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------


class TestNormalisation:
    def test_blank_return_type_defaults_to_unit(self):
        method = RepoMethod(name="getUsers", return_type="  ")
        assert method.return_type == "Unit"
        assert method.parameters == ""

    def test_method_fields_are_trimmed(self):
        method = RepoMethod(name=" getUser ", return_type=" User ", parameters=" id: String ")
        assert (method.name, method.return_type, method.parameters) == ("getUser", "User", "id: String")

    def test_unnamed_methods_are_dropped(self):
        config = RepositoryConfig(
            feature_name="Users",
            methods=[RepoMethod(name=""), RepoMethod(name="getUsers"), RepoMethod(name="  ")],
        )
        assert [m.name for m in config.methods] == ["getUsers"]

    def test_incomplete_nav_parameters_are_dropped(self):
        config = ScreenConfig(
            feature_name="Detail",
            nav_parameters=[
                NavParameter(name="id", type="String"),
                NavParameter(name="", type="Int"),
                NavParameter(name="page", type=" "),
            ],
        )
        assert config.nav_parameters == [NavParameter(name="id", type="String")]

    def test_blank_dependency_names_are_dropped(self):
        config = StateContainerConfig(feature_name="Home", dependency_names=[" GetUser ", "", "  "])
        assert config.dependency_names == ["GetUser"]

    def test_feature_name_is_trimmed(self):
        assert StateContainerConfig(feature_name="  Home ").feature_name == "Home"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_feature_name_is_rejected(self, name):
        with pytest.raises(ValidationError):
            FeatureConfig(feature_name=name)

    @pytest.mark.parametrize("name", ["!!!", "---", "_ . _"])
    def test_name_without_letters_or_digits_is_rejected(self, name):
        with pytest.raises(ValidationError, match="has no letters or digits"):
            FeatureConfig(feature_name=name)

    @pytest.mark.parametrize("name", ["2fa code", " 9 Lives"])
    def test_leading_digit_is_rejected(self, name):
        with pytest.raises(ValidationError, match="must not start with a digit"):
            StateContainerConfig(feature_name=name)

    def test_digits_after_first_word_are_accepted(self):
        assert ScreenConfig(feature_name="Order v2").feature_name == "Order v2"

    def test_unknown_navigation_style_is_rejected(self):
        with pytest.raises(ValidationError):
            ScreenConfig(feature_name="Home", navigation_style="deep_link")

    def test_navigation_style_from_string(self):
        assert ScreenConfig(feature_name="Home", navigation_style="simple").navigation_style is NavigationStyle.SIMPLE

    def test_requests_are_frozen(self):
        config = StateContainerConfig(feature_name="Home")
        with pytest.raises(ValidationError):
            config.events_enabled = False


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_state_container_defaults(self):
        config = StateContainerConfig(feature_name="Home")
        assert config.events_enabled and config.refresh_enabled and config.ui_state_enabled
        assert not config.include_load_method
        assert config.dependency_names == []

    def test_feature_defaults(self):
        config = FeatureConfig(feature_name="Home")
        assert config.generate_screen and config.generate_controller
        assert not config.generate_repository
        assert config.empty_method_policy is EmptyMethodPolicy.SKIP
        assert config.navigation_style is NavigationStyle.NONE
        assert config.needs_http_client


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------


class TestProjection:
    def test_screen_injects_controller_iff_generated(self):
        with_vm = FeatureConfig(feature_name="Home", generate_controller=True)
        without_vm = FeatureConfig(feature_name="Home", generate_controller=False)
        assert with_vm.screen_config().inject_controller is True
        assert without_vm.screen_config().inject_controller is False

    def test_screen_config_carries_navigation(self, full_feature):
        screen = full_feature.screen_config()
        assert screen.feature_name == "User Profile"
        assert screen.navigation_style is NavigationStyle.TYPE_SAFE
        assert screen.route_parameters == [NavParameter(name="userId", type="String")]

    def test_state_container_config(self, full_feature):
        state = full_feature.state_container_config()
        assert state.dependency_names == ["GetProfile", "SaveProfile"]
        assert state.refresh_enabled == full_feature.refresh_enabled

    def test_repository_config(self, full_feature):
        repo = full_feature.repository_config()
        assert [m.name for m in repo.methods] == ["getProfile", "refresh"]
        assert repo.needs_http_client is True

    @pytest.mark.parametrize("style", [NavigationStyle.NONE, NavigationStyle.SIMPLE])
    def test_route_parameters_only_for_type_safe(self, style):
        config = ScreenConfig(
            feature_name="Detail",
            navigation_style=style,
            nav_parameters=[NavParameter(name="id", type="String")],
        )
        assert config.route_parameters == []


# ---------------------------------------------------------------------------
# Output models
# ---------------------------------------------------------------------------


class TestOutput:
    def test_relative_path(self):
        generated = GeneratedFile(directories=("home", "viewmodel"), file_name="HomeViewModel.kt", content="")
        assert generated.relative_path == "home/viewmodel/HomeViewModel.kt"

    def test_relative_path_without_directories(self):
        assert GeneratedFile(file_name="A.kt", content="").relative_path == "A.kt"

    def test_result_paths(self):
        result = GenerationResult(files=[GeneratedFile(directories=("x",), file_name="A.kt", content="")])
        assert result.paths == ["x/A.kt"]
        assert result.skipped == [] and result.overwritten == []


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


class TestParsing:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("GetUser, UpdateProfile,", ["GetUser", "UpdateProfile"]),
            ("", []),
            (" , ,", []),
            ("Single", ["Single"]),
        ],
    )
    def test_parse_dependency_names(self, text, expected):
        assert parse_dependency_names(text) == expected

    def test_parse_nav_parameter(self):
        assert parse_nav_parameter(" id : String ") == NavParameter(name="id", type="String")

    def test_parse_nav_parameter_keeps_generic_types(self):
        assert parse_nav_parameter("ids:List<Int>").type == "List<Int>"

    def test_parse_nav_parameter_requires_colon(self):
        with pytest.raises(ValueError, match="name:Type"):
            parse_nav_parameter("id")

    def test_parse_repo_method_full(self):
        method = parse_repo_method("getUser|User|id: String, force: Boolean")
        assert method == RepoMethod(name="getUser", return_type="User", parameters="id: String, force: Boolean")

    def test_parse_repo_method_name_only(self):
        method = parse_repo_method("getUsers")
        assert method.return_type == "Unit"
        assert method.parameters == ""
