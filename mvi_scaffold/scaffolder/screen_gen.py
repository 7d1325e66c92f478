"""Screen generation: a Compose entry point plus optional navigation wiring.

Generates, below the target directory::

    <feature>/<Feature>Screen.kt
    <feature>/navigation/<Feature>Navigation.kt   (unless navigation is NONE)

The route function's parameter list is computed once by
:func:`route_parameters` and reused both for its declaration in the screen
file and for the call site in the navigation file, so the names always match.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mvi_scaffold.config import CapabilityKey, TypePathSettings
from mvi_scaffold.naming import route_constant, route_value, to_camel, to_pascal

from .models import GeneratedFile, NavigationStyle, ScreenConfig
from .packages import join_package
from .templates import TemplateRenderer, default_renderer
from .viewmodel_gen import state_package, view_model_package

COMPOSABLE_IMPORT = "androidx.compose.runtime.Composable"
STATE_FLOW_IMPORT = "kotlinx.coroutines.flow.StateFlow"
KOIN_VIEW_MODEL_IMPORT = "org.koin.compose.viewmodel.koinViewModel"
SERIALIZABLE_IMPORT = "kotlinx.serialization.Serializable"
NAVIGATION_IMPORTS = (
    "androidx.navigation.NavController",
    "androidx.navigation.NavGraphBuilder",
    "androidx.navigation.NavOptions",
)

CONTROLLER_PARAM = "viewModel"
BACK_PARAM = "navigationBack"


# ---------------------------------------------------------------------------
# Route signature
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RouteParameter:
    """One parameter of the ``<Feature>Route`` function.

    ``navigation_source`` is the expression the navigation file passes for
    it, or ``None`` when the parameter has a default and is left out.
    """

    name: str
    declaration: str
    navigation_source: str | None


def route_parameters(config: ScreenConfig) -> list[RouteParameter]:
    """Parameters of the route function, in declaration order."""
    stem = to_pascal(config.feature_name)
    params = [
        RouteParameter(p.name, f"{p.name}: {p.type}", f"args.{p.name}")
        for p in config.route_parameters
    ]
    if config.inject_controller:
        params.append(
            RouteParameter(
                CONTROLLER_PARAM,
                f"{CONTROLLER_PARAM}: {stem}ViewModel = koinViewModel()",
                None,
            )
        )
    if config.has_navigation_back:
        params.append(RouteParameter(BACK_PARAM, f"{BACK_PARAM}: () -> Unit", BACK_PARAM))
    return params


def route_call_arguments(config: ScreenConfig) -> list[str]:
    """Named arguments the navigation file passes when invoking the route."""
    return [
        f"{param.name} = {param.navigation_source}"
        for param in route_parameters(config)
        if param.navigation_source is not None
    ]


# ---------------------------------------------------------------------------
# Packages
# ---------------------------------------------------------------------------


def screen_package(base_package: str, feature_name: str) -> str:
    return join_package(base_package, to_camel(feature_name))


def navigation_package(base_package: str, feature_name: str) -> str:
    return join_package(screen_package(base_package, feature_name), "navigation")


# ---------------------------------------------------------------------------
# File builders
# ---------------------------------------------------------------------------


def build_screen_file(
    config: ScreenConfig,
    base_package: str,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render ``<Feature>Screen.kt`` with the outer route and inner screen functions.

    The inner screen receives the view-model's state flows and an intent
    callback rather than the view-model itself.
    """
    renderer = renderer or default_renderer()
    stem = to_pascal(config.feature_name)
    state_pkg = state_package(base_package, config.feature_name)
    ui_state_type = f"{stem}UIState" if config.ui_state_enabled else "Unit"

    imports = [COMPOSABLE_IMPORT]
    if config.inject_controller:
        imports += [
            join_package(view_model_package(base_package, config.feature_name), f"{stem}ViewModel"),
            join_package(state_pkg, f"{stem}Intent"),
            join_package(state_pkg, f"{stem}State"),
        ]
        if config.ui_state_enabled:
            imports.append(join_package(state_pkg, f"{stem}UIState"))
        imports += [STATE_FLOW_IMPORT, KOIN_VIEW_MODEL_IMPORT]

    screen_args: list[str] = []
    screen_params: list[str] = []
    for param in config.route_parameters:
        screen_args.append(f"{param.name} = {param.name}")
        screen_params.append(f"{param.name}: {param.type}")
    if config.inject_controller:
        screen_args += [
            f"apiState = {CONTROLLER_PARAM}.state",
            f"uiState = {CONTROLLER_PARAM}.uiState",
            f"onIntent = {CONTROLLER_PARAM}::handleIntent",
        ]
        screen_params += [
            f"apiState: StateFlow<{stem}State>",
            f"uiState: StateFlow<{ui_state_type}>",
            f"onIntent: ({stem}Intent) -> Unit = {{}}",
        ]
    if config.has_navigation_back:
        screen_args.append(f"{BACK_PARAM} = {BACK_PARAM}")
        screen_params.append(f"{BACK_PARAM}: () -> Unit")

    context: dict[str, Any] = {
        "package": screen_package(base_package, config.feature_name),
        "imports": imports,
        "stem": stem,
        "route_params": [param.declaration for param in route_parameters(config)],
        "screen_args": screen_args,
        "screen_params": screen_params,
    }
    return renderer.render("screen/Screen.kt.j2", context)


def build_simple_navigation(
    config: ScreenConfig,
    settings: TypePathSettings,
    base_package: str,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render a string-route navigation file (route constant + extensions)."""
    renderer = renderer or default_renderer()
    stem = to_pascal(config.feature_name)
    return renderer.render(
        "screen/SimpleNavigation.kt.j2",
        {
            "package": navigation_package(base_package, config.feature_name),
            "imports": [
                *NAVIGATION_IMPORTS,
                settings.get(CapabilityKey.COMPOSABLE_ROUTE),
                join_package(screen_package(base_package, config.feature_name), f"{stem}Route"),
            ],
            "stem": stem,
            "folder": to_camel(config.feature_name),
            "route_const": route_constant(config.feature_name),
            "route_value": route_value(config.feature_name),
            "composable_route": settings.simple(CapabilityKey.COMPOSABLE_ROUTE),
            "has_navigation_back": config.has_navigation_back,
            "route_args": route_call_arguments(config),
        },
    )


def build_type_safe_navigation(
    config: ScreenConfig,
    settings: TypePathSettings,
    base_package: str,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render a ``@Serializable`` destination with typed navigation functions."""
    renderer = renderer or default_renderer()
    stem = to_pascal(config.feature_name)
    return renderer.render(
        "screen/TypeSafeNavigation.kt.j2",
        {
            "package": navigation_package(base_package, config.feature_name),
            "imports": [
                *NAVIGATION_IMPORTS,
                settings.get(CapabilityKey.COMPOSABLE_SAFE_TYPE),
                SERIALIZABLE_IMPORT,
                join_package(screen_package(base_package, config.feature_name), f"{stem}Route"),
            ],
            "stem": stem,
            "folder": to_camel(config.feature_name),
            "nav_parameters": config.route_parameters,
            "composable_safe_type": settings.simple(CapabilityKey.COMPOSABLE_SAFE_TYPE),
            "has_navigation_back": config.has_navigation_back,
            "route_args": route_call_arguments(config),
        },
    )


# ---------------------------------------------------------------------------
# ScreenGenerator
# ---------------------------------------------------------------------------


class ScreenGenerator:
    """Builds the screen file and, when requested, its navigation file."""

    def __init__(
        self,
        settings: TypePathSettings,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings
        self.renderer = renderer or default_renderer()

    def build_files(self, config: ScreenConfig, base_package: str) -> list[GeneratedFile]:
        """Render the screen (and navigation) files without touching the file system."""
        folder = to_camel(config.feature_name)
        stem = to_pascal(config.feature_name)

        files = [
            GeneratedFile(
                directories=(folder,),
                file_name=f"{stem}Screen.kt",
                content=build_screen_file(config, base_package, self.renderer),
            )
        ]

        if config.navigation_style is NavigationStyle.SIMPLE:
            navigation = build_simple_navigation(config, self.settings, base_package, self.renderer)
        elif config.navigation_style is NavigationStyle.TYPE_SAFE:
            navigation = build_type_safe_navigation(config, self.settings, base_package, self.renderer)
        else:
            return files

        files.append(
            GeneratedFile(
                directories=(folder, "navigation"),
                file_name=f"{stem}Navigation.kt",
                content=navigation,
            )
        )
        return files
