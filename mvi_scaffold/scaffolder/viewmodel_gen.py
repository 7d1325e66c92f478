"""State-container generation: the sealed state/intent file and its view-model.

Generates, below the target directory::

    <feature>/viewmodel/state/<Feature>State.kt
    <feature>/viewmodel/<Feature>ViewModel.kt

Which declarations the state file contains, which capabilities each one
extends, and which types the view-model imports are all derived from the
single ``CAPABILITY_RULES`` table, so the two files always agree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mvi_scaffold.config import CapabilityKey, TypePathSettings
from mvi_scaffold.naming import to_camel, to_pascal

from .models import GeneratedFile, StateContainerConfig
from .packages import join_package
from .templates import TemplateRenderer, default_renderer


# ---------------------------------------------------------------------------
# Capability rule table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CapabilityRule:
    """Attach *capability* to the *declaration* when every flag in *requires* is on."""

    declaration: str
    capability: CapabilityKey
    requires: tuple[str, ...] = ()

    def applies(self, config: StateContainerConfig) -> bool:
        return all(getattr(config, flag) for flag in self.requires)


CAPABILITY_RULES: tuple[CapabilityRule, ...] = (
    CapabilityRule("State", CapabilityKey.STATE),
    CapabilityRule("Event", CapabilityKey.EVENT, ("events_enabled",)),
    CapabilityRule("UIState", CapabilityKey.UI_STATE, ("ui_state_enabled",)),
    CapabilityRule("UIState", CapabilityKey.REFRESHABLE, ("ui_state_enabled", "refresh_enabled")),
    CapabilityRule("Intent", CapabilityKey.INTENT),
)

UNIT_TYPE = "Unit"


def active_rules(config: StateContainerConfig) -> list[CapabilityRule]:
    """Rules that apply to *config*, in table order."""
    return [rule for rule in CAPABILITY_RULES if rule.applies(config)]


def declared_kinds(config: StateContainerConfig) -> list[str]:
    """Declaration kinds emitted into the state file (State, Event, UIState, Intent)."""
    kinds: list[str] = []
    for rule in active_rules(config):
        if rule.declaration not in kinds:
            kinds.append(rule.declaration)
    return kinds


def declared_types(config: StateContainerConfig) -> list[str]:
    """Type names the state file declares, e.g. ``["HomeState", "HomeIntent"]``."""
    stem = to_pascal(config.feature_name)
    return [f"{stem}{kind}" for kind in declared_kinds(config)]


def intent_cases(config: StateContainerConfig) -> list[str]:
    """Cases of the Intent closed variant, in declaration order."""
    stem = to_pascal(config.feature_name)
    cases = ["ClearState", f"Load{stem}"]
    if config.refresh_enabled:
        cases.append("RefreshRequest")
    return cases


# ---------------------------------------------------------------------------
# Packages and file locations
# ---------------------------------------------------------------------------


def view_model_package(base_package: str, feature_name: str) -> str:
    return join_package(base_package, to_camel(feature_name), "viewmodel")


def state_package(base_package: str, feature_name: str) -> str:
    return join_package(view_model_package(base_package, feature_name), "state")


# ---------------------------------------------------------------------------
# File builders
# ---------------------------------------------------------------------------


def build_state_file(
    config: StateContainerConfig,
    settings: TypePathSettings,
    package: str,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render ``<Feature>State.kt``: State, optional Event/UIState, and Intent."""
    renderer = renderer or default_renderer()
    rules = active_rules(config)

    supertypes: dict[str, str] = {}
    for rule in rules:
        name = settings.simple(rule.capability)
        if rule.declaration in supertypes:
            supertypes[rule.declaration] += f", {name}"
        else:
            supertypes[rule.declaration] = name

    context: dict[str, Any] = {
        "package": package,
        "imports": [settings.get(rule.capability) for rule in rules],
        "stem": to_pascal(config.feature_name),
        "supertypes": supertypes,
        "base_ui_state": settings.simple(CapabilityKey.UI_STATE),
        "events_enabled": config.events_enabled,
        "ui_state_enabled": config.ui_state_enabled,
        "refresh_enabled": config.refresh_enabled,
        "intent_cases": intent_cases(config),
    }
    return renderer.render("viewmodel/State.kt.j2", context)


def build_view_model_file(
    config: StateContainerConfig,
    settings: TypePathSettings,
    package: str,
    state_pkg: str,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render ``<Feature>ViewModel.kt`` wired to the declarations of the state file."""
    renderer = renderer or default_renderer()
    stem = to_pascal(config.feature_name)
    kinds = declared_kinds(config)

    def type_for(kind: str) -> str:
        return f"{stem}{kind}" if kind in kinds else UNIT_TYPE

    load_function = f"load{stem}"
    actions = {
        "ClearState": f"setState({stem}State.Idle)",
        f"Load{stem}": f"{load_function}()",
        "RefreshRequest": f"refreshRequest {{ {load_function}() }}",
    }

    imports = [
        settings.get(CapabilityKey.VIEW_MODEL),
        settings.get(CapabilityKey.VIEW_MODEL_CONFIG),
        *(join_package(state_pkg, name) for name in sorted(declared_types(config))),
    ]

    context: dict[str, Any] = {
        "package": package,
        "imports": imports,
        "stem": stem,
        "dependencies": [
            {
                "variable": f"{to_camel(name)}UseCase",
                "type_name": f"{name}UseCase",
            }
            for name in config.dependency_names
        ],
        "base_view_model": settings.simple(CapabilityKey.VIEW_MODEL),
        "view_model_config": settings.simple(CapabilityKey.VIEW_MODEL_CONFIG),
        "type_arguments": [type_for("State"), type_for("Event"), type_for("UIState"), type_for("Intent")],
        "initial_ui_state": f"{stem}UIState()" if "UIState" in kinds else UNIT_TYPE,
        "refresh_enabled": config.refresh_enabled,
        "events_enabled": config.events_enabled,
        "include_load_method": config.include_load_method,
        "load_case": f"Load{stem}",
        "load_function": load_function,
        "intent_branches": [
            {"case": case, "action": actions[case]} for case in intent_cases(config)
        ],
    }
    return renderer.render("viewmodel/ViewModel.kt.j2", context)


# ---------------------------------------------------------------------------
# ViewModelStateGenerator
# ---------------------------------------------------------------------------


class ViewModelStateGenerator:
    """Builds the state declaration file and the view-model for one feature."""

    def __init__(
        self,
        settings: TypePathSettings,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings
        self.renderer = renderer or default_renderer()

    def build_files(
        self, config: StateContainerConfig, base_package: str
    ) -> list[GeneratedFile]:
        """Render both files without touching the file system.

        Args:
            config: State-container request.
            base_package: Dotted package of the target directory (may be empty).

        Returns:
            ``[state file, view-model file]``.
        """
        folder = to_camel(config.feature_name)
        stem = to_pascal(config.feature_name)
        vm_pkg = view_model_package(base_package, config.feature_name)
        state_pkg = state_package(base_package, config.feature_name)

        state_file = GeneratedFile(
            directories=(folder, "viewmodel", "state"),
            file_name=f"{stem}State.kt",
            content=build_state_file(config, self.settings, state_pkg, self.renderer),
        )
        view_model_file = GeneratedFile(
            directories=(folder, "viewmodel"),
            file_name=f"{stem}ViewModel.kt",
            content=build_view_model_file(
                config, self.settings, vm_pkg, state_pkg, self.renderer
            ),
        )
        return [state_file, view_model_file]
