"""Base-type import path settings.

Every generated file imports the capabilities it extends (base state,
base intent, the app view-model, navigation helpers, ...) from
user-configurable dotted paths.  ``TypePathSettings`` holds those paths as a
Pydantic v2 model so they can be validated, persisted to JSON, and threaded
explicitly into every generator.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigurationInvalidError(Exception):
    """Raised when one or more required type paths are blank."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(format_missing(self.missing))


def format_missing(missing: list[str]) -> str:
    """Render the user-facing message listing every missing setting."""
    if not missing:
        return ""
    bullets = "\n".join(f"• {label}" for label in missing)
    return f"Please configure the following paths in Settings:\n{bullets}"


# ---------------------------------------------------------------------------
# Capability keys
# ---------------------------------------------------------------------------


class CapabilityKey(str, Enum):
    """Recognised capability keys, in settings-editor order."""

    VIEW_MODEL = "viewModel"
    VIEW_MODEL_CONFIG = "viewModelConfig"
    STATE = "state"
    EVENT = "event"
    UI_STATE = "uiState"
    REFRESHABLE = "refreshable"
    INTENT = "intent"
    COMPOSABLE_ROUTE = "composableRoute"
    COMPOSABLE_SAFE_TYPE = "composableSafeType"
    DI_MODULE = "diModule"


# key -> (model field, human label used in error reports)
_KEY_FIELDS: dict[CapabilityKey, tuple[str, str]] = {
    CapabilityKey.VIEW_MODEL: ("app_view_model_path", "AppViewModel path"),
    CapabilityKey.VIEW_MODEL_CONFIG: ("view_model_config_path", "ViewModelConfig path"),
    CapabilityKey.STATE: ("base_state_path", "BaseState path"),
    CapabilityKey.EVENT: ("base_event_path", "BaseEvent path"),
    CapabilityKey.UI_STATE: ("base_ui_state_path", "BaseUIState path"),
    CapabilityKey.REFRESHABLE: ("refreshable_path", "Refreshable path"),
    CapabilityKey.INTENT: ("base_intent_path", "BaseIntent path"),
    CapabilityKey.COMPOSABLE_ROUTE: ("composable_route_path", "composableRoute path"),
    CapabilityKey.COMPOSABLE_SAFE_TYPE: ("composable_safe_type_path", "composableSafeType path"),
    CapabilityKey.DI_MODULE: ("di_module_path", "DI module path"),
}

OPTIONAL_KEYS: frozenset[CapabilityKey] = frozenset({CapabilityKey.DI_MODULE})

REQUIRED_KEYS: tuple[CapabilityKey, ...] = tuple(
    key for key in CapabilityKey if key not in OPTIONAL_KEYS
)


# ---------------------------------------------------------------------------
# Settings model
# ---------------------------------------------------------------------------


class TypePathSettings(BaseModel):
    """Dotted import paths for every base type the generated code extends.

    Instances are created once by the host (CLI, IDE glue) and passed down
    to each generator; nothing inside the generators looks settings up
    globally.
    """

    app_view_model_path: str = Field(default="com.afapps.core.viewmodel.AppViewModel")
    view_model_config_path: str = Field(default="com.afapps.core.viewmodel.ViewModelConfig")
    base_state_path: str = Field(default="com.afapps.core.viewmodel.BaseState")
    base_event_path: str = Field(default="com.afapps.core.viewmodel.BaseEvent")
    base_ui_state_path: str = Field(default="com.afapps.core.viewmodel.BaseUIState")
    refreshable_path: str = Field(default="com.afapps.core.viewmodel.Refreshable")
    base_intent_path: str = Field(default="com.afapps.core.viewmodel.BaseIntent")
    composable_route_path: str = Field(default="com.afapps.core.utilities.composableRoute")
    composable_safe_type_path: str = Field(
        default="com.afapps.core.utilities.composableSafeType"
    )
    di_module_path: str = Field(
        default="", description="Optional dependency-injection module path"
    )

    # -- Keyed access --------------------------------------------------------

    def get(self, key: CapabilityKey | str) -> str:
        """Return the dotted path configured for *key*."""
        field_name, _ = _KEY_FIELDS[CapabilityKey(key)]
        return getattr(self, field_name)

    def set(self, key: CapabilityKey | str, value: str) -> None:
        """Replace the dotted path configured for *key* (value is trimmed)."""
        field_name, _ = _KEY_FIELDS[CapabilityKey(key)]
        setattr(self, field_name, value.strip())

    def simple(self, key: CapabilityKey | str) -> str:
        """Simple type name of the path configured for *key*."""
        return simple_name(self.get(key))

    def as_dict(self) -> dict[str, str]:
        """Return a ``{capability key: path}`` mapping in editor order."""
        return {key.value: self.get(key) for key in CapabilityKey}

    # -- Validation ----------------------------------------------------------

    def missing_keys(self) -> list[str]:
        """Human labels of every required path that is blank, in order."""
        return [
            _KEY_FIELDS[key][1]
            for key in REQUIRED_KEYS
            if not self.get(key).strip()
        ]

    def is_valid(self) -> bool:
        """``True`` when all nine required paths are non-blank."""
        return not self.missing_keys()

    def validation_message(self) -> str:
        """Empty when valid, otherwise the message listing every missing path."""
        return format_missing(self.missing_keys())

    def validate_paths(self) -> None:
        """Raise :class:`ConfigurationInvalidError` if any required path is blank."""
        missing = self.missing_keys()
        if missing:
            raise ConfigurationInvalidError(missing)

    # -- Serialisation helpers -------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the settings to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "TypePathSettings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "TypePathSettings":
        """Build settings from defaults overridden by environment variables.

        Each capability key maps to ``MVI_<FIELD>`` where ``<FIELD>`` is the
        upper-cased model field, e.g. ``MVI_BASE_STATE_PATH`` or
        ``MVI_COMPOSABLE_ROUTE_PATH``.
        """
        settings = cls()
        for key in CapabilityKey:
            field_name, _ = _KEY_FIELDS[key]
            env_name = f"MVI_{field_name.upper()}"
            if env_name in os.environ:
                settings.set(key, os.environ[env_name])
        return settings


def simple_name(path: str) -> str:
    """Substring after the last ``.``; the whole string when there is none."""
    return path.rsplit(".", 1)[-1]
