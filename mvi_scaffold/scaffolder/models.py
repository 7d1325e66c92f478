"""Pydantic v2 models describing a generation request and its output.

A request is built once per "Generate" action from the caller's own state,
read during generation, and discarded afterwards.  All request models are
frozen so a generator can never mutate the configuration it was given.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mvi_scaffold.naming import to_pascal


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class NavigationStyle(str, Enum):
    """How the generated screen is wired into navigation."""

    NONE = "none"
    SIMPLE = "simple"
    TYPE_SAFE = "type_safe"


class EmptyMethodPolicy(str, Enum):
    """What to do when repository generation is requested without methods."""

    SKIP = "skip"
    FAIL = "fail"


# ---------------------------------------------------------------------------
# Request building blocks
# ---------------------------------------------------------------------------


class NavParameter(BaseModel):
    """A typed navigation argument, e.g. ``id: String``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Parameter name as declared in Kotlin")
    type: str = Field(..., description="Kotlin type of the parameter")

    @field_validator("name", "type")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()


class RepoMethod(BaseModel):
    """A repository method signature supplied by the user."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Method name in camelCase, e.g. 'getUsers'")
    return_type: str = Field(default="Unit", description="Element type of the returned Flow")
    parameters: str = Field(default="", description="Raw Kotlin parameter list text")

    @field_validator("name", "parameters")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()

    @field_validator("return_type")
    @classmethod
    def default_unit(cls, value: str) -> str:
        return value.strip() or "Unit"


class _FeatureRequest(BaseModel):
    """Fields shared by every generation request."""

    model_config = ConfigDict(frozen=True)

    feature_name: str = Field(..., description="Raw feature name typed by the user")

    @field_validator("feature_name")
    @classmethod
    def non_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("feature name must not be blank")
        stem = to_pascal(value)
        if not stem:
            raise ValueError(f"feature name {value!r} has no letters or digits")
        if stem[0].isdigit():
            raise ValueError(f"feature name {value!r} must not start with a digit")
        return value


# ---------------------------------------------------------------------------
# Per-generator configurations
# ---------------------------------------------------------------------------


class StateContainerConfig(_FeatureRequest):
    """Input of the state-container (view-model) generator."""

    events_enabled: bool = True
    refresh_enabled: bool = True
    ui_state_enabled: bool = True
    include_load_method: bool = False
    dependency_names: list[str] = Field(
        default_factory=list,
        description="Use-case stems; each becomes a '<Name>UseCase' constructor parameter",
    )

    @field_validator("dependency_names")
    @classmethod
    def drop_blank(cls, value: list[str]) -> list[str]:
        return [name.strip() for name in value if name.strip()]


class RepositoryConfig(_FeatureRequest):
    """Input of the repository generator."""

    methods: list[RepoMethod] = Field(default_factory=list)
    needs_http_client: bool = True

    @field_validator("methods")
    @classmethod
    def drop_unnamed(cls, value: list[RepoMethod]) -> list[RepoMethod]:
        return [method for method in value if method.name]


class ScreenConfig(_FeatureRequest):
    """Input of the screen generator."""

    has_navigation_back: bool = True
    navigation_style: NavigationStyle = NavigationStyle.NONE
    nav_parameters: list[NavParameter] = Field(default_factory=list)
    inject_controller: bool = False
    ui_state_enabled: bool = Field(
        default=True,
        description="Whether the injected view-model exposes a UIState type (else Unit)",
    )

    @field_validator("nav_parameters")
    @classmethod
    def drop_incomplete(cls, value: list[NavParameter]) -> list[NavParameter]:
        return [param for param in value if param.name and param.type]

    @property
    def route_parameters(self) -> list[NavParameter]:
        """Navigation parameters the route function actually receives."""
        if self.navigation_style is NavigationStyle.TYPE_SAFE:
            return list(self.nav_parameters)
        return []


class FeatureConfig(_FeatureRequest):
    """Input of the feature orchestrator: the union of all generators' fields."""

    generate_screen: bool = True
    generate_controller: bool = True
    generate_repository: bool = False
    empty_method_policy: EmptyMethodPolicy = EmptyMethodPolicy.SKIP

    # State container
    events_enabled: bool = True
    refresh_enabled: bool = True
    ui_state_enabled: bool = True
    include_load_method: bool = False
    dependency_names: list[str] = Field(default_factory=list)

    # Repository
    methods: list[RepoMethod] = Field(default_factory=list)
    needs_http_client: bool = True

    # Screen
    has_navigation_back: bool = True
    navigation_style: NavigationStyle = NavigationStyle.NONE
    nav_parameters: list[NavParameter] = Field(default_factory=list)

    def screen_config(self) -> ScreenConfig:
        """Screen request, injecting a controller iff one will be generated."""
        return ScreenConfig(
            feature_name=self.feature_name,
            has_navigation_back=self.has_navigation_back,
            navigation_style=self.navigation_style,
            nav_parameters=self.nav_parameters,
            inject_controller=self.generate_controller,
            ui_state_enabled=self.ui_state_enabled,
        )

    def state_container_config(self) -> StateContainerConfig:
        return StateContainerConfig(
            feature_name=self.feature_name,
            events_enabled=self.events_enabled,
            refresh_enabled=self.refresh_enabled,
            ui_state_enabled=self.ui_state_enabled,
            include_load_method=self.include_load_method,
            dependency_names=self.dependency_names,
        )

    def repository_config(self) -> RepositoryConfig:
        return RepositoryConfig(
            feature_name=self.feature_name,
            methods=self.methods,
            needs_http_client=self.needs_http_client,
        )


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class GeneratedFile(BaseModel):
    """One rendered source file, relative to the generation target directory."""

    model_config = ConfigDict(frozen=True)

    directories: tuple[str, ...] = Field(
        default=(), description="Folder names below the target directory, outermost first"
    )
    file_name: str
    content: str

    @property
    def relative_path(self) -> str:
        """Slash-joined path below the target directory."""
        return "/".join((*self.directories, self.file_name))


class GenerationResult(BaseModel):
    """Outcome of one orchestrated run."""

    files: list[GeneratedFile] = Field(default_factory=list)
    skipped: list[str] = Field(
        default_factory=list, description="Human-readable reasons for skipped steps"
    )
    overwritten: list[str] = Field(
        default_factory=list, description="Relative paths that already existed before writing"
    )

    @property
    def paths(self) -> list[str]:
        return [f.relative_path for f in self.files]


# ---------------------------------------------------------------------------
# Input normalisation helpers
# ---------------------------------------------------------------------------


def parse_dependency_names(text: str) -> list[str]:
    """Split a comma-separated list of use-case names, dropping blanks.

    ``"GetUser, UpdateProfile,"`` -> ``["GetUser", "UpdateProfile"]``
    """
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_nav_parameter(text: str) -> NavParameter:
    """Parse ``"name:Type"`` into a :class:`NavParameter`.

    Raises:
        ValueError: If *text* has no ``:`` separator.
    """
    name, sep, type_ = text.partition(":")
    if not sep:
        raise ValueError(f"Navigation parameter must look like 'name:Type', got {text!r}")
    return NavParameter(name=name, type=type_)


def parse_repo_method(text: str) -> RepoMethod:
    """Parse ``"name|ReturnType|params"`` into a :class:`RepoMethod`.

    The return type and parameters are optional: ``"getUsers"`` and
    ``"getUser|User|id: String"`` are both accepted.
    """
    parts = text.split("|", 2)
    name = parts[0]
    return_type = parts[1] if len(parts) > 1 else ""
    parameters = parts[2] if len(parts) > 2 else ""
    return RepoMethod(name=name, return_type=return_type, parameters=parameters)
