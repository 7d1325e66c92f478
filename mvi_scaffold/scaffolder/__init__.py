"""MVI feature scaffolder -- generates interrelated Kotlin source files.

From a feature name and a handful of toggles this package renders a sealed
state/intent file, a view-model, a repository interface and implementation,
and a Compose screen with optional navigation wiring, all cross-referenced
consistently.

Quick usage::

    from mvi_scaffold.config import TypePathSettings
    from mvi_scaffold.scaffolder import FeatureConfig, FeatureGenerator, LocalDirectory

    generator = FeatureGenerator(TypePathSettings())
    result = generator.generate(
        FeatureConfig(feature_name="Forget Password", generate_screen=True),
        LocalDirectory("app/src/main/kotlin/com/acme/features"),
    )
"""

from mvi_scaffold.scaffolder.generator import FeatureGenerator, deliver_files
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
)
from mvi_scaffold.scaffolder.packages import (
    DirectoryHandle,
    LocalDirectory,
    MemoryDirectory,
    PackageResolver,
)
from mvi_scaffold.scaffolder.repo_gen import EmptyMethodListError, RepoGenerator
from mvi_scaffold.scaffolder.screen_gen import ScreenGenerator
from mvi_scaffold.scaffolder.sink import FileSink, FileSinkError, LocalFileSink, MemoryFileSink
from mvi_scaffold.scaffolder.templates import TemplateRenderer
from mvi_scaffold.scaffolder.viewmodel_gen import ViewModelStateGenerator

__all__ = [
    "DirectoryHandle",
    "EmptyMethodListError",
    "EmptyMethodPolicy",
    "FeatureConfig",
    "FeatureGenerator",
    "FileSink",
    "FileSinkError",
    "GeneratedFile",
    "GenerationResult",
    "LocalDirectory",
    "LocalFileSink",
    "MemoryDirectory",
    "MemoryFileSink",
    "NavParameter",
    "NavigationStyle",
    "PackageResolver",
    "RepoGenerator",
    "RepoMethod",
    "RepositoryConfig",
    "ScreenConfig",
    "ScreenGenerator",
    "StateContainerConfig",
    "TemplateRenderer",
    "ViewModelStateGenerator",
    "deliver_files",
]
