"""Main scaffolding orchestrator.

Takes a ``FeatureConfig`` and generates every enabled part of an MVI
feature into a target directory: the screen first (so it knows whether a
view-model will exist), then the state container, then the repository.
All parts share one feature name and one ``TypePathSettings`` instance, so
packages, type names and imports agree across every emitted file.
"""

from __future__ import annotations

from mvi_scaffold.config import TypePathSettings

from .models import (
    EmptyMethodPolicy,
    FeatureConfig,
    GeneratedFile,
    GenerationResult,
    RepositoryConfig,
    ScreenConfig,
    StateContainerConfig,
)
from .packages import DirectoryHandle, PackageResolver, find_or_create_child
from .repo_gen import EmptyMethodListError, RepoGenerator
from .screen_gen import ScreenGenerator
from .sink import FileSink, FileSinkError, LocalFileSink
from .templates import TemplateRenderer, default_renderer
from .viewmodel_gen import ViewModelStateGenerator


# ---------------------------------------------------------------------------
# Delivery
# ---------------------------------------------------------------------------


def deliver_files(
    directory: DirectoryHandle,
    files: list[GeneratedFile],
    sink: FileSink,
) -> list[str]:
    """Write *files* below *directory* through *sink*, in order.

    Intermediate folders are created as needed.  A failing write aborts the
    remaining files; files already written stay in place.
    A folder that cannot be created is reported as :class:`FileSinkError`.

    Returns:
        Relative paths of the files that already existed and were overwritten.
    """
    overwritten: list[str] = []
    for generated in files:
        target = directory
        for name in generated.directories:
            try:
                target = find_or_create_child(target, name)
            except OSError as exc:
                raise FileSinkError(f"{target.path}/{name}", exc.strerror or str(exc)) from exc
        if target.find_file(generated.file_name) is not None:
            overwritten.append(generated.relative_path)
        sink.write(target, generated.file_name, generated.content)
    return overwritten


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class FeatureGenerator:
    """Composes the screen, state-container and repository generators.

    Typical usage::

        generator = FeatureGenerator(TypePathSettings())
        result = generator.generate(
            FeatureConfig(feature_name="Forget Password", refresh_enabled=True),
            LocalDirectory("app/src/main/kotlin/com/acme/feature"),
        )
    """

    def __init__(
        self,
        settings: TypePathSettings,
        resolver: PackageResolver | None = None,
        sink: FileSink | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings
        self.resolver = resolver or PackageResolver()
        self.sink = sink or LocalFileSink()
        self.renderer = renderer or default_renderer()
        self.screen_gen = ScreenGenerator(settings, self.renderer)
        self.view_model_gen = ViewModelStateGenerator(settings, self.renderer)
        self.repo_gen = RepoGenerator(self.renderer)

    # -- Pure building -----------------------------------------------------

    def build(self, config: FeatureConfig, base_package: str) -> GenerationResult:
        """Render every enabled part of the feature without writing anything.

        Raises:
            EmptyMethodListError: If the repository is enabled, has no
                methods, and the policy is ``FAIL``.
        """
        result = GenerationResult()

        if config.generate_screen:
            result.files += self.screen_gen.build_files(config.screen_config(), base_package)

        if config.generate_controller:
            result.files += self.view_model_gen.build_files(
                config.state_container_config(), base_package
            )

        if config.generate_repository:
            repo_config = config.repository_config()
            if repo_config.methods:
                result.files += self.repo_gen.build_files(repo_config, base_package)
            elif config.empty_method_policy is EmptyMethodPolicy.FAIL:
                raise EmptyMethodListError(config.feature_name)
            else:
                result.skipped.append(
                    f"Repository for '{config.feature_name}' skipped: no methods given"
                )

        return result

    # -- Generation --------------------------------------------------------

    def generate(self, config: FeatureConfig, directory: DirectoryHandle) -> GenerationResult:
        """Validate settings, render the feature, and write it below *directory*.

        Raises:
            ConfigurationInvalidError: Before anything is written, when a
                required type path is blank.
            FileSinkError: When a file cannot be written; earlier files of
                this run remain.
        """
        self.settings.validate_paths()
        result = self.build(config, self.resolver.resolve(directory))
        result.overwritten = deliver_files(directory, result.files, self.sink)
        return result

    def generate_screen(self, config: ScreenConfig, directory: DirectoryHandle) -> GenerationResult:
        """Generate only the screen (and navigation) files."""
        self.settings.validate_paths()
        files = self.screen_gen.build_files(config, self.resolver.resolve(directory))
        return self._deliver(directory, files)

    def generate_state_container(
        self, config: StateContainerConfig, directory: DirectoryHandle
    ) -> GenerationResult:
        """Generate only the state declaration file and its view-model."""
        self.settings.validate_paths()
        files = self.view_model_gen.build_files(config, self.resolver.resolve(directory))
        return self._deliver(directory, files)

    def generate_repository(
        self,
        config: RepositoryConfig,
        directory: DirectoryHandle,
        empty_method_policy: EmptyMethodPolicy = EmptyMethodPolicy.FAIL,
    ) -> GenerationResult:
        """Generate only the repository interface and implementation."""
        self.settings.validate_paths()
        if not config.methods and empty_method_policy is EmptyMethodPolicy.SKIP:
            return GenerationResult(
                skipped=[f"Repository for '{config.feature_name}' skipped: no methods given"]
            )
        files = self.repo_gen.build_files(config, self.resolver.resolve(directory))
        return self._deliver(directory, files)

    def _deliver(self, directory: DirectoryHandle, files: list[GeneratedFile]) -> GenerationResult:
        result = GenerationResult(files=files)
        result.overwritten = deliver_files(directory, files, self.sink)
        return result
