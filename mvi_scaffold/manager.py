"""Host-side generation manager.

``GenerationManager`` is the single place where the outcome of a generation
request is turned into a user-facing message.  Each ``generate_*`` method
runs one request against a fixed target directory, reports success or the
error through the Rich console helpers, and returns a boolean outcome.  The
generators underneath stay silent.
"""

from __future__ import annotations

from typing import Callable

from mvi_scaffold.config import ConfigurationInvalidError, TypePathSettings
from mvi_scaffold.scaffolder.generator import FeatureGenerator
from mvi_scaffold.scaffolder.models import (
    EmptyMethodPolicy,
    FeatureConfig,
    GenerationResult,
    RepositoryConfig,
    ScreenConfig,
    StateContainerConfig,
)
from mvi_scaffold.scaffolder.packages import DirectoryHandle, PackageResolver
from mvi_scaffold.scaffolder.repo_gen import EmptyMethodListError
from mvi_scaffold.scaffolder.sink import FileSink, FileSinkError
from mvi_scaffold.scaffolder.templates import TemplateRenderer
from mvi_scaffold.utils import print_error, print_success, print_summary_table, print_warning

# Errors a generation run reports instead of propagating.
REPORTED_ERRORS = (ConfigurationInvalidError, FileSinkError, EmptyMethodListError)


class GenerationManager:
    """Runs generation requests against one target directory and reports outcomes.

    Args:
        settings: Type-path settings shared by every generator.
        directory: Directory the user invoked generation on.
        sink: Where files are written (defaults to the local file system).
        resolver: Package resolver (defaults to marker-based resolution).
        renderer: Template renderer (defaults to the bundled templates).
    """

    def __init__(
        self,
        settings: TypePathSettings,
        directory: DirectoryHandle,
        sink: FileSink | None = None,
        resolver: PackageResolver | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings
        self.directory = directory
        self.generator = FeatureGenerator(settings, resolver=resolver, sink=sink, renderer=renderer)
        self.last_result: GenerationResult | None = None
        self.last_error: str | None = None

    # -- Settings ----------------------------------------------------------

    def validate_settings(self) -> bool:
        """Report missing type paths; ``True`` when the settings are complete."""
        if self.settings.is_valid():
            return True
        print_error(self.settings.validation_message())
        return False

    # -- Generation entry points ---------------------------------------------

    def generate_screen(self, config: ScreenConfig) -> bool:
        return self._execute(
            "Screen",
            config.feature_name,
            lambda: self.generator.generate_screen(config, self.directory),
        )

    def generate_view_model(self, config: StateContainerConfig) -> bool:
        return self._execute(
            "ViewModel State",
            config.feature_name,
            lambda: self.generator.generate_state_container(config, self.directory),
        )

    def generate_repository(
        self,
        config: RepositoryConfig,
        empty_method_policy: EmptyMethodPolicy = EmptyMethodPolicy.FAIL,
    ) -> bool:
        return self._execute(
            "Repository",
            config.feature_name,
            lambda: self.generator.generate_repository(
                config, self.directory, empty_method_policy
            ),
        )

    def generate_feature(self, config: FeatureConfig) -> bool:
        return self._execute(
            "Full Feature",
            config.feature_name,
            lambda: self.generator.generate(config, self.directory),
        )

    # -- Internals -----------------------------------------------------------

    def _execute(
        self,
        kind: str,
        feature_name: str,
        action: Callable[[], GenerationResult],
    ) -> bool:
        self.last_result = None
        self.last_error = None
        try:
            result = action()
        except REPORTED_ERRORS as exc:
            self.last_error = f"Error: {exc}"
            print_error(self.last_error)
            return False

        self.last_result = result
        report_result(result, self.directory)
        print_success(f"Successfully generated {kind} for {feature_name}")
        return True


def report_result(result: GenerationResult, directory: DirectoryHandle) -> None:
    """Print the written files, overwrite warnings and skipped steps of a run."""
    if result.files:
        overwritten = set(result.overwritten)
        print_summary_table(
            {
                path: "overwritten" if path in overwritten else "created"
                for path in result.paths
            },
            title=f"Generated files in {directory.path}",
        )
    for path in result.overwritten:
        print_warning(f"Overwrote existing file: {path}")
    for message in result.skipped:
        print_warning(message)
