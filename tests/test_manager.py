"""Unit tests for GenerationManager (mvi_scaffold.manager).

Tests cover:
- Success reporting and the boolean outcome of each entry point
- Errors turned into one "Error: ..." message (settings, empty methods, I/O)
- Overwrite and skip notices
- Settings validation reporting
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from mvi_scaffold.manager import GenerationManager, report_result
from mvi_scaffold.scaffolder.models import (
    EmptyMethodPolicy,
    FeatureConfig,
    GeneratedFile,
    GenerationResult,
    NavigationStyle,
    RepoMethod,
    RepositoryConfig,
    ScreenConfig,
    StateContainerConfig,
)
from mvi_scaffold.scaffolder.packages import LocalDirectory
from mvi_scaffold.scaffolder.sink import FileSinkError, MemoryFileSink

pytestmark = pytest.mark.unit


@pytest.fixture
def manager(settings, memory_target, memory_sink) -> GenerationManager:
    return GenerationManager(settings, memory_target, sink=memory_sink)


class BrokenSink:
    def write(self, directory, file_name, content):
        raise FileSinkError(f"{directory.path}/{file_name}", "Read-only file system")


# ---------------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------------


class TestSuccess:
    def test_generate_view_model(self, manager, memory_target):
        with patch("mvi_scaffold.manager.print_success") as success:
            assert manager.generate_view_model(StateContainerConfig(feature_name="Profile")) is True
        success.assert_called_once_with("Successfully generated ViewModel State for Profile")
        assert manager.last_error is None
        assert manager.last_result.paths == [
            "profile/viewmodel/state/ProfileState.kt",
            "profile/viewmodel/ProfileViewModel.kt",
        ]
        assert "profile/viewmodel/ProfileViewModel.kt" in memory_target.walk()

    def test_generate_screen(self, manager):
        with patch("mvi_scaffold.manager.print_success") as success:
            config = ScreenConfig(feature_name="Profile", navigation_style=NavigationStyle.SIMPLE)
            assert manager.generate_screen(config) is True
        success.assert_called_once_with("Successfully generated Screen for Profile")

    def test_generate_repository(self, manager):
        config = RepositoryConfig(feature_name="Profile", methods=[RepoMethod(name="getProfile")])
        with patch("mvi_scaffold.manager.print_success") as success:
            assert manager.generate_repository(config) is True
        success.assert_called_once_with("Successfully generated Repository for Profile")

    def test_generate_feature(self, manager, full_feature):
        with patch("mvi_scaffold.manager.print_success") as success:
            assert manager.generate_feature(full_feature) is True
        success.assert_called_once_with("Successfully generated Full Feature for User Profile")
        assert len(manager.last_result.files) == 6

    def test_output_reaches_console(self, manager, capsys):
        manager.generate_view_model(StateContainerConfig(feature_name="Profile"))
        assert "Successfully generated ViewModel State for Profile" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    def test_invalid_settings(self, incomplete_settings, memory_target, memory_sink):
        manager = GenerationManager(incomplete_settings, memory_target, sink=memory_sink)
        with patch("mvi_scaffold.manager.print_error") as error:
            assert manager.generate_feature(FeatureConfig(feature_name="Profile")) is False
        assert manager.last_error.startswith("Error: Please configure the following paths in Settings:")
        assert "• BaseState path" in manager.last_error
        error.assert_called_once_with(manager.last_error)
        assert manager.last_result is None
        assert memory_sink.written == {}

    def test_empty_repository_fails_by_default(self, manager):
        with patch("mvi_scaffold.manager.print_error"):
            assert manager.generate_repository(RepositoryConfig(feature_name="Profile")) is False
        assert manager.last_error == "Error: Repository for 'Profile' needs at least one method"

    def test_empty_repository_skip_policy(self, manager):
        with patch("mvi_scaffold.manager.print_warning") as warning:
            ok = manager.generate_repository(RepositoryConfig(feature_name="Profile"), EmptyMethodPolicy.SKIP)
        assert ok is True
        warning.assert_called_once_with("Repository for 'Profile' skipped: no methods given")

    def test_write_failure(self, settings, memory_target):
        manager = GenerationManager(settings, memory_target, sink=BrokenSink())
        with patch("mvi_scaffold.manager.print_error") as error:
            assert manager.generate_view_model(StateContainerConfig(feature_name="Profile")) is False
        assert manager.last_error.startswith("Error: Could not write ")
        assert manager.last_error.endswith("Read-only file system")
        error.assert_called_once()

    def test_blocked_feature_folder(self, settings, tmp_path):
        (tmp_path / "home").write_text("", encoding="utf-8")
        manager = GenerationManager(settings, LocalDirectory(tmp_path))
        with patch("mvi_scaffold.manager.print_error") as error:
            ok = manager.generate_view_model(StateContainerConfig(feature_name="Home"))
        assert ok is False
        assert manager.last_error.startswith(f"Error: Could not write {tmp_path.as_posix()}/home: ")
        error.assert_called_once_with(manager.last_error)
        assert (tmp_path / "home").is_file()

    def test_state_reset_between_runs(self, manager):
        with patch("mvi_scaffold.manager.print_error"):
            manager.generate_repository(RepositoryConfig(feature_name="Profile"))
        assert manager.last_error is not None
        manager.generate_view_model(StateContainerConfig(feature_name="Profile"))
        assert manager.last_error is None
        assert manager.last_result is not None


# ---------------------------------------------------------------------------
# Reporting helpers
# ---------------------------------------------------------------------------


class TestReporting:
    def test_overwrite_warnings(self, memory_target):
        result = GenerationResult(
            files=[GeneratedFile(directories=("a",), file_name="B.kt", content="")],
            overwritten=["a/B.kt"],
        )
        with patch("mvi_scaffold.manager.print_summary_table") as table, \
                patch("mvi_scaffold.manager.print_warning") as warning:
            report_result(result, memory_target)
        table.assert_called_once()
        assert table.call_args.args[0] == {"a/B.kt": "overwritten"}
        warning.assert_called_once_with("Overwrote existing file: a/B.kt")

    def test_no_table_without_files(self, memory_target):
        with patch("mvi_scaffold.manager.print_summary_table") as table:
            report_result(GenerationResult(), memory_target)
        table.assert_not_called()

    def test_regeneration_reports_overwrites(self, settings, memory_target):
        manager = GenerationManager(settings, memory_target, sink=MemoryFileSink())
        manager.generate_view_model(StateContainerConfig(feature_name="Profile"))
        manager.generate_view_model(StateContainerConfig(feature_name="Profile"))
        assert manager.last_result.overwritten == manager.last_result.paths

    def test_validate_settings(self, manager, incomplete_settings, memory_target):
        assert manager.validate_settings() is True
        invalid = GenerationManager(incomplete_settings, memory_target)
        with patch("mvi_scaffold.manager.print_error") as error:
            assert invalid.validate_settings() is False
        error.assert_called_once_with(incomplete_settings.validation_message())
