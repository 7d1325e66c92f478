"""Unit tests for the console helpers (mvi_scaffold.utils).

Tests cover:
- Rich output helpers (print_header, print_summary_table, print_*)
- Markup in messages printed literally
"""

from __future__ import annotations

import pytest

from mvi_scaffold.utils import (
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Rich output helpers (smoke tests - verify they don't raise)
# ---------------------------------------------------------------------------


class TestRichOutputHelpers:
    def test_print_header(self):
        # Should not raise
        print_header("feature Forget Password")

    def test_print_summary_table(self, capsys):
        print_summary_table(
            {"home/HomeScreen.kt": "created", "home/viewmodel/HomeViewModel.kt": "overwritten"},
            title="Generated files",
        )
        out = capsys.readouterr().out
        assert "Generated files" in out
        assert "home/HomeScreen.kt" in out

    def test_print_success(self, capsys):
        print_success("Successfully generated Screen for Home")
        assert "Successfully generated Screen for Home" in capsys.readouterr().out

    def test_print_error(self, capsys):
        print_error("Error: Repository for 'Home' needs at least one method")
        assert "needs at least one method" in capsys.readouterr().out

    def test_print_warning(self, capsys):
        print_warning("Overwrote existing file: home/HomeScreen.kt")
        assert "Overwrote existing file" in capsys.readouterr().out


class TestMarkupEscaping:
    def test_brackets_printed_literally(self, capsys):
        print_error("Error: [type=missing] in [/tmp/request.yaml]")
        assert "[type=missing] in [/tmp/request.yaml]" in capsys.readouterr().out

    def test_table_values_printed_literally(self, capsys):
        print_summary_table({"viewModel": "com.acme[bold]"})
        assert "com.acme[bold]" in capsys.readouterr().out
