"""Tests for the CLI reference generator script."""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "generate_cli_reference.py"


@pytest.fixture(scope="module")
def reference() -> str:
    spec = importlib.util.spec_from_file_location("generate_cli_reference", SCRIPT)
    assert spec is not None and spec.loader is not None
    module: ModuleType = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.generate_cli_reference()


class TestGenerateCliReference:
    """Tests for generate_cli_reference."""

    def test_every_command_has_a_section(self, reference: str) -> None:
        for name in ("add", "calendar", "check", "diff", "init", "range", "today"):
            assert f"### {name}\n" in reference

    def test_global_options_come_from_the_app(self, reference: str) -> None:
        assert "| `--verbose`, `-v` | Show debug logging on stderr |" in reference
        assert "| `--log-json` | Log as JSON lines |" in reference

    def test_positional_arguments(self, reference: str) -> None:
        """Should list plain positional parameters, which have no typer.Argument default."""
        assert "ymd diff START END" in reference
        assert "- `START` (required)" in reference

    def test_variadic_argument_help(self, reference: str) -> None:
        assert "- `VALUES...` (required): Dates to check (YYYY-MM-DD)" in reference

    def test_option_defaults(self, reference: str) -> None:
        assert "- `--days`, `-d`: Days to add (negative to subtract) (default: 0)" in reference
        assert "- `--force`, `-f`: Overwrite existing config\n" in reference

    def test_command_help_is_the_docstring(self, reference: str) -> None:
        assert "Show a month as a calendar grid." in reference
