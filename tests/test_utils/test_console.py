from __future__ import annotations

import io
from typing import Generator
from unittest.mock import patch

import pytest
from rich.console import Console

import poaclock.utils.console as console_module
from poaclock.utils.console import (
    CONSOLE_THEME,
    get_console,
    print_error,
    print_success,
    print_table,
    print_warning,
    reset_console,
)


@pytest.fixture
def captured() -> Generator[io.StringIO, None, None]:
    """Route console output into a buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, theme=CONSOLE_THEME, no_color=True, width=120)
    with patch.object(console_module, "_console", console):
        yield buffer
    reset_console()


@pytest.mark.unit
class TestStatusMessages:
    """Tests for the print_* helpers."""

    def test_success(self, captured: io.StringIO) -> None:
        print_success("poac.lock is up to date")

        assert captured.getvalue() == "[OK] poac.lock is up to date\n"

    def test_warning(self, captured: io.StringIO) -> None:
        print_warning("poac.lock is older than poac.toml")

        assert captured.getvalue() == "[WARNING] poac.lock is older than poac.toml\n"

    def test_brackets_are_printed_literally(self, captured: io.StringIO) -> None:
        """Test TOML table names in messages are not read as markup."""
        print_error("bad key [tool.poaclock]")

        assert captured.getvalue() == "[ERROR] bad key [tool.poaclock]\n"


@pytest.mark.unit
class TestPrintTable:
    """Tests for print_table."""

    def test_renders_rows_in_column_order(self, captured: io.StringIO) -> None:
        print_table(
            [{"dependencies": "", "version": "9.1.0", "name": "fmt"}],
            columns=["name", "version"],
            title="poac.lock",
            caption="1 packages",
        )

        output = captured.getvalue()
        assert "poac.lock" in output
        assert "1 packages" in output
        assert "dependencies" not in output
        assert output.index("fmt") < output.index("9.1.0")

    def test_missing_key_renders_blank(self, captured: io.StringIO) -> None:
        print_table([{"name": "fmt"}], columns=["name", "version"])

        assert "fmt" in captured.getvalue()


@pytest.mark.unit
class TestConsoleLifecycle:
    """Tests for the shared console."""

    def test_shared_until_reset(self) -> None:
        reset_console()
        first = get_console()

        assert get_console() is first
        reset_console()
        assert get_console() is not first

    @pytest.mark.parametrize("env", ["NO_COLOR", "CI"])
    def test_env_forces_plain_output(self, env: str) -> None:
        with patch.dict("os.environ", {env: "1"}):
            reset_console()
            assert get_console().no_color is True
        reset_console()
