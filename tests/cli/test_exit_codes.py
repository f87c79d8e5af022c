"""
Tests for standardized CLI exit codes.
"""

import typer

from configexport.cli.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_USER_CANCEL,
    CliExit,
)


class TestCliExit:
    """Tests for CliExit factory methods."""

    def test_codes(self):
        assert CliExit.success().exit_code == EXIT_SUCCESS
        assert CliExit.error().exit_code == EXIT_ERROR
        assert CliExit.config_error().exit_code == EXIT_CONFIG_ERROR
        assert CliExit.user_cancel().exit_code == EXIT_USER_CANCEL

    def test_is_typer_exit(self):
        assert isinstance(CliExit.error(), typer.Exit)

    def test_message_is_printed(self, capsys):
        exit_ = CliExit.error("Export failed: boom")

        assert exit_.message == "Export failed: boom"
        assert "Export failed: boom" in capsys.readouterr().out

    def test_user_cancel_default_message(self):
        assert CliExit.user_cancel().message == "Operation cancelled by user"
