"""
Standardized exit codes for configexport CLI commands.

Exit codes let scripts tell a failed export apart from a rejected selection.
"""

from typing import Optional

import typer
from rich import print


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_USER_CANCEL = 130  # Standard for SIGINT (Ctrl+C)


class CliExit(typer.Exit):
    """
    Standardized CLI exit exception that extends typer.Exit with consistent codes.

    Usage:
        raise CliExit.success()  # Success
        raise CliExit.error("Export failed")  # Export error with message
        raise CliExit.config_error("Unknown module")  # Selection or config error
    """

    def __init__(self, code: int, message: Optional[str] = None):
        """
        Initialize CLI exit.

        Args:
            code: Exit code (use constants: EXIT_SUCCESS, EXIT_ERROR, etc.)
            message: Optional message to display before exiting
        """
        self.message = message
        super().__init__(code)
        if message:
            style = "green" if code == EXIT_SUCCESS else "red"
            print(f"[{style}]{message}[/{style}]")

    @classmethod
    def success(cls, message: Optional[str] = None) -> "CliExit":
        """Create a success exit."""
        return cls(EXIT_SUCCESS, message)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "CliExit":
        """Create an error exit."""
        return cls(EXIT_ERROR, message)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        """Create a configuration error exit."""
        return cls(EXIT_CONFIG_ERROR, message)

    @classmethod
    def user_cancel(cls, message: Optional[str] = None) -> "CliExit":
        """Create a user cancellation exit."""
        return cls(EXIT_USER_CANCEL, message or "Operation cancelled by user")
