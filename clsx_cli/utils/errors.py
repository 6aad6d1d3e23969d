"""
Error handling utilities for clsx CLI
"""

import sys
from typing import Optional
from rich.console import Console
from rich.panel import Panel

from clsx_core.exceptions import ContextError, ExpressionError, ExpressionSyntaxError

console = Console(stderr=True)


class CLIError(Exception):
    """Base exception for CLI errors"""

    def __init__(self, message: str, exit_code: int = 1):
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ExpressionInputError(CLIError):
    """Class expression could not be parsed or evaluated"""

    def __init__(self, message: str):
        super().__init__(message, exit_code=3)


class ContextInputError(CLIError):
    """Evaluation context could not be loaded"""

    def __init__(self, message: str):
        super().__init__(message, exit_code=4)


def to_cli_error(exc: Exception) -> CLIError:
    """
    Translate a library exception into a CLIError with the matching exit code

    Args:
        exc: The exception to translate

    Returns:
        CLIError instance (exc itself when it already is one)
    """
    if isinstance(exc, CLIError):
        return exc
    if isinstance(exc, ExpressionError):
        return ExpressionInputError(str(exc))
    if isinstance(exc, ContextError):
        return ContextInputError(str(exc))
    return CLIError(str(exc))


def format_exception(exc: Exception, context: Optional[str] = None) -> str:
    """
    Format exception with context

    Args:
        exc: The exception to format
        context: Optional context about where error occurred

    Returns:
        Formatted error message
    """
    lines = []

    if context:
        lines.append(f"Error in {context}:")

    lines.append(f"{type(exc).__name__}: {str(exc)}")

    if isinstance(exc, ExpressionSyntaxError) and exc.expression:
        lines.append(f"  {exc.expression}")
        lines.append(f"  {' ' * exc.position}^")

    return "\n".join(lines)


def suggest_fix(exc: Exception) -> Optional[str]:
    """
    Suggest fixes for common errors

    Args:
        exc: The exception to analyze

    Returns:
        Suggestion string or None
    """
    error_msg = str(exc).lower()

    if "is not defined" in error_msg:
        return "Pass the name with --set NAME=VALUE or define it in the --context file."

    if "unterminated string" in error_msg:
        return "Close the quoted class name with a matching quote."

    if "empty item" in error_msg:
        return "Remove the extra ',' - only a single trailing comma is allowed."

    if "expected name=value" in error_msg:
        return "Write assignments as NAME=VALUE, e.g. --set active=true."

    if "must contain a mapping" in error_msg or "yaml" in error_msg or "json" in error_msg:
        return "Check that the context file is a YAML or JSON mapping of names to values."

    return None


def show_error(exc: Exception, context: Optional[str] = None, verbose: bool = False):
    """
    Display error message to user

    Args:
        exc: The exception to display
        context: Optional context about where error occurred
        verbose: Show full traceback if True
    """
    if verbose:
        console.print_exception()
    else:
        error_msg = format_exception(exc, context)
        console.print(Panel(error_msg, title="Error", border_style="red"))

        suggestion = suggest_fix(exc)
        if suggestion:
            console.print(f"\n💡 [cyan]Suggestion:[/cyan] {suggestion}")


def handle_cli_error(exc: Exception, verbose: bool = False):
    """
    Handle CLI error and exit with appropriate code

    Args:
        exc: The exception to handle
        verbose: Show full traceback if True
    """
    show_error(exc, verbose=verbose)
    sys.exit(to_cli_error(exc).exit_code)
