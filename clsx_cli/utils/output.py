"""
Output utilities for clsx CLI using Rich
"""

from typing import Any, Optional
import json
from rich.console import Console
from rich.syntax import Syntax
from rich.panel import Panel

console = Console()


def print_success(message: str):
    """Print success message with green checkmark"""
    console.print(f"✓ {message}", style="bold green")


def print_error(message: str):
    """Print error message with red X"""
    console.print(f"✗ {message}", style="bold red")


def print_result(classes: str):
    """Print a class list verbatim, without markup, emoji codes or highlighting"""
    console.print(classes, markup=False, emoji=False, highlight=False, soft_wrap=True)


def format_json(data: Any, indent: int = 2) -> str:
    """Format data as JSON string"""
    return json.dumps(data, indent=indent, default=str)


def print_yaml(text: str, title: Optional[str] = None):
    """Print YAML with syntax highlighting"""
    syntax = Syntax(text, "yaml", theme="monokai", line_numbers=False)
    console.print(Panel(syntax, title=title, border_style="cyan") if title else syntax)
