"""
Config command - Manage .clsx.yaml configuration
"""

import click
from pathlib import Path

from clsx_cli.utils.config import CONFIG_FILENAME, create_default_config
from clsx_cli.utils.output import print_error, print_success, print_yaml


@click.group()
def config():
    """
    Manage clsx configuration.

    \b
    Examples:
      clsx config init     # Write ./.clsx.yaml with defaults
      clsx config show     # Show the effective configuration
    """
    pass


@config.command()
@click.option(
    '--output', '-o',
    default=CONFIG_FILENAME,
    type=click.Path(dir_okay=False),
    help='Where to write the config file'
)
@click.option('--force', is_flag=True, help='Overwrite an existing file')
def init(output: str, force: bool):
    """Write a default configuration file."""
    if Path(output).exists() and not force:
        print_error(f"{output} already exists (use --force to overwrite)")
        raise click.exceptions.Exit(1)

    create_default_config(output)
    print_success(f"Wrote {output}")


@config.command()
@click.pass_context
def show(ctx):
    """Show the effective configuration."""
    print_yaml(ctx.obj['config'].dump(), title="clsx configuration")
