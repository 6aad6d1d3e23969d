"""
clsx CLI - Main entry point
"""

import click

from clsx_cli import __version__
from clsx_cli.utils.config import load_cli_config
from clsx_cli.utils.errors import handle_cli_error
from clsx_core.config import ClsxConfig, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="clsx")
@click.option('--verbose', '-v', is_flag=True, help='Debug logging and full tracebacks')
@click.option(
    '--config', 'config_file',
    type=click.Path(exists=True, dir_okay=False),
    help='Config file (default: ~/.clsx.yaml then ./.clsx.yaml)'
)
@click.pass_context
def cli(ctx, verbose, config_file):
    """
    clsx - Conditional class list construction

    \b
    Common Commands:
      build     - Join class names, some guarded by conditions
      eval      - Evaluate a class list expression
      config    - Manage .clsx.yaml

    \b
    Examples:
      clsx build btn "active=>true" "disabled=>false"
      clsx eval '"btn", "active" => is_active,' --set is_active=true

    For more help on a specific command, use:
      clsx COMMAND --help
    """
    ctx.ensure_object(dict)
    config = load_cli_config(config_file)
    ctx.obj['config'] = config
    ctx.obj['verbose'] = verbose

    configure_logging("DEBUG" if verbose else config.get('logging', 'level', ClsxConfig().log_level))


from clsx_cli.commands.build import build
from clsx_cli.commands.eval import eval_expression
from clsx_cli.commands.config import config

cli.add_command(build)
cli.add_command(eval_expression)
cli.add_command(config)


def main():
    """Main entry point with error handling"""
    try:
        cli(obj={})

    except Exception as exc:
        handle_cli_error(exc, verbose=False)


if __name__ == "__main__":
    main()
