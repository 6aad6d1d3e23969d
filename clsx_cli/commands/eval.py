"""
Eval command - Evaluate a class list expression
"""

import click

from clsx_core.expression import evaluate, parse_expression
from clsx_cli.utils.context import build_context
from clsx_cli.utils.errors import handle_cli_error
from clsx_cli.utils.output import format_json, print_result


@click.command(name='eval')
@click.argument('expression')
@click.option(
    '--set', 'assignments',
    multiple=True,
    metavar='NAME=VALUE',
    help='Define a name used in the expression (repeatable)'
)
@click.option(
    '--context', '-c', 'context_file',
    type=click.Path(exists=True, dir_okay=False),
    help='YAML or JSON file with names used in the expression'
)
@click.option(
    '--format', '-f', 'output_format',
    type=click.Choice(['text', 'json']),
    help='Output format (default: text)'
)
@click.pass_context
def eval_expression(ctx, expression, assignments, context_file, output_format):
    """
    Evaluate a class list EXPRESSION.

    \b
    Items are separated by commas; a trailing comma is allowed.
    Each item is a quoted class name or a name, optionally followed
    by => and a condition.

    \b
    Examples:
      clsx eval '"btn", "active" => true, "off" => false'
      clsx eval '"btn", size, "active" => !disabled' --set size=btn-lg --set disabled=false
      clsx eval '"card", theme.name' --context page.yaml

    \b
    Exit Codes:
      0 - Class list printed
      3 - Syntax error or undefined name
      4 - Context could not be loaded
    """
    config = ctx.obj['config']
    verbose = ctx.obj['verbose']
    output_format = output_format or config.get('eval', 'format', 'text')

    try:
        context = build_context(context_file or config.get('context', 'file'), assignments)
        classes = evaluate(parse_expression(expression), context)
    except Exception as e:
        handle_cli_error(e, verbose=verbose)
        return

    if output_format == 'json':
        click.echo(format_json({"expression": expression, "classes": classes}))
    else:
        print_result(classes)
