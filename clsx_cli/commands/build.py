"""
Build command - Build a class list from individual items
"""

import click

from clsx_core.expression import evaluate, parse_item
from clsx_cli.utils.context import build_context
from clsx_cli.utils.errors import handle_cli_error
from clsx_cli.utils.output import format_json, print_result


@click.command()
@click.argument('items', nargs=-1)
@click.option(
    '--set', 'assignments',
    multiple=True,
    metavar='NAME=VALUE',
    help='Define a condition name (repeatable)'
)
@click.option(
    '--context', '-c', 'context_file',
    type=click.Path(exists=True, dir_okay=False),
    help='YAML or JSON file with condition names'
)
@click.option(
    '--format', '-f', 'output_format',
    type=click.Choice(['text', 'json']),
    help='Output format (default: text)'
)
@click.pass_context
def build(ctx, items, assignments, context_file, output_format):
    """
    Build a class list from ITEMS.

    \b
    Each item is CLASS or CLASS=>CONDITION. CONDITION is true, false
    or a name defined with --set or --context, optionally negated with !.

    \b
    Examples:
      clsx build btn btn-lg                       # "btn btn-lg"
      clsx build btn "active=>true" "off=>false"  # "btn active"
      clsx build btn "active=>on" --set on=true   # "btn active"

    \b
    Exit Codes:
      0 - Class list printed
      3 - Invalid item or undefined name
      4 - Context could not be loaded
    """
    config = ctx.obj['config']
    verbose = ctx.obj['verbose']
    output_format = output_format or config.get('build', 'format', 'text')

    try:
        context = build_context(context_file or config.get('context', 'file'), assignments)
        parsed = [parse_item(item) for item in items]
        classes = evaluate(parsed, context)
    except Exception as e:
        handle_cli_error(e, verbose=verbose)
        return

    if output_format == 'json':
        click.echo(format_json({"items": list(items), "classes": classes}))
    else:
        print_result(classes)
