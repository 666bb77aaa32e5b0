import click
from colstore.service import schema_registry
from colstore.service.ordering import Direction
from taskcols.config import get_config
from taskcols.commands.options import project_option


def _ref(token):
    try:
        return schema_registry.parse_ref(token)
    except ValueError as e:
        raise click.ClickException(str(e))


def _report(result):
    if result.failed:
        click.echo(f"Warning: {len(result.failed)} position(s) were not saved, run 'column list' to see the current order")
    click.echo(f"Order updated ({len(result.changed)} column(s) moved)")


@click.command('reorder')
@project_option
@click.argument('moved')
@click.argument('target')
def column_reorder(project_id, moved, target):
    """Move a column into another column's position.

    Columns are given by ID or as standard:<field> / custom:<id>.
    """
    get_config()
    result = schema_registry.reorder_columns(
        project_id, _ref(moved), _ref(target)
    )
    if result is None:
        click.echo("Column not found")
        return
    _report(result)


@click.command('move')
@project_option
@click.argument('column')
@click.argument('direction', type=click.Choice([d.value for d in Direction]))
def column_move(project_id, column, direction):
    """Move a column one position up or down."""
    get_config()
    result = schema_registry.move_column(project_id, _ref(column), Direction(direction))
    if result is None:
        click.echo(f"Column '{column}' not found")
        return
    _report(result)
