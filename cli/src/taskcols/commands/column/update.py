import click
from colstore.errors import SchemaError
from colstore.service import schema_registry
from taskcols.config import get_config
from taskcols.commands.options import split_csv


@click.command('rename')
@click.argument('column_id')
@click.argument('name')
def column_rename(column_id, name):
    """Rename a column."""
    get_config()
    try:
        column = schema_registry.rename(column_id, name)
    except SchemaError as e:
        raise click.ClickException(str(e))
    if not column:
        click.echo(f"Column '{column_id}' not found")
        return
    click.echo(f"Renamed column to '{column.name}' ({column.column_id})")


@click.command('options')
@click.argument('column_id')
@click.argument('options')
def column_options(column_id, options):
    """Replace the options of a list column (comma-separated)."""
    get_config()
    column = schema_registry.update_options(column_id, split_csv(options))
    if not column:
        click.echo(f"Column '{column_id}' not found")
        return
    click.echo(f"Column '{column.name}' options: {', '.join(column.options or [])}")


@click.command('milestone')
@click.argument('column_id')
@click.option('--on/--off', 'enabled', default=True, help='Set or clear the milestone flag')
def column_milestone(column_id, enabled):
    """Mark or unmark a column as a milestone."""
    get_config()
    column = schema_registry.set_milestone(column_id, enabled)
    if not column:
        click.echo(f"Column '{column_id}' not found")
        return
    state = "is" if column.is_milestone else "is no longer"
    click.echo(f"Column '{column.name}' {state} a milestone")
