import click
from colstore.errors import SchemaError
from colstore.service import schema_registry
from taskcols.config import get_config


@click.command('hide')
@click.argument('column_id')
def column_hide(column_id):
    """Toggle visibility of a standard column."""
    get_config()
    try:
        column = schema_registry.toggle_visibility(column_id)
    except SchemaError as e:
        raise click.ClickException(str(e))
    if not column:
        click.echo(f"Column '{column_id}' not found")
        return
    click.echo(f"Column '{column.name}' is now {'hidden' if column.hidden else 'visible'}")
