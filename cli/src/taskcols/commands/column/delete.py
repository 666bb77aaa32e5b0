import click
from colstore.errors import ProtectedColumnError
from colstore.service import schema_registry
from taskcols.config import get_config


@click.command('delete')
@click.argument('column_id')
def column_delete(column_id):
    """Soft delete a custom column."""
    get_config()
    try:
        column = schema_registry.soft_delete(column_id)
    except ProtectedColumnError as e:
        raise click.ClickException(f"{e} (use 'taskcols column hide {column_id}')")
    if not column:
        click.echo(f"Column '{column_id}' not found")
        return
    click.echo(f"Deleted column '{column.name}' ({column.column_id})")
