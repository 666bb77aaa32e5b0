import click
from colstore.errors import SchemaError
from colstore.service import task as task_service
from colstore.service import values
from taskcols.config import get_config


@click.command('set')
@click.argument('task_id')
@click.argument('column_id')
@click.argument('value')
def task_set(task_id, column_id, value):
    """Set a task's value for a column."""
    get_config()
    try:
        cell = task_service.set_value(task_id, column_id, value)
    except SchemaError as e:
        raise click.ClickException(str(e))
    if cell is None:
        click.echo("Task or column not found")
        return
    click.echo(f"Set {column_id} = {values.display(cell)}")


@click.command('clear')
@click.argument('task_id')
@click.argument('column_id')
def task_clear(task_id, column_id):
    """Remove a task's value for a column."""
    get_config()
    if task_service.clear_value(task_id, column_id):
        click.echo(f"Cleared {column_id}")
    else:
        click.echo("Nothing to clear")
