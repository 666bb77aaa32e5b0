import click
from colstore.errors import SchemaError
from colstore.service import task as task_service
from taskcols.config import get_config
from taskcols.commands.options import project_option


@click.command('add')
@project_option
@click.argument('name')
def task_add(project_id, name):
    """Add a task."""
    get_config()
    try:
        task = task_service.create_task(project_id, name)
    except SchemaError as e:
        raise click.ClickException(str(e))
    click.echo(f"Created task '{task.name}' ({task.task_id})")
