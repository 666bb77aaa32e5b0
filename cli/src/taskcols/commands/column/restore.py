import click
from colstore.errors import SchemaError
from colstore.service import provisioner
from taskcols.config import get_config
from taskcols.commands.options import project_option


@click.command('restore')
@project_option
def column_restore(project_id):
    """Recreate missing default columns."""
    get_config()
    try:
        result = provisioner.restore_missing_defaults(project_id)
    except SchemaError as e:
        raise click.ClickException(str(e))
    if result.nothing_to_restore:
        click.echo("All default columns are already present")
        return
    names = ", ".join(c.name for c in result.created)
    click.echo(f"Restored {len(result.created)} default column(s): {names}")
