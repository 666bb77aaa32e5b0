import click
from tabulate import tabulate
from colstore.service import schema_registry
from taskcols.config import get_config
from taskcols.commands.options import project_option


@click.command('list')
@project_option
@click.option('--all', '-a', 'show_all', is_flag=True, help='Include deleted columns')
def column_list(project_id, show_all):
    """List columns in display order."""
    get_config()
    columns = schema_registry.list_all(project_id) if show_all else schema_registry.list_active(project_id)
    if not columns:
        click.echo("No columns found")
        return

    table = []
    for c in columns:
        flags = []
        if c.hidden:
            flags.append("hidden")
        if c.is_milestone:
            flags.append("milestone")
        if not c.active:
            flags.append("deleted")
        table.append([
            c.order,
            c.column_id,
            c.name,
            c.type.value,
            c.standard_field.value if c.standard_field else "-",
            ",".join(c.options) if c.options else "-",
            ",".join(flags) or "-",
        ])
    click.echo(tabulate(table, headers=["Order", "ID", "Name", "Type", "Standard", "Options", "Flags"], tablefmt="simple"))
