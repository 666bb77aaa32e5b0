import click
from tabulate import tabulate
from colstore.errors import SchemaError
from colstore.service import phase as phase_service
from colstore.service.ordering import Direction
from taskcols.config import get_config
from taskcols.commands.options import project_option


@click.command('list')
@project_option
def phase_list(project_id):
    """List phases in order."""
    get_config()
    phases = phase_service.list_phases(project_id)
    if not phases:
        click.echo("No phases found")
        return
    table = [[p.order, p.phase_id, p.name, p.color or "-"] for p in phases]
    click.echo(tabulate(table, headers=["Order", "ID", "Name", "Color"], tablefmt="simple"))


@click.command('add')
@project_option
@click.argument('name')
@click.option('--color', default=None, help='Display color')
def phase_add(project_id, name, color):
    """Add a phase at the end."""
    get_config()
    try:
        phase = phase_service.create_phase(project_id, name, color=color)
    except SchemaError as e:
        raise click.ClickException(str(e))
    click.echo(f"Created phase '{phase.name}' ({phase.phase_id})")


@click.command('move')
@project_option
@click.argument('phase_id')
@click.argument('direction', type=click.Choice([d.value for d in Direction]))
def phase_move(project_id, phase_id, direction):
    """Move a phase one position up or down."""
    get_config()
    result = phase_service.move_phase(project_id, phase_id, Direction(direction))
    if result is None:
        click.echo(f"Phase '{phase_id}' not found")
        return
    click.echo("Order updated")


@click.command('delete')
@click.argument('phase_id')
def phase_delete(phase_id):
    """Delete a phase."""
    get_config()
    phase = phase_service.delete_phase(phase_id)
    if not phase:
        click.echo(f"Phase '{phase_id}' not found")
        return
    click.echo(f"Deleted phase '{phase.name}' ({phase.phase_id})")
