import click

from .commands import phase_add, phase_delete, phase_list, phase_move

@click.group('phase')
def phase_group():
    """Manage project phases."""
    pass

phase_group.add_command(phase_list)
phase_group.add_command(phase_add)
phase_group.add_command(phase_move)
phase_group.add_command(phase_delete)
