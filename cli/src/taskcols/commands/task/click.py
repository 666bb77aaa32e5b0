import click

from .add import task_add
from .value import task_set, task_clear
from .list import task_list

@click.group('task')
def task_group():
    """Manage task values."""
    pass

task_group.add_command(task_add)
task_group.add_command(task_set)
task_group.add_command(task_clear)
task_group.add_command(task_list)
