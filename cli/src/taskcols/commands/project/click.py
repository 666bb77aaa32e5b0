import click

from .create import project_create
from .get import project_get
from .delete import project_delete

@click.group('project')
def project_group():
    """Manage projects."""
    pass

project_group.add_command(project_create)
project_group.add_command(project_get)
project_group.add_command(project_delete)
