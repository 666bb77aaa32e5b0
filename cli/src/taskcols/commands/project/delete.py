import click
from colstore.service import project as project_service
from taskcols.config import get_config


@click.command('delete')
@click.argument('project_id')
@click.confirmation_option(prompt='Delete the project with all its columns, phases and tasks?')
def project_delete(project_id):
    """Delete a project and everything in it."""
    get_config()
    project = project_service.delete_project(project_id)
    if not project:
        click.echo(f"Project '{project_id}' not found")
        return
    click.echo(f"Deleted project '{project.name}' ({project.project_id})")
