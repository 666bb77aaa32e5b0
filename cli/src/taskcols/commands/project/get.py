import click
from colstore.service import project as project_service
from colstore.service import schema_registry
from taskcols.config import get_config


@click.command('get')
@click.argument('project_id')
def project_get(project_id):
    """Show project details."""
    get_config()
    project = project_service.get_project(project_id)
    if not project:
        click.echo(f"Project '{project_id}' not found")
        return
    columns = schema_registry.list_active(project_id)
    click.echo(f"ID:       {project.project_id}")
    click.echo(f"Name:     {project.name}")
    click.echo(f"Status:   {project.status}")
    if project.description:
        click.echo(f"Desc:     {project.description}")
    click.echo(f"Columns:  {', '.join(c.name for c in columns) or '-'}")
