import click
from colstore.entity.dto import ColumnType
from colstore.service import project as project_service
from colstore.service.draft import DraftSchema
from taskcols.config import get_config


def _parse_column(spec):
    """NAME[:TYPE[:OPT1|OPT2...]]"""
    parts = spec.split(':', 2)
    name = parts[0].strip()
    if not name:
        raise click.BadParameter(f"Missing column name in '{spec}'")
    try:
        column_type = ColumnType(parts[1].strip()) if len(parts) > 1 and parts[1].strip() else ColumnType.TEXT
    except ValueError:
        raise click.BadParameter(f"Unknown column type in '{spec}'")
    options = [o.strip() for o in parts[2].split('|') if o.strip()] if len(parts) > 2 else None
    return name, column_type, options


@click.command('create')
@click.argument('name')
@click.option('--desc', '-d', default=None, help='Description')
@click.option('--column', '-c', 'columns', multiple=True, help='Extra column as NAME[:TYPE[:OPT1|OPT2]], repeatable')
def project_create(name, desc, columns):
    """Create a project with the default columns plus any extra ones."""
    drafts = DraftSchema()
    for spec in columns:
        col_name, col_type, options = _parse_column(spec)
        drafts.add(col_name, col_type, options=options)
    get_config()
    project = project_service.create_project(name, description=desc, drafts=drafts)
    click.echo(f"Created project '{project.name}' ({project.project_id})")
