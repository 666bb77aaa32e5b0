import click
from colstore.entity.dto import ColumnDraft, ColumnType
from colstore.errors import SchemaError
from colstore.service import schema_registry
from taskcols.config import get_config
from taskcols.commands.options import column_type_choice, project_option, split_csv


@click.command('add')
@project_option
@click.argument('name')
@click.option('--type', '-t', 'column_type', default='text', type=column_type_choice, help='Column type')
@click.option('--options', '-o', default=None, help='Comma-separated options for list columns')
@click.option('--milestone', is_flag=True, help='Mark as a milestone column')
def column_add(project_id, name, column_type, options, milestone):
    """Add a custom column."""
    get_config()
    try:
        column = schema_registry.create(ColumnDraft(
            project_id=project_id,
            name=name,
            type=ColumnType(column_type),
            options=split_csv(options),
            is_milestone=milestone,
        ))
    except SchemaError as e:
        raise click.ClickException(str(e))
    click.echo(f"Created column '{column.name}' ({column.column_id}) at position {column.order}")
