import click
from colstore.entity.dto import ColumnType

project_option = click.option('--project', '-P', 'project_id', required=True, help='Project ID')
column_type_choice = click.Choice([t.value for t in ColumnType])


def split_csv(value):
    if value is None:
        return None
    return [v.strip() for v in value.split(',') if v.strip()]
