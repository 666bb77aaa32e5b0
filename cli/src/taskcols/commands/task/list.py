import click
from tabulate import tabulate
from colstore.service import schema_registry, values
from colstore.service import task as task_service
from colstore.service.filter_engine import RangeFilter, SelectionFilter, TextFilter, count_active
from taskcols.config import get_config
from taskcols.commands.options import project_option, split_csv


def _split(spec):
    column_id, sep, value = spec.partition('=')
    if not sep or not column_id:
        raise click.BadParameter(f"Expected COLUMN=VALUE, got '{spec}'")
    return column_id, value


def _build_filters(text, select, between):
    filters = {}
    for spec in text:
        column_id, value = _split(spec)
        filters[column_id] = TextFilter(value)
    for spec in select:
        column_id, value = _split(spec)
        filters[column_id] = SelectionFilter(split_csv(value))
    for spec in between:
        column_id, value = _split(spec)
        low, _, high = value.partition('..')
        filters[column_id] = RangeFilter(min=low or None, max=high or None)
    return filters


@click.command('list')
@project_option
@click.option('--text', multiple=True, help='COLUMN=NEEDLE substring filter')
@click.option('--select', multiple=True, help='COLUMN=A,B membership filter')
@click.option('--range', 'between', multiple=True, help='COLUMN=MIN..MAX range filter, either side optional')
def task_list(project_id, text, select, between):
    """List tasks with their column values."""
    get_config()
    filters = _build_filters(text, select, between)
    columns = [c for c in schema_registry.list_active(project_id) if not c.hidden]
    tasks = task_service.filter_tasks(project_id, filters)
    if not tasks:
        click.echo("No tasks found")
        return

    table = []
    for t in tasks:
        typed = task_service.typed_values(t, columns)
        table.append([t.task_id, t.name] + [values.display(typed.get(c.column_id)) for c in columns])
    click.echo(tabulate(table, headers=["ID", "Task"] + [c.name for c in columns], tablefmt="simple"))
    active = count_active(filters)
    if active:
        click.echo(f"{len(tasks)} task(s) matching {active} filter(s)")
