import click

from .list import column_list
from .add import column_add
from .update import column_rename, column_options, column_milestone
from .delete import column_delete
from .hide import column_hide
from .reorder import column_reorder, column_move
from .restore import column_restore

@click.group('column')
def column_group():
    """Manage project columns."""
    pass

column_group.add_command(column_list)
column_group.add_command(column_add)
column_group.add_command(column_rename)
column_group.add_command(column_options)
column_group.add_command(column_milestone)
column_group.add_command(column_delete)
column_group.add_command(column_hide)
column_group.add_command(column_reorder)
column_group.add_command(column_move)
column_group.add_command(column_restore)
