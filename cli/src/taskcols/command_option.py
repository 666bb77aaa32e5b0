import click
from dotenv import load_dotenv

from taskcols.commands.init import init
from taskcols.commands.project.click import project_group
from taskcols.commands.column.click import column_group
from taskcols.commands.phase.click import phase_group
from taskcols.commands.task.click import task_group
CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])

@click.group(context_settings=CONTEXT_SETTINGS)
def cli():
    """Per-project task columns."""
    load_dotenv()


# Register commands
cli.add_command(init)
cli.add_command(project_group)
cli.add_command(column_group)
cli.add_command(phase_group)
cli.add_command(task_group)
