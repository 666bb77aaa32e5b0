import click
from taskcols.config import get_config


@click.command('init')
def init():
    """Create the database tables."""
    config = get_config()
    click.echo(f"Database ready at {config['database_url']}")
