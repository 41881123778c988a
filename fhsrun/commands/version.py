import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of fhsrun."""
    try:
        ver = importlib.metadata.version("fhsrun")
        click.echo(f"fhsrun version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of fhsrun. Is it installed correctly?")
