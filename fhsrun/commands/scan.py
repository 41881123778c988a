import click
from ..decorators import handle_exceptions
from ..libraries import normalize
from ..utils.scanner import scan_missing_libraries


@click.command()
@click.argument("binary", type=click.Path(exists=True, dir_okay=False))
@handle_exceptions
def scan(binary):
    """List the shared objects BINARY cannot find."""
    for library in normalize(scanned_names=scan_missing_libraries(binary)):
        click.echo(library)
