import click
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..utils.locator import locator_from_config


@click.command()
@click.pass_context
@click.argument("library")
@handle_exceptions
def locate(ctx, library):
    """List the packages providing LIBRARY."""
    conf = config_module.load_config(path=ctx.obj["path"])
    locator = locator_from_config(
        config_module.get_section(conf, "locate"),
        config_module.get_mapping(conf),
    )
    candidates = locator.find_candidates(library)
    if not candidates:
        logger.warning(f"No provider found for {library}.")
        return
    for edge in candidates:
        click.echo(f"{edge.package} {edge.path}")
