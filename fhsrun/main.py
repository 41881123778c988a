import click
from .commands import *


@click.group()
@click.option("--path", "-C", default=".", type=click.Path(file_okay=False),
              help="Directory holding fhsrun.toml.")
@click.pass_context
def cli(ctx, path):
    """Run dynamically linked binaries inside an FHS environment built with Nix."""
    ctx.obj = {"path": path}

cli.add_command(resolve)
cli.add_command(scan)
cli.add_command(locate)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
