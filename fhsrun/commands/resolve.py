import click
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..emitter import (
    canonical_binary_path,
    default_script_path,
    fhs_expression,
    launcher_command,
    write_launcher_script,
)
from ..libraries import normalize, normalize_packages
from ..resolver import resolve as resolve_packages
from ..strategy import STRATEGIES, get_strategy
from ..utils.locator import locator_from_config
from ..utils.scanner import scan_missing_libraries


def _print_listing(included, result):
    click.echo("Included packages:")
    for package in included:
        libraries = result.libraries_for(package)
        if libraries:
            click.echo(f"  {package}: {', '.join(libraries)}")
        else:
            click.echo(f"  {package} (requested)")


@click.command()
@click.pass_context
@click.argument("binary", type=click.Path(exists=True, dir_okay=False))
@click.option("--lib", "-l", "libs", multiple=True, help="Additional shared object file to search for and propagate.")
@click.option("--pkgs", "-p", "pkgs", multiple=True, help="Additional package to propagate.")
@click.option("--strategy", "-s", type=click.Choice(sorted(STRATEGIES)), default=None,
              help="How to pick between several providers of one library.")
@click.option("--jobs", "-j", type=click.IntRange(min=1), default=None, help="Number of concurrent lookups.")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None,
              help="Where to write the launcher script (default: next to the binary).")
@click.option("--list", "list_packages", is_flag=True, help="List every included package and what it provides.")
@click.option("--dry-run", is_flag=True, help="Print the launcher command instead of writing the script.")
@handle_exceptions
def resolve(ctx, binary, libs, pkgs, strategy, jobs, output, list_packages, dry_run):
    """Resolve the missing libraries of BINARY and write a launcher for it.

    BINARY: The dynamically linked executable to examine.
    """
    conf = config_module.load_config(path=ctx.obj["path"])
    resolve_settings = config_module.get_section(conf, "resolve")
    launcher_settings = config_module.get_section(conf, "launcher")

    selection = get_strategy(strategy or resolve_settings["strategy"])
    jobs = jobs or config_module.get_jobs(resolve_settings)
    locator = locator_from_config(
        config_module.get_section(conf, "locate"),
        config_module.get_mapping(conf),
    )

    logger.info(f"Scanning {binary} for missing shared objects...")
    scanned = scan_missing_libraries(binary)
    missing = normalize(config_module.get_list(resolve_settings, "libs") + list(libs), scanned)
    pre_selected = normalize_packages(config_module.get_list(resolve_settings, "packages"), pkgs)

    if missing:
        logger.info(f"Resolving {len(missing)} libraries: {', '.join(missing)}")
    else:
        logger.info("No missing libraries found.")

    included, result = resolve_packages(
        missing, pre_selected, locator, selection, jobs=jobs, show_progress=True
    )
    logger.success(f"Resolved {len(missing)} libraries to {len(included)} packages.")

    if list_packages:
        _print_listing(included, result)

    env_name = launcher_settings["env_name"]
    expression = fhs_expression(
        canonical_binary_path(binary),
        included.as_list(),
        name=env_name,
        nixpkgs=launcher_settings["nixpkgs"],
    )
    command = launcher_command(expression, name=env_name)

    if dry_run:
        click.echo(command)
        return

    target = output or default_script_path(binary, launcher_settings["name"])
    write_launcher_script(target, command)
    logger.success(f"Wrote launcher script to {target}")
