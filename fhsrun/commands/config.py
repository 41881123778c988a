import click
import copy
import os
import sys
import json
from .. import config as config_module
from ..cli_logger import logger

NO_CONFIG = f"Error: No {config_module.CONFIG_FILE} found. Run 'fhsrun config init' to create one."

@click.group()
@click.pass_context
def config(ctx):
    """View or edit the fhsrun.toml configuration file."""
    pass

@config.command()
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file.")
@click.pass_context
def init(ctx, force):
    """Write a configuration file with the default settings."""
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    if os.path.exists(config_file_path) and not force:
        logger.error(f"Error: {config_file_path} already exists. Use --force to overwrite it.")
        return
    if config_module.save_config(copy.deepcopy(config_module.DEFAULT_CONFIG), path=ctx.obj["path"]):
        logger.success(f"Created {config_file_path}")

@config.command()
@click.pass_context
def view(ctx):
    """View the contents of the fhsrun.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NO_CONFIG)
        return
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading {config_file_path}: {e}")
        logger.info("Please check file permissions.")

@config.command(name="list")
@click.pass_context
def list_config(ctx):
    """List all configuration keys and values."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NO_CONFIG)
        return
    click.echo(json.dumps(conf, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value from the fhsrun.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NO_CONFIG)
        return

    value = conf
    try:
        for k in config_module.split_key(key):
            value = value[k]
    except (KeyError, TypeError):
        click.echo(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
        sys.exit(1)
    if isinstance(value, (dict, list)):
        click.echo(json.dumps(value, indent=4))
    else:
        click.echo(value)

@config.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a value in the fhsrun.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])

    keys = config_module.split_key(key)
    d = conf
    for k in keys[:-1]:
        d = d.setdefault(k, {})
    d[keys[-1]] = value

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")

@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove a key from the fhsrun.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NO_CONFIG)
        return

    keys = config_module.split_key(key)
    d = conf
    try:
        for k in keys[:-1]:
            d = d[k]
        del d[keys[-1]]
    except (KeyError, TypeError):
        click.echo(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
        sys.exit(1)
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Unset '{key}'")
