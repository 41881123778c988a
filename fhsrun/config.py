import toml
import os
from .cli_logger import logger
from .errors import ConfigError

CONFIG_FILE = "fhsrun.toml"

DEFAULT_CONFIG = {
    "resolve": {
        "strategy": "interactive",
        "libs": [],
        "packages": [],
    },
    "locate": {
        "command": "nix-locate",
    },
    "launcher": {
        "name": "run-with-nix",
        "env_name": "fhs",
        "nixpkgs": "<nixpkgs>",
    },
    "mapping": {},
}

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    if os.path.exists(config_path):
        logger.info(f"Loading configuration from {config_path}")
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def get_section(conf, name):
    """Returns a config section merged over its defaults."""
    section = dict(DEFAULT_CONFIG.get(name, {}))
    value = conf.get(name, {})
    if isinstance(value, dict):
        section.update(value)
    return section

def split_key(key):
    """
    Splits a dotted config key. Under [mapping] everything after the first
    dot is one library name, since library names contain dots themselves.
    """
    head, _, rest = key.partition('.')
    if head == "mapping" and rest:
        return [head, rest]
    return key.split('.')

def get_list(section, key):
    """
    Returns a list setting. A bare string, as written by 'config set', is a
    comma-separated list.
    """
    value = section.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    elif not isinstance(value, (list, tuple)):
        raise ConfigError(f"Setting '{key}' must be a list or a comma-separated string, got {value!r}")
    return [str(v).strip() for v in value if str(v).strip()]

def get_jobs(section):
    """Returns the 'jobs' setting as a positive int, or None when unset."""
    value = section.get("jobs")
    if value is None or value == "":
        return None
    try:
        jobs = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Setting 'jobs' must be a positive integer, got {value!r}")
    if jobs < 1:
        raise ConfigError(f"Setting 'jobs' must be a positive integer, got {value!r}")
    return jobs

def get_mapping(conf):
    """
    Returns the [mapping] table as library -> list of packages. A bare
    string value is treated as a single package.
    """
    table = conf.get("mapping", {})
    if not isinstance(table, dict):
        logger.warning(f"Ignoring [mapping]: expected a table, got {table!r}")
        return {}
    mapping = {}
    for library, packages in table.items():
        if isinstance(packages, str):
            packages = [packages]
        elif not isinstance(packages, list):
            logger.warning(f"Ignoring [mapping] entry '{library}': expected a package name or a list, got {packages!r}")
            continue
        mapping[library] = [p for p in packages if p]
    return mapping
