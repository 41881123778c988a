import contextlib
import os

from .errors import EmissionFailure, ScriptWriteFailure

NIX_BUILD_FHS = "nix-build --no-out-link -E"
DEFAULT_SCRIPT_NAME = "run-with-nix"


def canonical_binary_path(binary):
    if not os.path.exists(binary):
        raise EmissionFailure(f"Binary {binary} does not exist")
    return os.path.realpath(binary)


def fhs_expression(run, packages, name="fhs", nixpkgs="<nixpkgs>"):
    """Returns the nix expression that builds an FHS environment around ``run``."""
    if '"' in run or "\\" in run or "${" in run:
        raise EmissionFailure(f"Cannot embed path {run!r} in a nix string")
    package_lines = "\n      ".join(packages)
    return (
        f"with import {nixpkgs} {{}};\n"
        f"  buildFHSUserEnv {{\n"
        f"    name = \"{name}\";\n"
        f"    targetPkgs = p: with p; [\n"
        f"      {package_lines}\n"
        f"    ];\n"
        f"    runScript = \"{run}\";\n"
        f"  }}"
    )


def shell_single_quote(text):
    return "'" + text.replace("'", "'\\''") + "'"


def launcher_command(expression, name="fhs"):
    """Builds the environment and runs its entry point, forwarding arguments."""
    return f'$({NIX_BUILD_FHS} {shell_single_quote(expression)})/bin/{name} "$@"'


def default_script_path(binary, script_name=DEFAULT_SCRIPT_NAME):
    return os.path.join(os.path.dirname(os.path.abspath(binary)), script_name)


def write_launcher_script(target, command):
    """
    Writes an executable bash script running ``command``.

    The script is written next to ``target`` first and renamed into place,
    so ``target`` is either left untouched or fully written.
    """
    tmp_path = f"{target}.tmp"
    try:
        with open(tmp_path, "w") as f:
            f.write(f"#!/usr/bin/env bash\n\n{command}\n")
        os.chmod(tmp_path, 0o755)
        os.replace(tmp_path, target)
    except OSError as e:
        with contextlib.suppress(OSError):
            os.remove(tmp_path)
        raise ScriptWriteFailure(target, e)
    return target
