import os
from .command_executor import run_shell_command
from ..errors import ScanFailure
from ..cli_logger import logger

LDD_NOT_FOUND = " => not found"

def parse_ldd_output(output):
    """
    Extracts the names of the shared objects ldd could not locate.

    Lines look like ``\\tlibfoo.so.2 => not found``; everything else ldd
    prints is ignored.
    """
    missing = []
    for line in output.splitlines():
        index = line.find(LDD_NOT_FOUND)
        if index == -1:
            continue
        name = line[:index].strip()
        if name:
            missing.append(name)
    return missing

def scan_missing_libraries(binary):
    """Runs ldd on ``binary`` and returns the missing shared objects in ldd's order."""
    if not os.path.exists(binary):
        raise ScanFailure(binary, "no such file")

    stdout, stderr, returncode = run_shell_command(["ldd", binary])
    if returncode != 0:
        detail = stderr.strip() or stdout.strip() or "no output"
        if returncode == -1:
            raise ScanFailure(binary, detail)
        raise ScanFailure(binary, detail, returncode=returncode)

    missing = parse_ldd_output(stdout)
    logger.debug(f"ldd reported {len(missing)} missing libraries for {binary}")
    return missing
