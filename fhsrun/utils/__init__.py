from .command_executor import run_shell_command
from .scanner import scan_missing_libraries, parse_ldd_output
from .locator import (
    Locator,
    NixLocateLocator,
    OverrideLocator,
    StaticLocator,
    locator_from_config,
)
