import re
from abc import ABC, abstractmethod

from .command_executor import run_shell_command
from ..errors import LocatorFailure
from ..model import CandidateEdge

# attr.output  size  type  /nix/store/<hash>-<name>/<path>
NIX_LOCATE_LINE = re.compile(
    r"^(?P<package>\S+)\s+(?P<size>[\d,]+)\s+(?P<type>[rsxd])\s+(?P<store_path>/nix/store/[^/\s]+)(?P<path>/.*)$"
)

CONFIGURED_PATH = "(configured)"


class Locator(ABC):
    """Maps a library file name to the packages that provide it."""

    @abstractmethod
    def find_candidates(self, library):
        """Returns a list of CandidateEdge; raises LocatorFailure on backend errors."""

    def __call__(self, library):
        return self.find_candidates(library)


def parse_nix_locate_output(library, output):
    candidates = []
    for line in output.splitlines():
        if not line.strip():
            continue
        match = NIX_LOCATE_LINE.match(line.strip())
        if not match:
            raise LocatorFailure(f"Malformed nix-locate entry for {library}: {line!r}")
        candidates.append(CandidateEdge(library, match.group("package"), match.group("path")))
    return candidates


class NixLocateLocator(Locator):
    """Queries a nix-index database through the nix-locate command."""

    def __init__(self, command="nix-locate", database=None):
        self.command = command
        self.database = database

    def build_command(self, library):
        command = [
            self.command,
            "--top-level",
            "--type=r",
            "--type=s",
            "--type=x",
            "--whole-name",
        ]
        if self.database:
            command += ["--db", self.database]
        command.append(library)
        return command

    def find_candidates(self, library):
        stdout, stderr, returncode = run_shell_command(self.build_command(library))
        if returncode != 0:
            detail = stderr.strip() or "no output"
            raise LocatorFailure(f"{self.command} returned error code {returncode} for {library}: {detail}")
        return parse_nix_locate_output(library, stdout)


class OverrideLocator(Locator):
    """Answers from a fixed library -> packages mapping before asking ``fallback``."""

    def __init__(self, mapping, fallback):
        self.mapping = {library: tuple(packages) for library, packages in mapping.items()}
        self.fallback = fallback

    def find_candidates(self, library):
        if library in self.mapping:
            return [CandidateEdge(library, package, CONFIGURED_PATH) for package in self.mapping[library]]
        return self.fallback.find_candidates(library)


class StaticLocator(Locator):
    """Answers from an in-memory library -> [(package, path)] table."""

    def __init__(self, table):
        self.table = {library: tuple(entries) for library, entries in table.items()}

    def find_candidates(self, library):
        return [CandidateEdge(library, package, path) for package, path in self.table.get(library, ())]


def locator_from_config(locate_settings, mapping=None):
    """Builds the locator described by the [locate] and [mapping] config tables."""
    locator = NixLocateLocator(
        command=locate_settings.get("command") or "nix-locate",
        database=locate_settings.get("database") or None,
    )
    if mapping:
        locator = OverrideLocator(mapping, locator)
    return locator
