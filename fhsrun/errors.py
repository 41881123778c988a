class FhsrunError(Exception):
    """Base class for every failure that aborts an fhsrun run."""


class ScanFailure(FhsrunError):
    """The link-dependency scanner could not run or exited abnormally."""

    def __init__(self, binary, detail, returncode=None):
        self.binary = binary
        self.detail = detail
        self.returncode = returncode
        if returncode is None:
            message = f"Could not scan {binary}: {detail}"
        else:
            message = f"ldd returned error code {returncode} for {binary}: {detail}"
        super().__init__(message)


class LocatorFailure(FhsrunError):
    """The candidate index is unreadable or returned a malformed entry."""


class Unresolvable(FhsrunError):
    def __init__(self, library):
        self.library = library
        super().__init__(f"Found no provider for {library}")


class SelectionCancelled(FhsrunError):
    def __init__(self, library):
        self.library = library
        super().__init__(f"Selection of a provider for {library} was cancelled")


class EmissionFailure(FhsrunError):
    """The environment expression could not be produced."""


class ScriptWriteFailure(FhsrunError):
    def __init__(self, target, reason):
        self.target = target
        super().__init__(f"Could not write launcher script {target}: {reason}")


class ConfigError(FhsrunError):
    """A value in fhsrun.toml has the wrong shape."""
