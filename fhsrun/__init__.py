from .errors import (
    FhsrunError,
    ScanFailure,
    LocatorFailure,
    Unresolvable,
    SelectionCancelled,
    EmissionFailure,
    ScriptWriteFailure,
    ConfigError,
)
from .libraries import normalize, normalize_packages
from .model import CandidateEdge, IncludedPackageSet, ResolutionResult
from .resolver import resolve
from .strategy import SelectionStrategy, TakeAllStrategy, InteractiveStrategy, get_strategy
