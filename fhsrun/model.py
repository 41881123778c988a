from collections import namedtuple

# A package reported by the index as providing a library at ``path``.
CandidateEdge = namedtuple("CandidateEdge", ["library", "package", "path"])


class IncludedPackageSet:
    """
    Ordered, append-only set of packages.

    Membership is decided by the set; the list only remembers the order in
    which packages were first added so output is reproducible.
    """

    def __init__(self, packages=()):
        self._order = []
        self._members = set()
        for package in packages:
            self.add(package)

    def add(self, package):
        """Add a package. Returns True if it was not present before."""
        if package in self._members:
            return False
        self._members.add(package)
        self._order.append(package)
        return True

    def copy(self):
        return IncludedPackageSet(self._order)

    def __contains__(self, package):
        return package in self._members

    def __iter__(self):
        return iter(self._order)

    def __len__(self):
        return len(self._order)

    def __eq__(self, other):
        if isinstance(other, IncludedPackageSet):
            return self._order == other._order
        return NotImplemented

    def __repr__(self):
        return f"IncludedPackageSet({self._order!r})"

    def as_list(self):
        return list(self._order)


class ResolutionResult:
    """Maps each included package to the libraries it was selected for."""

    def __init__(self):
        self._satisfies = {}

    def record(self, package, library):
        libraries = self._satisfies.setdefault(package, [])
        if library not in libraries:
            libraries.append(library)

    def libraries_for(self, package):
        return list(self._satisfies.get(package, []))

    def as_dict(self):
        return {package: list(libraries) for package, libraries in self._satisfies.items()}

    def __contains__(self, package):
        return package in self._satisfies

    def __len__(self):
        return len(self._satisfies)

    def __eq__(self, other):
        if isinstance(other, ResolutionResult):
            return self.as_dict() == other.as_dict()
        return NotImplemented

    def __repr__(self):
        return f"ResolutionResult({self._satisfies!r})"
