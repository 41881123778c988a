def normalize(explicit_names=(), scanned_names=()):
    """
    Merges explicitly requested and scanned library names into a
    deduplicated, lexicographically sorted list.
    """
    names = set()
    for name in list(explicit_names) + list(scanned_names):
        if name:
            names.add(name)
    return sorted(names)


def normalize_packages(*sources):
    """Concatenates package lists, dropping repeats but keeping first-seen order."""
    seen = set()
    packages = []
    for source in sources:
        for package in source or ():
            if package and package not in seen:
                seen.add(package)
                packages.append(package)
    return packages
