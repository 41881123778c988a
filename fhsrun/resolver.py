import os
from concurrent.futures import ThreadPoolExecutor, as_completed

from .cli_logger import logger
from .model import IncludedPackageSet, ResolutionResult


def default_jobs():
    return os.cpu_count() or 1


def lookup_candidates(libraries, locate, jobs=None, show_progress=False):
    """
    Runs ``locate`` for every library on a thread pool.

    Returns a dict library -> candidates. The first lookup that raises
    cancels the lookups that have not started yet and is re-raised.
    """
    if not libraries:
        return {}

    jobs = max(1, min(jobs or default_jobs(), len(libraries)))
    results = {}
    executor = ThreadPoolExecutor(max_workers=jobs)
    try:
        futures = {executor.submit(locate, library): library for library in libraries}
        completed = as_completed(futures)
        if show_progress:
            completed = logger.progress(completed, total=len(futures))
        for future in completed:
            results[futures[future]] = future.result()
    except BaseException:
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    return results


def resolve(missing, pre_selected, locate, select, jobs=None, show_progress=False):
    """
    Turns missing libraries into the packages that provide them.

    Args:
        missing: canonical (sorted, deduplicated) library names.
        pre_selected: packages requested by the caller; always included first.
        locate: callable library -> list of CandidateEdge.
        select: callable (library, candidates, included) -> list of packages.
        jobs: upper bound on concurrent lookups.

    Returns:
        (IncludedPackageSet, ResolutionResult)

    Every failure from ``locate`` or ``select`` aborts the whole run.
    """
    candidates = lookup_candidates(missing, locate, jobs=jobs, show_progress=show_progress)

    included = IncludedPackageSet(pre_selected)
    result = ResolutionResult()

    # Decisions depend on what is already included, so they run one library
    # at a time in canonical order after all lookups are in.
    for library in missing:
        chosen = select(library, candidates[library], included.copy())
        for package in chosen:
            if included.add(package):
                logger.debug(f"Added {package} for {library}")
            result.record(package, library)

    return included, result
