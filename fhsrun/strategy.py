from abc import ABC, abstractmethod

import click
from colorama import Fore, Style

from .cli_logger import logger
from .errors import SelectionCancelled, Unresolvable


def distinct_packages(candidates):
    """Candidate packages in first-seen order, each listed once."""
    packages = []
    for edge in candidates:
        if edge.package not in packages:
            packages.append(edge.package)
    return packages


class SelectionStrategy(ABC):
    """
    Decides which candidate packages satisfy a missing library.

    The zero, one and already-included cases are the same for every
    strategy; subclasses only decide between several fresh candidates.
    """

    name = None

    def select(self, library, candidates, included):
        packages = distinct_packages(candidates)
        if not packages:
            raise Unresolvable(library)
        if len(packages) == 1:
            return packages

        already = [package for package in packages if package in included]
        if already:
            logger.debug(f"{library} is already covered by {', '.join(already)}")
            return already

        return self.choose(library, packages, candidates)

    @abstractmethod
    def choose(self, library, packages, candidates):
        """Picks from ``packages`` (two or more, none included yet)."""

    def __call__(self, library, candidates, included):
        return self.select(library, candidates, included)


class TakeAllStrategy(SelectionStrategy):
    name = "take-all"

    def choose(self, library, packages, candidates):
        logger.info(f"Including all {len(packages)} providers of {library}: {', '.join(packages)}")
        return packages


class InteractiveStrategy(SelectionStrategy):
    name = "interactive"

    def choose(self, library, packages, candidates):
        click.echo(f"Pick provider for {Style.BRIGHT}{Fore.RED}{library}{Style.RESET_ALL}")
        for index, edge in enumerate(candidates):
            click.echo(f"  [{index}] {edge.package} {edge.path}")
        try:
            choice = click.prompt(
                "Provider",
                type=click.IntRange(0, len(candidates) - 1),
                default=0,
            )
        except click.Abort:
            raise SelectionCancelled(library)
        return [candidates[choice].package]


STRATEGIES = {
    TakeAllStrategy.name: TakeAllStrategy,
    InteractiveStrategy.name: InteractiveStrategy,
}


def get_strategy(name):
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise ValueError(f"Unknown selection strategy '{name}'. Choose from: {', '.join(sorted(STRATEGIES))}")
