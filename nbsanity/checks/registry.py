"""Check registry for discovering and resolving check implementations.

Provides a central, ordered registry where checks are registered and
looked up by :class:`CheckName`.  Registration order is the order in
which the engine runs checks and the tie-break order for
:meth:`CheckRegistry.closest`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from nbsanity.checks.base import BaseCheck
from nbsanity.checks.models import CheckName

logger = logging.getLogger(__name__)


class UnknownCheckError(LookupError):
    """Raised when a name does not match any registered check.

    The attempted name is available as :attr:`name`.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown check: {name}")


class DisabledChecksError(ValueError):
    """Raised when one or more configured check names cannot be resolved."""

    def __init__(self, errors: list[UnknownCheckError]) -> None:
        self.errors = errors
        names = ", ".join(e.name for e in errors)
        super().__init__(f"Unknown check name(s) in configuration: {names}")


def edit_distance(s1: str, s2: str) -> int:
    """Return the Levenshtein distance between *s1* and *s2*."""
    if len(s1) < len(s2):
        return edit_distance(s2, s1)
    if not s2:
        return len(s1)

    prev_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        curr_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = prev_row[j + 1] + 1
            deletions = curr_row[j] + 1
            substitutions = prev_row[j] + (c1 != c2)
            curr_row.append(min(insertions, deletions, substitutions))
        prev_row = curr_row
    return prev_row[-1]


class CheckRegistry:
    """Ordered registry of check implementations.

    Maintains a mapping of :class:`CheckName` to :class:`BaseCheck`
    instances.  The :class:`~nbsanity.checks.engine.CheckEngine` uses it
    to decide which checks run and in what order.
    """

    def __init__(self, checks: Iterable[BaseCheck] = ()) -> None:
        self._checks: dict[CheckName, BaseCheck] = {}
        for check in checks:
            self.register(check)

    def register(self, check: BaseCheck) -> None:
        """Register a check implementation.

        Raises
        ------
        ValueError
            If a check with the same name is already registered.
        """
        if check.name in self._checks:
            raise ValueError(f"Check {check.name.value} is already registered.")
        self._checks[check.name] = check
        logger.debug("Registered check: %s", check.name.value)

    def get(self, name: CheckName) -> BaseCheck | None:
        """Look up a check by name.  Returns ``None`` if not registered."""
        return self._checks.get(name)

    def get_all(self) -> list[BaseCheck]:
        """Return all registered checks in registration order."""
        return list(self._checks.values())

    def get_names(self) -> list[CheckName]:
        """Return all registered check names in registration order."""
        return list(self._checks)

    def resolve(self, name: str) -> BaseCheck:
        """Return the check whose stable name is exactly *name*.

        Raises
        ------
        UnknownCheckError
            If no registered check has that name.
        """
        for check_name, check in self._checks.items():
            if check_name.value == name:
                return check
        raise UnknownCheckError(name)

    def closest(self, name: str) -> BaseCheck:
        """Return the registered check whose name is nearest to *name*.

        Distance is Levenshtein edit distance; ties go to the check
        registered first.  Intended for "did you mean" hints only.

        Raises
        ------
        LookupError
            If the registry is empty.
        """
        best: BaseCheck | None = None
        best_distance = 0
        for check_name, check in self._checks.items():
            distance = edit_distance(name, check_name.value)
            if best is None or distance < best_distance:
                best = check
                best_distance = distance
        if best is None:
            raise LookupError("No checks registered.")
        return best

    def resolve_disabled(self, names: Iterable[str]) -> set[CheckName]:
        """Resolve every configured name to a :class:`CheckName`.

        Raises
        ------
        DisabledChecksError
            Listing every name that failed to resolve, not just the first.
        """
        resolved: set[CheckName] = set()
        errors: list[UnknownCheckError] = []
        for name in names:
            try:
                resolved.add(self.resolve(name).name)
            except UnknownCheckError as exc:
                errors.append(exc)
        if errors:
            raise DisabledChecksError(errors)
        return resolved

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, name: object) -> bool:
        return name in self._checks

    def __iter__(self) -> Iterator[BaseCheck]:
        return iter(self._checks.values())
