"""Check Engine -- runs the enabled checks against a notebook.

The :class:`CheckEngine` takes its checks from a :class:`CheckRegistry`,
drops the disabled ones, evaluates the rest in registry order and
returns one :class:`CheckResult` per check that ran.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from nbsanity.checks.base import BaseCheck
from nbsanity.checks.models import CheckName, CheckResult
from nbsanity.checks.registry import CheckRegistry
from nbsanity.notebook.models import Notebook

logger = logging.getLogger(__name__)


class CheckEngine:
    """Orchestrator for running notebook checks.

    Parameters
    ----------
    registry:
        Optional pre-configured registry.  When ``None``, a new
        empty registry is created.
    """

    def __init__(self, registry: CheckRegistry | None = None) -> None:
        self._registry = registry if registry is not None else CheckRegistry()

    @property
    def registry(self) -> CheckRegistry:
        """The check registry backing this engine."""
        return self._registry

    def register(self, check: BaseCheck) -> None:
        """Register a check implementation with the engine."""
        self._registry.register(check)

    def analyze(
        self,
        notebook: Notebook,
        disabled: Iterable[CheckName | str] = (),
    ) -> list[CheckResult]:
        """Run every enabled check against *notebook*.

        Parameters
        ----------
        notebook:
            The notebook to inspect.  Positions should already be assigned.
        disabled:
            Checks to skip.  Plain strings are resolved through the
            registry first.

        Returns
        -------
        list[CheckResult]
            One result per enabled check, in registry order.  Disabled
            checks are absent from the list.

        Raises
        ------
        UnknownCheckError
            If a string in *disabled* does not name a registered check.
        """
        skip = {name if isinstance(name, CheckName) else self._registry.resolve(name).name for name in disabled}

        results: list[CheckResult] = []
        for check in self._registry.get_all():
            if check.name in skip:
                logger.debug("Skipping disabled check: %s", check.name.value)
                continue
            result = check.evaluate(notebook)
            logger.debug(
                "Check %s on %s: %d finding(s)",
                check.name.value,
                notebook.display_name,
                len(result.findings),
            )
            results.append(result)
        return results


def any_failed(results: Iterable[CheckResult]) -> bool:
    """Return True if at least one result has findings."""
    return any(not r.passed for r in results)


def create_default_engine() -> CheckEngine:
    """Create a :class:`CheckEngine` with all built-in checks registered.

    Built-ins run in this order: FilenameNotPlaceholder,
    ExecutionIsSequential, NoEmptyCells, HasTitleCell.
    """
    from nbsanity.checks.builtin.empty_cells import NoEmptyCellsCheck
    from nbsanity.checks.builtin.execution_order import ExecutionIsSequentialCheck
    from nbsanity.checks.builtin.filename import FilenameNotPlaceholderCheck
    from nbsanity.checks.builtin.title_cell import HasTitleCellCheck

    engine = CheckEngine()
    engine.register(FilenameNotPlaceholderCheck())
    engine.register(ExecutionIsSequentialCheck())
    engine.register(NoEmptyCellsCheck())
    engine.register(HasTitleCellCheck())
    return engine
