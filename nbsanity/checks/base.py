"""Abstract base class for check implementations.

All checks must subclass :class:`BaseCheck` and implement
:attr:`name` and :meth:`evaluate`.
"""

from __future__ import annotations

import abc

from nbsanity.checks.models import UNASSIGNED_POSITION, CheckName, CheckResult
from nbsanity.notebook.models import CodeCell, MarkdownCell, Notebook


class BaseCheck(abc.ABC):
    """Abstract base for all check implementations.

    Checks are stateless and total: :meth:`evaluate` must return a
    :class:`CheckResult` for any well-formed notebook and must never
    modify the notebook it inspects.
    """

    @property
    @abc.abstractmethod
    def name(self) -> CheckName:
        """The stable name of this check."""

    @abc.abstractmethod
    def evaluate(self, notebook: Notebook) -> CheckResult:
        """Run the check against *notebook*.

        Returns
        -------
        CheckResult
            Findings in document order; empty when the notebook passes.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def cell_position(cell: CodeCell | MarkdownCell) -> int:
    """Return the cell's assigned position, or the unassigned sentinel."""
    if cell.position is None:
        return UNASSIGNED_POSITION
    return cell.position
