"""Built-in check for blank cells left behind while editing."""

from __future__ import annotations

from nbsanity.checks.base import BaseCheck, cell_position
from nbsanity.checks.models import CheckName, CheckResult, Finding
from nbsanity.notebook.models import Notebook


class NoEmptyCellsCheck(BaseCheck):
    """Fail for every code or markdown cell with no non-blank line."""

    @property
    def name(self) -> CheckName:
        return CheckName.NO_EMPTY_CELLS

    def evaluate(self, notebook: Notebook) -> CheckResult:
        findings = [
            Finding(cell=cell_position(cell), description="Cell is empty") for cell in notebook.cells if cell.is_empty()
        ]
        return CheckResult(check=self.name, findings=findings)
