"""Built-in check that code cells were executed top to bottom.

A notebook run cleanly from a fresh kernel numbers its code cells
1, 2, ..., K in document order.  Markdown cells are not counted.
"""

from __future__ import annotations

from nbsanity.checks.base import BaseCheck, cell_position
from nbsanity.checks.models import CheckName, CheckResult, Finding
from nbsanity.notebook.models import Notebook


class ExecutionIsSequentialCheck(BaseCheck):
    """Fail for every code cell that was not run, or was run out of order."""

    @property
    def name(self) -> CheckName:
        return CheckName.EXECUTION_IS_SEQUENTIAL

    def evaluate(self, notebook: Notebook) -> CheckResult:
        findings: list[Finding] = []
        # The expected counter advances for every code cell, pass or fail.
        for expected, cell in enumerate(notebook.code_cells(), start=1):
            if cell.execution_count is None:
                findings.append(Finding(cell=cell_position(cell), description="Cell was not run"))
            elif cell.execution_count != expected:
                findings.append(
                    Finding(
                        cell=cell_position(cell),
                        description=f"Not executed in order, got {cell.execution_count}",
                    )
                )
        return CheckResult(check=self.name, findings=findings)
