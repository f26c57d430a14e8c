"""Built-in check that a notebook opens with a markdown heading."""

from __future__ import annotations

from nbsanity.checks.base import BaseCheck
from nbsanity.checks.models import DOCUMENT_POSITION, CheckName, CheckResult, Finding
from nbsanity.notebook.models import MarkdownCell, Notebook

HEADING_MARKER = "#"


class HasTitleCellCheck(BaseCheck):
    """Pass only if the first cell is markdown whose first line is a heading."""

    @property
    def name(self) -> CheckName:
        return CheckName.HAS_TITLE_CELL

    def evaluate(self, notebook: Notebook) -> CheckResult:
        findings: list[Finding] = []
        if not _starts_with_title(notebook):
            findings.append(
                Finding(
                    cell=DOCUMENT_POSITION,
                    description="First cell is not a markdown title",
                )
            )
        return CheckResult(check=self.name, findings=findings)


def _starts_with_title(notebook: Notebook) -> bool:
    if not notebook.cells:
        return False
    first = notebook.cells[0]
    if not isinstance(first, MarkdownCell) or not first.source:
        return False
    return first.source[0].startswith(HEADING_MARKER)
