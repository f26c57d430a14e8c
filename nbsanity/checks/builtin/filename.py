"""Built-in check that flags notebooks still named after the editor default."""

from __future__ import annotations

from nbsanity.checks.base import BaseCheck
from nbsanity.checks.models import DOCUMENT_POSITION, CheckName, CheckResult, Finding
from nbsanity.notebook.models import Notebook

_PLACEHOLDER = "untitled"


class FilenameNotPlaceholderCheck(BaseCheck):
    """Fail when the notebook's name contains ``untitled`` (any case)."""

    @property
    def name(self) -> CheckName:
        return CheckName.FILENAME_NOT_PLACEHOLDER

    def evaluate(self, notebook: Notebook) -> CheckResult:
        findings: list[Finding] = []
        if _PLACEHOLDER in notebook.display_name.casefold():
            findings.append(
                Finding(
                    cell=DOCUMENT_POSITION,
                    description=f"Notebook filename contains '{_PLACEHOLDER}'",
                )
            )
        return CheckResult(check=self.name, findings=findings)
