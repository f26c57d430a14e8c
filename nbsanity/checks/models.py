"""Data models for the nbsanity check engine.

Defines the stable check names and the Pydantic models every check
produces: individual findings and the per-check result that groups them.
"""

from __future__ import annotations

import sys
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Position reported for findings about the notebook as a whole.  Cell 0
# shares this index, so the check name is what tells the two apart.
DOCUMENT_POSITION = 0

# Position reported for a cell whose position was never assigned.
UNASSIGNED_POSITION = sys.maxsize


class CheckName(str, Enum):
    """Stable identifier of a check, used in configuration and reports."""

    FILENAME_NOT_PLACEHOLDER = "FilenameNotPlaceholder"
    EXECUTION_IS_SEQUENTIAL = "ExecutionIsSequential"
    NO_EMPTY_CELLS = "NoEmptyCells"
    HAS_TITLE_CELL = "HasTitleCell"

    def __str__(self) -> str:
        return self.value


class Finding(BaseModel):
    """One rule violation tied to a cell position."""

    model_config = ConfigDict(frozen=True)

    cell: int = Field(..., description="Zero-based position of the offending cell.")
    description: str = Field(..., description="Human-readable description of the violation.")


class CheckResult(BaseModel):
    """The outcome of running one check against one notebook.

    A result passes when it has no findings; there is no separate flag.
    """

    check: CheckName = Field(..., description="Check that produced this result.")
    findings: list[Finding] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.findings
