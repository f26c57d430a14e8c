"""nbsanity Check Engine -- pluggable notebook checks.

Quick start::

    from nbsanity.checks import any_failed, create_default_engine
    from nbsanity.notebook import load_notebook

    engine = create_default_engine()
    results = engine.analyze(load_notebook(path), disabled={"NoEmptyCells"})
    if any_failed(results):
        ...
"""

from nbsanity.checks.base import BaseCheck
from nbsanity.checks.engine import CheckEngine, any_failed, create_default_engine
from nbsanity.checks.models import (
    DOCUMENT_POSITION,
    UNASSIGNED_POSITION,
    CheckName,
    CheckResult,
    Finding,
)
from nbsanity.checks.registry import (
    CheckRegistry,
    DisabledChecksError,
    UnknownCheckError,
    edit_distance,
)

__all__ = [
    "DOCUMENT_POSITION",
    "UNASSIGNED_POSITION",
    "BaseCheck",
    "CheckEngine",
    "CheckName",
    "CheckRegistry",
    "CheckResult",
    "DisabledChecksError",
    "Finding",
    "UnknownCheckError",
    "any_failed",
    "create_default_engine",
    "edit_distance",
]
