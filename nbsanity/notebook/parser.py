"""Deserialise and re-serialise notebook JSON.

Typical usage::

    notebook = parse_notebook(path.read_bytes(), path=path)
    notebook.assign_positions()
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from nbsanity.notebook.models import Notebook

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when a notebook cannot be decoded into the document model.

    Attributes
    ----------
    path:
        The file the data came from, or ``None`` for in-memory input.
    detail:
        The underlying JSON/validation diagnostic.
    """

    def __init__(self, path: Path | None, detail: str) -> None:
        self.path = path
        self.detail = detail
        where = str(path) if path is not None else "<memory>"
        super().__init__(f"Failed to parse notebook '{where}': {detail}")


def parse_notebook(data: bytes | str, *, path: str | Path | None = None) -> Notebook:
    """Decode notebook JSON into a :class:`Notebook`.

    Parameters
    ----------
    data:
        Raw file contents.
    path:
        Where *data* was read from.  Used as the notebook's display name.

    Returns
    -------
    Notebook
        The parsed notebook.  Cell positions are *not* assigned yet.

    Raises
    ------
    ParseError
        If *data* is not valid JSON or does not match the notebook schema
        (missing ``cells``, unknown ``cell_type``, wrong field types, ...).
    """
    source_path = Path(path) if path is not None else None
    try:
        notebook = Notebook.model_validate_json(data)
    except ValidationError as exc:
        raise ParseError(source_path, str(exc)) from exc

    notebook.path = source_path
    logger.debug(
        "Parsed notebook %s: %d cell(s), nbformat %d.%d",
        notebook.display_name,
        len(notebook.cells),
        notebook.nbformat,
        notebook.nbformat_minor,
    )
    return notebook


def dump_notebook(notebook: Notebook) -> str:
    """Serialise *notebook* back to JSON.

    Only fields present when the notebook was loaded (or explicitly set)
    are written, so a parse/dump cycle keeps the original key set.  Cell
    positions and the notebook path are never written.
    """
    payload = notebook.model_dump(mode="json", exclude_unset=True)
    return json.dumps(payload, indent=1, ensure_ascii=False) + "\n"
