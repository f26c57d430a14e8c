"""Discover ``.ipynb`` files on disk and load them as notebooks.

Typical usage::

    for path, notebook in load_notebooks(Path(".")):
        if isinstance(notebook, ParseError):
            ...
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from nbsanity.notebook.models import Notebook
from nbsanity.notebook.parser import ParseError, parse_notebook

logger = logging.getLogger(__name__)

NOTEBOOK_SUFFIX = ".ipynb"

# Jupyter autosave copies; linting them duplicates every finding.
_IGNORED_DIRS: frozenset[str] = frozenset({".ipynb_checkpoints"})


def discover_notebooks(root: Path) -> list[Path]:
    """Return the notebook files to lint under *root*.

    A directory is searched recursively for ``*.ipynb`` files, sorted for
    deterministic output.  A path that is itself a notebook file is
    returned on its own.  Anything else yields an empty list.
    """
    if root.is_dir():
        found = sorted(
            p
            for p in root.rglob(f"*{NOTEBOOK_SUFFIX}")
            if p.is_file() and not _IGNORED_DIRS.intersection(p.relative_to(root).parts)
        )
        if not found:
            logger.warning("No %s files found under '%s'.", NOTEBOOK_SUFFIX, root)
        return found

    if root.is_file() and root.suffix == NOTEBOOK_SUFFIX:
        return [root]

    logger.warning("'%s' is neither a directory nor a %s file; nothing to check.", root, NOTEBOOK_SUFFIX)
    return []


def load_notebook(path: Path) -> Notebook:
    """Read and parse the notebook at *path* and assign its cell positions.

    Raises
    ------
    ParseError
        If the file contents are not a valid notebook.
    OSError
        If the file cannot be read.
    """
    data = path.read_bytes()
    notebook = parse_notebook(data, path=path)
    notebook.assign_positions()
    return notebook


def load_notebooks(root: Path) -> Iterator[tuple[Path, Notebook | ParseError]]:
    """Yield ``(path, notebook)`` for every notebook under *root*, in order.

    A file that fails to parse yields its :class:`ParseError` in place of
    the notebook so the caller decides whether to skip it or abort.
    ``OSError`` is not caught.
    """
    for path in discover_notebooks(root):
        try:
            yield path, load_notebook(path)
        except ParseError as exc:
            logger.debug("Could not parse %s: %s", path, exc.detail)
            yield path, exc
