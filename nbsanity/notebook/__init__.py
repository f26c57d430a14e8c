"""Notebook document model, JSON parsing and file discovery."""

from nbsanity.notebook.loader import discover_notebooks, load_notebook, load_notebooks
from nbsanity.notebook.models import (
    PLACEHOLDER_NAME,
    Cell,
    CellMetadata,
    CellOutput,
    CodeCell,
    MarkdownCell,
    Notebook,
    NotebookMetadata,
)
from nbsanity.notebook.parser import ParseError, dump_notebook, parse_notebook

__all__ = [
    "PLACEHOLDER_NAME",
    "Cell",
    "CellMetadata",
    "CellOutput",
    "CodeCell",
    "MarkdownCell",
    "Notebook",
    "NotebookMetadata",
    "ParseError",
    "discover_notebooks",
    "dump_notebook",
    "load_notebook",
    "load_notebooks",
    "parse_notebook",
]
