"""Document model for Jupyter notebooks (nbformat 4).

A :class:`Notebook` is an ordered list of cells, each either a
:class:`CodeCell` or a :class:`MarkdownCell`, plus free-form metadata.
Unknown keys are kept on every model so that a notebook can be written
back out without losing anything the checks do not look at.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Display name used for notebooks built in memory without a path.
PLACEHOLDER_NAME = "???"


class CellOutput(BaseModel):
    """A single output record of a code cell (not inspected by any check)."""

    model_config = ConfigDict(extra="allow")

    output_type: str | None = None
    name: str | None = None
    text: list[str] | str | None = None


class JupyterCellMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    source_hidden: bool | None = None
    outputs_hidden: bool | None = None


class CellMetadata(BaseModel):
    """Per-cell metadata as written by Jupyter and VS Code."""

    model_config = ConfigDict(extra="allow")

    jupyter: JupyterCellMetadata | None = None
    collapsed: bool | None = None
    name: str | None = None
    tags: list[str] | None = None


class _BaseCell(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    metadata: CellMetadata = Field(default_factory=CellMetadata)
    source: list[str] = Field(..., description="Cell source as a list of lines.")
    position: int | None = Field(
        default=None,
        exclude=True,
        description="Zero-based offset of the cell in its notebook, set by Notebook.assign_positions().",
    )

    @field_validator("source", mode="before")
    @classmethod
    def split_multiline_source(cls, v: Any) -> Any:
        # nbformat allows the source to be stored as one string.
        if isinstance(v, str):
            return v.splitlines(keepends=True)
        return v

    def is_empty(self) -> bool:
        """Return True if the cell has no lines or only blank lines."""
        return all(not line.strip() for line in self.source)


class CodeCell(_BaseCell):
    """An executable cell."""

    cell_type: Literal["code"] = "code"
    execution_count: int | None = Field(
        default=None,
        description="Execution counter recorded by the kernel. None means the cell was never run.",
    )
    outputs: list[CellOutput] = Field(default_factory=list)


class MarkdownCell(_BaseCell):
    """A prose cell."""

    cell_type: Literal["markdown"] = "markdown"


Cell = Annotated[Union[CodeCell, MarkdownCell], Field(discriminator="cell_type")]


class KernelSpec(BaseModel):
    model_config = ConfigDict(extra="allow")

    display_name: str
    name: str
    language: str | None = None


class CodeMirrorMode(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    version: int


class LanguageInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    codemirror_mode: CodeMirrorMode | str | None = None
    file_extension: str | None = None
    mimetype: str | None = None
    nbconvert_exporter: str | None = None
    pygments_lexer: str | None = None
    version: str | None = None


class Author(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = None


class NotebookMetadata(BaseModel):
    """Notebook-level metadata.  Ignored by the checks."""

    model_config = ConfigDict(extra="allow")

    kernelspec: KernelSpec | None = None
    language_info: LanguageInfo | None = None
    orig_nbformat: int | None = None
    title: str | None = None
    authors: list[Author] | None = None


class Notebook(BaseModel):
    """An in-memory Jupyter notebook.

    Cell order is the canonical order for both position-based reporting
    and execution-order checks.  Call :meth:`assign_positions` once after
    loading (or after building a notebook by hand) so that every cell
    knows its own offset.
    """

    model_config = ConfigDict(extra="allow")

    cells: list[Cell]
    nbformat: int
    nbformat_minor: int
    metadata: NotebookMetadata = Field(default_factory=NotebookMetadata)
    path: Path | None = Field(
        default=None,
        exclude=True,
        description="File the notebook was loaded from, if any.",
    )

    @classmethod
    def empty(cls, path: str | Path) -> Notebook:
        """Build an empty notebook associated with *path*."""
        notebook = cls(cells=[], nbformat=4, nbformat_minor=5, path=Path(path))
        notebook.assign_positions()
        return notebook

    @classmethod
    def from_cells(
        cls,
        cells: list[CodeCell | MarkdownCell],
        *,
        path: str | Path | None = None,
    ) -> Notebook:
        """Build a notebook from cell objects and assign their positions."""
        notebook = cls(
            cells=cells,
            nbformat=4,
            nbformat_minor=5,
            path=Path(path) if path is not None else None,
        )
        notebook.assign_positions()
        return notebook

    @property
    def display_name(self) -> str:
        """The source path as text, or a placeholder for in-memory notebooks."""
        if self.path is None:
            return PLACEHOLDER_NAME
        return str(self.path)

    def assign_positions(self) -> None:
        """Stamp every cell with its zero-based offset in :attr:`cells`.

        Safe to call repeatedly; each call re-stamps from the current order.
        """
        for idx, cell in enumerate(self.cells):
            cell.position = idx

    def code_cells(self) -> list[CodeCell]:
        """Return the code cells in document order."""
        return [c for c in self.cells if isinstance(c, CodeCell)]

    def markdown_cells(self) -> list[MarkdownCell]:
        """Return the markdown cells in document order."""
        return [c for c in self.cells if isinstance(c, MarkdownCell)]
