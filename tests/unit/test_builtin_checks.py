"""Unit tests for the built-in notebook checks."""

from __future__ import annotations

import pytest

from nbsanity.checks.builtin.empty_cells import NoEmptyCellsCheck
from nbsanity.checks.builtin.execution_order import ExecutionIsSequentialCheck
from nbsanity.checks.builtin.filename import FilenameNotPlaceholderCheck
from nbsanity.checks.builtin.title_cell import HasTitleCellCheck
from nbsanity.checks.models import DOCUMENT_POSITION, UNASSIGNED_POSITION, CheckName, Finding
from nbsanity.notebook.models import CodeCell, MarkdownCell, Notebook


def _code(count: int | None, source: list[str] | None = None) -> CodeCell:
    return CodeCell(source=["x = 1"] if source is None else source, execution_count=count)


def _md(*lines: str) -> MarkdownCell:
    return MarkdownCell(source=list(lines))


def _notebook(*cells: CodeCell | MarkdownCell, path: str | None = "analysis.ipynb") -> Notebook:
    return Notebook.from_cells(list(cells), path=path)


# ---------------------------------------------------------------------------
# FilenameNotPlaceholder
# ---------------------------------------------------------------------------


class TestFilenameNotPlaceholder:
    check = FilenameNotPlaceholderCheck()

    def test_name(self):
        assert self.check.name == CheckName.FILENAME_NOT_PLACEHOLDER

    @pytest.mark.parametrize("path", ["Untitled.ipynb", "untitled1.ipynb", "work/UNTITLED-copy.ipynb"])
    def test_placeholder_names_fail(self, path):
        result = self.check.evaluate(_notebook(_md("# T"), path=path))
        assert not result.passed
        assert len(result.findings) == 1
        assert result.findings[0].cell == DOCUMENT_POSITION

    @pytest.mark.parametrize("path", ["analysis.ipynb", "titled.ipynb", None])
    def test_other_names_pass(self, path):
        assert self.check.evaluate(_notebook(_md("# T"), path=path)).passed


# ---------------------------------------------------------------------------
# ExecutionIsSequential
# ---------------------------------------------------------------------------


class TestExecutionIsSequential:
    check = ExecutionIsSequentialCheck()

    def test_sequential_counts_pass(self):
        result = self.check.evaluate(_notebook(_code(1), _code(2), _code(3)))
        assert result.check == CheckName.EXECUTION_IS_SEQUENTIAL
        assert result.findings == []

    def test_swapped_counts_fail_twice(self):
        result = self.check.evaluate(_notebook(_code(1), _code(3), _code(2)))
        assert result.findings == [
            Finding(cell=1, description="Not executed in order, got 3"),
            Finding(cell=2, description="Not executed in order, got 2"),
        ]

    def test_not_run_cell(self):
        result = self.check.evaluate(_notebook(_code(None)))
        assert result.findings == [Finding(cell=0, description="Cell was not run")]

    def test_counter_advances_past_failing_cells(self):
        result = self.check.evaluate(_notebook(_code(None), _code(2), _code(3)))
        assert [f.cell for f in result.findings] == [0]

    def test_markdown_cells_are_not_counted(self):
        result = self.check.evaluate(_notebook(_md("# T"), _code(1), _md("text"), _code(2)))
        assert result.passed

    def test_counter_does_not_reset_after_markdown(self):
        result = self.check.evaluate(_notebook(_code(1), _md("break"), _code(1)))
        assert result.findings == [Finding(cell=2, description="Not executed in order, got 1")]

    def test_no_code_cells_pass(self):
        assert self.check.evaluate(_notebook(_md("# T"))).passed

    def test_unassigned_position_sentinel(self):
        notebook = Notebook(cells=[_code(None)], nbformat=4, nbformat_minor=5)
        result = self.check.evaluate(notebook)
        assert result.findings[0].cell == UNASSIGNED_POSITION


# ---------------------------------------------------------------------------
# NoEmptyCells
# ---------------------------------------------------------------------------


class TestNoEmptyCells:
    check = NoEmptyCellsCheck()

    def test_whitespace_markdown_cell_fails(self):
        result = self.check.evaluate(_notebook(_md("   ", "")))
        assert result.findings == [Finding(cell=0, description="Cell is empty")]

    def test_title_cell_passes(self):
        assert self.check.evaluate(_notebook(_md("# Title"))).passed

    def test_reports_every_empty_cell_of_both_kinds(self):
        result = self.check.evaluate(
            _notebook(_md("# T"), _code(1, source=[]), _md("\n"), _code(2), _code(3, source=["  "]))
        )
        assert [f.cell for f in result.findings] == [1, 2, 4]

    def test_empty_notebook_passes(self):
        assert self.check.evaluate(Notebook.empty("analysis.ipynb")).passed


# ---------------------------------------------------------------------------
# HasTitleCell
# ---------------------------------------------------------------------------


class TestHasTitleCell:
    check = HasTitleCellCheck()

    def test_heading_first_passes(self):
        assert self.check.evaluate(_notebook(_md("# Analysis"), _code(1))).passed

    def test_subheading_first_passes(self):
        assert self.check.evaluate(_notebook(_md("## Section"))).passed

    @pytest.mark.parametrize(
        "first",
        [
            _code(1, source=["# looks like a heading"]),
            _code(None, source=[]),
        ],
    )
    def test_code_cell_first_fails(self, first):
        result = self.check.evaluate(_notebook(first, _md("# Title")))
        assert result.findings == [Finding(cell=DOCUMENT_POSITION, description="First cell is not a markdown title")]

    def test_markdown_without_heading_fails(self):
        assert not self.check.evaluate(_notebook(_md("Some prose", "# late heading"))).passed

    def test_empty_markdown_first_fails(self):
        assert not self.check.evaluate(_notebook(_md())).passed

    def test_no_cells_fails(self):
        result = self.check.evaluate(Notebook.empty("analysis.ipynb"))
        assert len(result.findings) == 1
