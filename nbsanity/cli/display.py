"""Rich output formatting for the nbsanity CLI.

The report (one line per finding, plus success lines) is written to a
stdout console.  Configuration and parse errors are written to a
stderr console so they never mix with the report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from nbsanity.checks.models import CheckResult
    from nbsanity.checks.registry import CheckRegistry, UnknownCheckError
    from nbsanity.notebook.models import Notebook
    from nbsanity.notebook.parser import ParseError

SUCCESS_MARK = "✓"


def _print(console: Console, text: Text) -> None:
    # Report lines are data; never wrap or re-highlight them.
    console.print(text, soft_wrap=True, highlight=False)


def format_finding_line(display_name: str, cell: int, description: str, check: str) -> Text:
    """Build ``<name> <Cell: N> <description> [<check>]`` as styled text."""
    return Text.assemble(
        (display_name, "bold"),
        " ",
        (f"<Cell: {cell}>", "cyan"),
        " ",
        description,
        " ",
        (f"[{check}]", "red"),
    )


def display_results(
    console: Console,
    notebook: Notebook,
    results: list[CheckResult],
    *,
    quiet: bool = False,
) -> None:
    """Print the findings for one notebook, or its success line.

    Parameters
    ----------
    console:
        Rich console to write to (stdout).
    notebook:
        The notebook the results belong to.
    results:
        Engine output for *notebook*, in registry order.
    quiet:
        Suppress the success line.  Failure lines are always printed.
    """
    failed = [r for r in results if not r.passed]
    if not failed:
        if not quiet:
            _print(console, Text.assemble((notebook.display_name, "bold"), " ", (SUCCESS_MARK, "green")))
        return

    for result in failed:
        for finding in result.findings:
            _print(
                console,
                format_finding_line(notebook.display_name, finding.cell, finding.description, result.check.value),
            )


def display_unknown_checks(
    console: Console,
    errors: list[UnknownCheckError],
    registry: CheckRegistry,
) -> None:
    """Print one "did you mean" line per unresolvable check name."""
    for error in errors:
        suggestion = registry.closest(error.name).name.value
        _print(
            console,
            Text.assemble(
                (f"Unknown check: {error.name}", "red"),
                ", did you mean ",
                (suggestion, "bold"),
                " ?",
            ),
        )


def display_parse_error(console: Console, error: ParseError) -> None:
    """Print a notebook parse failure."""
    _print(console, Text(str(error), style="red"))


def display_check_list(console: Console, registry: CheckRegistry) -> None:
    """Print the registered check names in registry order."""
    for name in registry.get_names():
        _print(console, Text(name.value))
