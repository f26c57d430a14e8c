"""nbsanity CLI application -- Typer-based notebook linter.

Loads settings once, validates the disabled check names, then lints
every notebook under the configured root.  The report goes to *stdout*
via Rich; configuration and parse errors go to *stderr*.

Exit codes: 0 when every notebook passes, 1 when at least one notebook
has findings, 3 for configuration errors and (unless ``--skip-invalid``)
unparseable notebooks.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text

from nbsanity import __version__
from nbsanity.checks import DisabledChecksError, any_failed, create_default_engine
from nbsanity.cli.display import (
    display_check_list,
    display_parse_error,
    display_results,
    display_unknown_checks,
)
from nbsanity.config import ConfigError, load_settings
from nbsanity.notebook import ParseError, load_notebooks

logger = logging.getLogger(__name__)

EXIT_FINDINGS = 1
EXIT_CONFIG_ERROR = 3

app = typer.Typer(
    name="nbsanity",
    help="A linter for Jupyter notebooks.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"nbsanity {__version__}", highlight=False)
        raise typer.Exit()


@app.command()
def lint(
    path: Path | None = typer.Argument(
        None,
        help="Directory or notebook to check.  Overrides 'root' from the config file.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="pyproject.toml holding the tool.nbsanity table (default: ./pyproject.toml).",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Don't print anything for notebooks that pass.",
    ),
    disable: list[str] | None = typer.Option(
        None,
        "--disable",
        "-d",
        help="Check to turn off, in addition to the configured ones.  Repeatable.",
    ),
    skip_invalid: bool = typer.Option(
        False,
        "--skip-invalid",
        help="Report unparseable notebooks as failures and keep going instead of aborting.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr.",
    ),
    list_checks: bool = typer.Option(
        False,
        "--list-checks",
        help="List the available checks and exit.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Check notebooks for run order, empty cells, titles and placeholder names."""
    engine = create_default_engine()
    registry = engine.registry

    if list_checks:
        display_check_list(console, registry)
        return

    try:
        settings = load_settings(config_path, root=path, debug=True if verbose else None)
    except ConfigError as exc:
        err_console.print(Text(str(exc), style="red"), soft_wrap=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc

    _configure_logging(settings.debug)

    try:
        disabled = registry.resolve_disabled([*settings.disable, *(disable or [])])
    except DisabledChecksError as exc:
        display_unknown_checks(err_console, exc.errors, registry)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc

    logger.info("Checking notebooks under %s", settings.root)

    failed = False
    try:
        for _, loaded in load_notebooks(settings.root):
            if isinstance(loaded, ParseError):
                display_parse_error(err_console, loaded)
                if not skip_invalid:
                    raise typer.Exit(code=EXIT_CONFIG_ERROR) from loaded
                failed = True
                continue

            results = engine.analyze(loaded, disabled)
            if any_failed(results):
                failed = True
            display_results(console, loaded, results, quiet=quiet)
    except OSError as exc:
        err_console.print(Text(f"Cannot read notebook: {exc}", style="red"), soft_wrap=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc

    if failed:
        raise typer.Exit(code=EXIT_FINDINGS)
