"""Entry point for `python -m nbsanity` and the `nbsanity` console script."""

from __future__ import annotations

from nbsanity.cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
