"""Shared fixtures for nbsanity tests.

Notebooks are written as real nbformat 4 JSON so that tests exercise the
same parsing path as the CLI.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


def _code_cell_json(source: list[str] | str, execution_count: int | None = None) -> dict[str, Any]:
    return {
        "cell_type": "code",
        "execution_count": execution_count,
        "metadata": {},
        "outputs": [],
        "source": source,
    }


def _markdown_cell_json(source: list[str] | str) -> dict[str, Any]:
    return {"cell_type": "markdown", "metadata": {}, "source": source}


def _notebook_json(cells: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "cells": cells,
        "metadata": {
            "kernelspec": {"display_name": "Python 3", "language": "python", "name": "python3"},
            "language_info": {"name": "python", "version": "3.11.4"},
        },
        "nbformat": 4,
        "nbformat_minor": 5,
    }


@pytest.fixture()
def clean_notebook_json() -> dict[str, Any]:
    """A notebook that passes every built-in check."""
    return _notebook_json(
        [
            _markdown_cell_json(["# Analysis\n", "Loads the data."]),
            _code_cell_json(["import math\n"], execution_count=1),
            _markdown_cell_json(["Compute the answer."]),
            _code_cell_json(["math.sqrt(2)"], execution_count=2),
        ]
    )


@pytest.fixture()
def untitled_notebook_json() -> dict[str, Any]:
    """What a fresh editor writes: one empty code cell that was never run."""
    return _notebook_json([_code_cell_json([], execution_count=None)])


@pytest.fixture()
def write_notebook(tmp_path: Path) -> Callable[[str, dict[str, Any]], Path]:
    """Write a notebook dict to ``tmp_path / relpath`` and return the path."""

    def _write(relpath: str, payload: dict[str, Any]) -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=1), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def code_json() -> Callable[..., dict[str, Any]]:
    """Factory for a code cell as nbformat JSON."""
    return _code_cell_json


@pytest.fixture()
def markdown_json() -> Callable[..., dict[str, Any]]:
    """Factory for a markdown cell as nbformat JSON."""
    return _markdown_cell_json


@pytest.fixture()
def notebook_payload() -> Callable[[list[dict[str, Any]]], dict[str, Any]]:
    """Factory for a whole notebook as nbformat JSON."""
    return _notebook_json
