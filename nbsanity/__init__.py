"""nbsanity -- a linter for Jupyter notebooks."""

__version__ = "0.3.0"
