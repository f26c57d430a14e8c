"""Built-in notebook checks."""
