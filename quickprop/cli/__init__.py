"""QuickProp command line interface."""

from quickprop.cli.main import app, main

__all__ = ["app", "main"]
