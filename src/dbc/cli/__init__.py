"""Command-line entry points for dbc."""

from dbc.cli.run_example import run_example, main

__all__ = ['run_example', 'main']
