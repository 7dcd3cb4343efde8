"""Pydantic configuration schemas for the dbc command-line tools.

The contract checks themselves read no configuration; these models only
validate what the example runner is asked to do.

Exports
-------
DbcBaseModel : class
    Strict base model shared by all schemas
CLIConfig : class
    Command-line options for the example runner
"""

from dbc.schemas.base import DbcBaseModel
from dbc.schemas.cli import CLIConfig

__all__ = [
    'DbcBaseModel',
    'CLIConfig',
]
