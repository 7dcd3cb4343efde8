"""CLIConfig: options for the example runner.

This schema handles command-line arguments parsed by argparse.
"""

import logging
from typing import Literal

from pydantic import field_validator

from dbc.schemas.base import DbcBaseModel


class CLIConfig(DbcBaseModel):
    """Command-line configuration for ``dbc-example``.

    Usage
    -----
        cli_cfg = CLIConfig(log_level="debug", pass_only=True)
        logging.basicConfig(level=cli_cfg.to_logging_level())
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    pass_only: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def to_logging_level(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return getattr(logging, self.log_level)
