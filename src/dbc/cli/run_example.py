"""Example runner: shows formatvar output, then violates a precondition.

Usage:
    dbc-example
    dbc-example --pass-only
    python -m dbc -v

The final ``require`` is false on purpose. Its ContractViolation is not
caught, so the process ends with the diagnostic, a traceback, and exit
status 1.
"""

import argparse
import logging
from typing import Optional, Sequence

from dbc import formatvar, require
from dbc.schemas import CLIConfig


logger = logging.getLogger(__name__)


class AA:
    def __init__(self, value: int):
        self.value = value

    def __repr__(self):
        return f"AA({self.value!r})"


class BB:
    def __init__(self, inner: AA):
        self.inner = inner

    def __repr__(self):
        return f"BB({self.inner!r})"


def setup_logging(config: CLIConfig) -> None:
    """Configure the root logger with a console handler."""
    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(config.to_logging_level())
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(config.to_logging_level())
    ch.setFormatter(formatter)
    root.addHandler(ch)

    logger.debug("Logging: level=%s", config.log_level)


def run_example(config: CLIConfig) -> None:
    """Print formatted variables, then check a true and a false precondition.

    Parameters
    ----------
    config : CLIConfig
        Validated options. With ``pass_only`` the failing check is skipped.

    Raises
    ------
    ContractViolation
        From the final ``require`` unless ``pass_only`` is set.
    """
    print("Starting...")
    a = 34
    b = BB(AA(234))
    msg = "My message"

    print(formatvar(a))
    print(formatvar(b))
    print(formatvar(msg, a, b))

    require(True)
    if config.pass_only:
        logger.info("Skipping failing precondition (--pass-only)")
        return

    msg = "This is a test"
    a = 3
    require(False, msg, a)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the dbc contract example")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--pass-only", action="store_true", help="Stop before the failing check")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    config = CLIConfig.model_validate({
        k: v
        for k, v in {
            "log_level": "DEBUG" if args.verbose else args.log_level,
            "pass_only": args.pass_only,
        }.items()
        if v is not None
    })

    setup_logging(config)
    run_example(config)


if __name__ == "__main__":
    main()
