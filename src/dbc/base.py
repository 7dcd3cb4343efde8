"""Contract checks: require, ensure, invariant.

These are the single enforcement mechanism of the package. Each takes a
condition, an optional message, and any number of expressions to report.
A true condition falls through with no effect. A false one logs and raises
``ContractViolation`` naming the caller's file and line and every reported
expression as ``name=value``.

Like ``assert``, checks are skipped when Python runs with ``-O``.
"""

import logging
import sys
from types import FrameType
from typing import Any, Optional

from dbc.callsite import argument_sources, call_site
from dbc.failure import ContractKind, ContractViolation, Diagnostic


logger = logging.getLogger(__name__)


def _violate(
    kind: ContractKind,
    frame: FrameType,
    message: Optional[Any],
    args: tuple,
    kwargs: dict,
) -> None:
    __tracebackhide__ = True

    site = call_site(frame)
    variables = []
    if message is not None:
        variables.append(("msg", message))
    names = argument_sources(frame, kind.value.lower(), skip=2, count=len(args))
    variables.extend(zip(names, args))
    variables.extend(kwargs.items())

    diagnostic = Diagnostic(kind, site.filename, site.lineno, tuple(variables))
    logger.critical("Contract violated:\n%s", diagnostic.render())
    raise ContractViolation(diagnostic)


def require(condition: Any, message: Optional[Any] = None, *args: Any, **kwargs: Any) -> None:
    """Check a precondition.

    Parameters
    ----------
    condition : bool
        Must hold on entry. If false, ContractViolation is raised.
    message : str, optional
        Human-readable explanation, reported as ``msg=...``.
    *args
        Expressions to report, named by their source text.
    **kwargs
        Values to report under the given names.

    Raises
    ------
    ContractViolation
        If condition is false.

    Examples
    --------
    >>> a = 3
    >>> require(a > 0, "a must be positive", a)
    >>> require(False, "This is a test", a)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    dbc.failure.ContractViolation: panic: REQUIRE:
    file: <doctest ...>:1
    vars:
    msg="This is a test" a=3
    """
    __tracebackhide__ = True
    if __debug__ and not condition:
        _violate(ContractKind.REQUIRE, sys._getframe(1), message, args, kwargs)


def ensure(condition: Any, message: Optional[Any] = None, *args: Any, **kwargs: Any) -> None:
    """Check a postcondition. Same arguments and behaviour as ``require``."""
    __tracebackhide__ = True
    if __debug__ and not condition:
        _violate(ContractKind.ENSURE, sys._getframe(1), message, args, kwargs)


def invariant(condition: Any, message: Optional[Any] = None, *args: Any, **kwargs: Any) -> None:
    """Check an invariant. Same arguments and behaviour as ``require``."""
    __tracebackhide__ = True
    if __debug__ and not condition:
        _violate(ContractKind.INVARIANT, sys._getframe(1), message, args, kwargs)
