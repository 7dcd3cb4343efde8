"""Stringify variables together with their source names.

Used by the contract checks to list the variables a violation reports,
and usable on its own:

    >>> a = 34
    >>> msg = "My message"
    >>> formatvar(msg, a)
    'msg="My message" a=34'
"""

import json
import sys
from typing import Any, Iterable

from dbc.callsite import argument_sources


def render_value(value: Any) -> str:
    """Textual representation of a value in a diagnostic.

    Strings are double-quoted with escapes; everything else uses ``repr()``.
    """
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def format_pairs(pairs: Iterable[tuple[str, Any]]) -> str:
    """Join ``(name, value)`` pairs as ``name=value`` separated by spaces."""
    return " ".join(f"{name}={render_value(value)}" for name, value in pairs)


def formatvar(*values: Any, **named: Any) -> str:
    """Format values as ``name=value``, naming each by its call-site expression.

    Parameters
    ----------
    *values
        Values to format. Each is named by the source text of the
        expression passed, e.g. ``formatvar(b)`` gives ``b=BB(AA(234))``.
    **named
        Values named explicitly by keyword. Listed after positional values.

    Returns
    -------
    str
        Space-separated ``name=value`` pairs in the order supplied.
    """
    names = argument_sources(sys._getframe(1), "formatvar", skip=0, count=len(values))
    pairs = list(zip(names, values)) + list(named.items())
    return format_pairs(pairs)
