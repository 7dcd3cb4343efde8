"""Call-site capture for contract checks.

Recovers where a check was invoked and the source text of the expressions
passed to it, so a violation can report ``a=3`` rather than just ``3``.

Source text comes from re-parsing the caller's file. On interpreters that
expose instruction positions (CPython 3.11+), the exact call node is found
from the executing instruction; otherwise the innermost call on the current
line with the right name and number of arguments is used, and positional
names are reported when that call is ambiguous.
"""

import ast
import functools
import linecache
import logging
from types import FrameType
from typing import NamedTuple, Optional


logger = logging.getLogger(__name__)


class CallSite(NamedTuple):
    """File and line of a check invocation."""
    filename: str
    lineno: int


def call_site(frame: FrameType) -> CallSite:
    """Return the file and line currently executing in ``frame``."""
    return CallSite(frame.f_code.co_filename, frame.f_lineno)


@functools.lru_cache(maxsize=64)
def _parse(source: str) -> Optional[ast.Module]:
    try:
        return ast.parse(source)
    except SyntaxError:
        return None


def _instruction_position(frame: FrameType):
    """(lineno, end_lineno, col, end_col) of the instruction being executed."""
    code = frame.f_code
    if not hasattr(code, "co_positions") or frame.f_lasti < 0:
        return None
    for index, position in enumerate(code.co_positions()):
        if index == frame.f_lasti // 2:
            return position
    return None


def _callee_name(node: ast.Call) -> Optional[str]:
    func = node.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


def _find_call(
    tree: ast.Module, frame: FrameType, func_name: str, nargs: int
) -> Optional[ast.Call]:
    calls = [node for node in ast.walk(tree) if isinstance(node, ast.Call)]

    position = _instruction_position(frame)
    if position is not None and None not in position:
        lineno, end_lineno, col, end_col = position
        for node in calls:
            if (node.lineno, node.end_lineno, node.col_offset, node.end_col_offset) == (
                lineno, end_lineno, col, end_col
            ):
                return node

    # Without instruction positions only the line is known: accept a single
    # call to func_name with the same arity on it, never guess among several.
    line = frame.f_lineno
    candidates = [
        node for node in calls
        if node.lineno <= line <= node.end_lineno
        and len(node.args) == nargs
        and _callee_name(node) == func_name
    ]
    if len(candidates) != 1:
        return None
    return candidates[0]


def argument_sources(frame: FrameType, func_name: str, skip: int, count: int) -> list[str]:
    """Source text of the positional arguments passed at ``frame``'s call.

    Parameters
    ----------
    frame : FrameType
        Frame of the caller that invoked the check.
    func_name : str
        Name the check is called by (``require``, ``formatvar``, ...).
        Used to pick the call when instruction positions are unavailable.
    skip : int
        Leading positional arguments to drop (condition, message).
    count : int
        Number of names to return.

    Returns
    -------
    list of str
        One name per argument. ``arg0``, ``arg1``, ... when the source
        cannot be recovered.

    Examples
    --------
    >>> # at the call site: require(x > 0, "positive", x, y + 1)
    >>> argument_sources(frame, "require", skip=2, count=2)
    ['x', 'y + 1']
    """
    fallback = [f"arg{i}" for i in range(count)]
    if count == 0:
        return []

    filename = frame.f_code.co_filename
    source = "".join(linecache.getlines(filename, frame.f_globals))
    if not source:
        logger.debug("No source available for %s, using positional names", filename)
        return fallback

    tree = _parse(source)
    if tree is None:
        return fallback

    node = _find_call(tree, frame, func_name, skip + count)
    if node is None:
        logger.debug("Could not locate call at %s:%d", filename, frame.f_lineno)
        return fallback

    args = node.args[skip:]
    if len(args) != count or any(isinstance(arg, ast.Starred) for arg in node.args):
        return fallback

    names = []
    for arg in args:
        segment = ast.get_source_segment(source, arg)
        names.append(segment if segment is not None else ast.unparse(arg))
    return names
