"""`dbc` - Design by Contract checks for Python.

Design by Contract binds a caller and the function called to a contract,
represented as the Hoare triple ``{P} C {Q}``: ``P`` is the precondition
before executing command ``C`` and ``Q`` is the postcondition.

    require(x >= 0, "x must be non-negative", x)
    result = compute(x)
    ensure(result is not None, "compute returned nothing", x, result)

A false condition raises ``ContractViolation`` whose message names the
file and line of the check and each reported expression as ``name=value``.

See also:
- http://en.wikipedia.org/wiki/Design_by_contract
- http://en.wikipedia.org/wiki/Hoare_logic
- https://dlang.org/spec/contracts.html
"""

from dbc.failure import ContractKind, ContractViolation, Diagnostic
from dbc.base import require, ensure, invariant
from dbc.formatvar import formatvar

__version__ = "0.1.0"

__all__ = [
    "ContractKind",
    "ContractViolation",
    "Diagnostic",
    "require",
    "ensure",
    "invariant",
    "formatvar",
]
