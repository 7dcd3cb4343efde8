"""Contract kinds, the violation diagnostic, and the violation exception.

Contracts fail fast, loud, and once. All violations raise the same
exception type; there is no recovery path and no other error taxonomy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from dbc.formatvar import format_pairs


class ContractKind(str, Enum):
    """Kind of contract being checked.

    The value is the label printed in the diagnostic header.

    REQUIRE: precondition, checked on entry
    ENSURE: postcondition, checked on exit
    INVARIANT: condition that holds throughout
    """
    REQUIRE = "REQUIRE"
    ENSURE = "ENSURE"
    INVARIANT = "INVARIANT"


@dataclass(frozen=True)
class Diagnostic:
    """Everything reported about one violated contract.

    Built at the moment a condition is found false, then rendered and
    discarded along with the exception that carries it.
    """
    kind: ContractKind
    filename: str
    lineno: int
    variables: tuple[tuple[str, Any], ...] = ()

    def render(self) -> str:
        """Format as the multi-line text shown on violation.

        Examples
        --------
        >>> print(Diagnostic(ContractKind.REQUIRE, "main.py", 45, (("a", 3),)).render())
        panic: REQUIRE:
        file: main.py:45
        vars:
        a=3
        """
        lines = [
            f"panic: {self.kind.value}:",
            f"file: {self.filename}:{self.lineno}",
        ]
        if self.variables:
            lines.append("vars:")
            lines.append(format_pairs(self.variables))
        return "\n".join(lines)


class ContractViolation(AssertionError):
    """Raised when a require/ensure/invariant condition is false.

    This indicates a bug in the calling code, not bad input. It is an
    ``AssertionError`` so it unwinds like a failed ``assert``; the rendered
    diagnostic is the exception message.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.render())
        self.diagnostic = diagnostic

    def __reduce__(self):
        # args holds the rendered text; rebuild from the diagnostic instead
        return (type(self), (self.diagnostic,))
