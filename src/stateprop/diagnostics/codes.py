"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for stateprop errors.

    Categories:
        SPECIFICATION: The user's specification is malformed (fatal)
        GENERATION: Sequence generation could not make progress
        VERIFICATION: A model or postcondition disagreed with reality
        INTERNAL: Engine invariant violated (should be unreachable)
    """

    SPECIFICATION = "specification"
    GENERATION = "generation"
    VERIFICATION = "verification"
    INTERNAL = "internal"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Specification errors (malformed specs, unknown commands)
        2000-2999: Generation errors (exhausted redraw budgets)
        3000-3999: Verification failures (postconditions)
        4000-4999: Internal invariant violations (symbolic resolution)
    """

    # Specification errors (1000-1999)
    UNKNOWN_COMMAND = 1001
    MALFORMED_ARGS = 1002
    MALFORMED_GENERATOR = 1003
    MISSING_COMMAND = 1004
    EMPTY_SPEC = 1005
    INVALID_SLOT = 1006

    # Generation errors (2000-2999)
    GENERATION_EXHAUSTED = 2001

    # Verification failures (3000-3999)
    POSTCONDITION_VIOLATED = 3001
    INITIAL_POSTCONDITION_VIOLATED = 3002

    # Internal invariant violations (4000-4999)
    UNBOUND_SYMBOL = 4001
    SYMBOL_REBOUND = 4002
    MAX_DEPTH_EXCEEDED = 4003

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.SPECIFICATION
            case 2:
                return ErrorCategory.GENERATION
            case 3:
                return ErrorCategory.VERIFICATION
            case _:
                return ErrorCategory.INTERNAL


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        command_name: Command involved in the error, if any
        step_index: Index of the generated step involved, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    command_name: str | None = None
    step_index: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNKNOWN_COMMAND]: Command 'push' not found in commands map
              = command: push
              = help: Check that generate_command only yields declared command names

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
