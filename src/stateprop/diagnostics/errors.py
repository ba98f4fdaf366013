"""stateprop exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Taxonomy:
    SpecError: the specification itself is wrong; fatal, never retried
    GenerationExhaustedError: no valid sequence could be drawn
    PostconditionViolationError: reality disagreed with the model (test failure)
    InvariantViolationError: engine invariant broken; fatal, not a test outcome

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from stateprop.runtime.trace import ExecutionTrace

__all__ = [
    "EmptySpecError",
    "GenerationExhaustedError",
    "InvalidSlotError",
    "InvariantViolationError",
    "MalformedArgsError",
    "MalformedGeneratorError",
    "MissingCommandError",
    "PostconditionViolationError",
    "RebindError",
    "SpecError",
    "StatePropError",
    "UnboundSymbolError",
    "UnknownCommandError",
]


class StatePropError(Exception):
    """Base exception for all stateprop errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StatePropError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SpecError(StatePropError):
    """The specification is malformed.

    Raised at spec-build time or while generating. Never retried.
    """


class UnknownCommandError(SpecError):
    """generate_command yielded a name absent from the commands map."""


class MalformedArgsError(SpecError):
    """An args slot did not produce a strategy of argument sequences."""


class MalformedGeneratorError(SpecError):
    """generate_command did not return a strategy."""


class MissingCommandError(SpecError):
    """A command spec has no callable real command."""


class EmptySpecError(SpecError):
    """The commands mapping is empty."""


class InvalidSlotError(SpecError):
    """A slot is unknown or holds a non-callable value."""


class GenerationExhaustedError(StatePropError):
    """Generation gave up: nearly every draw was rejected by the model."""


class PostconditionViolationError(StatePropError, AssertionError):
    """Reality disagreed with the model.

    A normal test failure, not an engine error. Carries the execution
    trace that produced it.

    Attributes:
        trace: The failing execution trace
    """

    def __init__(self, message: str | Diagnostic, trace: ExecutionTrace) -> None:
        """Initialize PostconditionViolationError.

        Args:
            message: Error message string OR Diagnostic object
            trace: The failing execution trace
        """
        super().__init__(message)
        self.trace = trace


class InvariantViolationError(StatePropError):
    """Engine invariant violated.

    Unreachable when generation is correct; never reported as a test outcome.
    """


class UnboundSymbolError(InvariantViolationError):
    """A symbolic value was resolved before its root was bound."""


class RebindError(InvariantViolationError):
    """A symbolic root was bound twice."""
