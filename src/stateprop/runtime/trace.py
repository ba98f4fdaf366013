"""Execution trace types.

A run ends in exactly one of three outcomes:
    Passed: every step's postconditions held
    PostconditionFailed: the real system disagreed with the model
    CommandRaised: the real command raised (the system under test errored)

Disagreement and error are kept apart: a postcondition failure is a normal
test failure, while a captured exception is the authoritative failure cause
and is re-raised by the orchestrator.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from stateprop.diagnostics import Diagnostic, ErrorTemplate
from stateprop.symbolic import CommandInvocation

__all__ = [
    "PASSED",
    "CommandRaised",
    "ExecutionTrace",
    "FailedCheck",
    "FailureClass",
    "Outcome",
    "Passed",
    "PostconditionFailed",
    "StepRecord",
]


class FailedCheck(StrEnum):
    """Which postcondition rejected a real state."""

    SPEC = "spec"  # SystemSpec.postcondition(state)
    COMMAND = "command"  # CommandSpec.postcondition(prev, next, args, result)


@dataclass(frozen=True, slots=True)
class StepRecord:
    """A step whose postconditions held.

    Attributes:
        index: Position in the executed sequence
        invocation: The generated step
        args: Concrete arguments after symbolic resolution
        prev_state: Real state before the step
        next_state: Real state after the step
        result: Value returned by the real command
    """

    index: int
    invocation: CommandInvocation
    args: tuple[Any, ...]
    prev_state: Any
    next_state: Any
    result: Any


@dataclass(frozen=True, slots=True)
class Passed:
    """Every step executed and every check held."""


PASSED = Passed()


@dataclass(frozen=True, slots=True)
class PostconditionFailed:
    """A postcondition returned false.

    ``step_index`` and ``invocation`` are None when the spec postcondition
    rejected the initial state.
    """

    check: FailedCheck
    step_index: int | None
    invocation: CommandInvocation | None
    prev_state: Any
    next_state: Any
    args: tuple[Any, ...] = ()
    result: Any = None

    @property
    def diagnostic(self) -> Diagnostic:
        """Structured description of the violated check."""
        if self.invocation is None or self.step_index is None:
            return ErrorTemplate.initial_postcondition_violated()
        return ErrorTemplate.postcondition_violated(
            self.invocation.name, self.step_index, self.check
        )


@dataclass(frozen=True, slots=True)
class CommandRaised:
    """The real command raised instead of returning."""

    exception: Exception
    step_index: int
    invocation: CommandInvocation
    prev_state: Any
    args: tuple[Any, ...]


type Outcome = Passed | PostconditionFailed | CommandRaised

# A failure is classified by the check that failed or by the exception type.
type FailureClass = FailedCheck | type[Exception]


@dataclass(frozen=True, slots=True)
class ExecutionTrace:
    """Ordered outcome of one run against the real system.

    Attributes:
        steps: Steps that passed, in execution order
        outcome: How the run ended
        final_state: Most recent successfully computed real state
    """

    steps: tuple[StepRecord, ...]
    outcome: Outcome
    final_state: Any

    @property
    def passed(self) -> bool:
        """True if the run completed with every check holding."""
        return isinstance(self.outcome, Passed)

    @property
    def exception(self) -> Exception | None:
        """Exception captured from the real command, if any."""
        if isinstance(self.outcome, CommandRaised):
            return self.outcome.exception
        return None

    @property
    def failure_class(self) -> FailureClass | None:
        """Failed check or exception type; None for a passing run."""
        match self.outcome:
            case PostconditionFailed(check=check):
                return check
            case CommandRaised(exception=exception):
                return type(exception)
            case _:
                return None

    @property
    def failing_step(self) -> int | None:
        """Index of the step that ended the run, if it failed at a step."""
        match self.outcome:
            case PostconditionFailed(step_index=index) | CommandRaised(step_index=index):
                return index
            case _:
                return None
