"""Execution phase: command runner, traces and trace rendering.

Python 3.13+.
"""

from .report import TraceFormatter
from .runner import run_commands
from .trace import (
    PASSED,
    CommandRaised,
    ExecutionTrace,
    FailedCheck,
    FailureClass,
    Outcome,
    Passed,
    PostconditionFailed,
    StepRecord,
)

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
    "TraceFormatter",
    "run_commands",
]
