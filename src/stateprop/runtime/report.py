"""Human-readable rendering of execution traces.

Each executed step renders as::

    #<1> = (push #<0> 0) => None

and a failed run ends with a ``!! fail`` marker carrying either the captured
exception or a postcondition-violation notice.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stateprop.constants import FAIL_MARKER, POSTCONDITION_VIOLATION
from stateprop.symbolic import CommandInvocation

from .trace import CommandRaised, ExecutionTrace, PostconditionFailed

__all__ = ["TraceFormatter"]


@dataclass(frozen=True, slots=True)
class TraceFormatter:
    """Trace formatting service.

    Attributes:
        indent: Prefix for every rendered line
        max_value_length: Truncate rendered results longer than this
            (None disables truncation)

    Example:
        >>> print(TraceFormatter().format(trace))
          #<0> = (new) => Queue([])
          #<1> = (push #<0> 0) => None
          #<2> = (pop #<0>) => Queue([])
          !! fail: postcondition violation (command)
    """

    indent: str = "  "
    max_value_length: int | None = None

    def format(self, trace: ExecutionTrace) -> str:
        """Render every step of ``trace`` and its failure marker, if any."""
        lines = [self.format_step(step.invocation, step.result) for step in trace.steps]

        match trace.outcome:
            case PostconditionFailed(invocation=None, check=check):
                lines.append(
                    f"{self.indent}{FAIL_MARKER}: {POSTCONDITION_VIOLATION} ({check}, initial state)"
                )
            case PostconditionFailed(invocation=invocation, result=result, check=check):
                lines.append(self.format_step(invocation, result))
                lines.append(f"{self.indent}{FAIL_MARKER}: {POSTCONDITION_VIOLATION} ({check})")
            case CommandRaised(invocation=invocation, exception=exception):
                lines.append(f"{self.indent}{invocation}")
                lines.append(f"{self.indent}{FAIL_MARKER}: {exception!r}")
            case _:
                pass

        return "\n".join(lines)

    def format_step(self, invocation: CommandInvocation, result: Any) -> str:
        """Render ``<handle> = (<name> <args>) => <result>``."""
        return f"{self.indent}{invocation} => {self._value(result)}"

    def _value(self, value: Any) -> str:
        text = repr(value)
        if self.max_value_length is not None and len(text) > self.max_value_length:
            return text[: self.max_value_length] + "..."
        return text
