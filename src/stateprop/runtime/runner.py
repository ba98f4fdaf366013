"""Sequential execution of a command sequence against the real system.

One run is the unit of isolation:

    setup -> initial state -> spec postcondition -> steps... -> cleanup

Each step resolves its symbolic arguments against the results of earlier
steps, calls the real command, binds the result to the step's handle,
advances the real state and evaluates the spec postcondition followed by
the command postcondition. The first false check or captured exception ends
the run. ``cleanup`` runs exactly once on every exit path once the initial
state exists.

Strictly single-threaded: argument resolution assumes handle bindings are
made in sequence order. Never calls ``args``, ``requires`` or
``precondition``.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from stateprop.spec import CompiledSpec, SystemSpec, compile_spec
from stateprop.symbolic import SETUP, Bindings, CommandInvocation

from .trace import (
    PASSED,
    CommandRaised,
    ExecutionTrace,
    FailedCheck,
    PostconditionFailed,
    StepRecord,
)

__all__ = ["run_commands"]

logger = logging.getLogger(__name__)


def run_commands(
    spec: SystemSpec | CompiledSpec,
    invocations: Sequence[CommandInvocation],
) -> ExecutionTrace:
    """Run ``invocations`` against a fresh instance of the real system.

    Args:
        spec: System specification
        invocations: Sequence produced by generation (or a verified shrink of one)

    Returns:
        Trace of passed steps and the run's outcome

    Note:
        ``cleanup`` receives the real state, so it only runs once
        ``real_initial_state`` has returned. If that function raises after
        ``setup`` succeeded, the setup value is not cleaned up; release it
        inside ``real_initial_state`` before re-raising.

    Raises:
        UnboundSymbolError: If an argument references a handle with no result
            (unreachable for verified sequences)
        Exception: Anything raised by setup, state functions, postconditions
            or cleanup propagates; only exceptions from ``command`` are captured
    """
    spec = compile_spec(spec)
    bindings = Bindings()

    if spec.setup is not None:
        setup_value = spec.setup()
        bindings.bind(SETUP, setup_value)
        state = spec.real_initial_state(setup_value)
    else:
        state = spec.real_initial_state()

    steps: list[StepRecord] = []
    try:
        if not spec.postcondition(state):
            logger.debug("Initial state rejected by spec postcondition")
            failure = PostconditionFailed(FailedCheck.SPEC, None, None, state, state)
            return ExecutionTrace((), failure, state)

        for index, invocation in enumerate(invocations):
            command = spec.registry.lookup(invocation.name)
            args = bindings.resolve(invocation.args)
            logger.debug("Step %d: %s", index, invocation)

            try:
                result = command.command(*args)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                logger.warning(
                    "Command %s raised %s at step %d", invocation.name, type(exc).__name__, index
                )
                raised = CommandRaised(exc, index, invocation, state, args)
                return ExecutionTrace(tuple(steps), raised, state)

            bindings.bind(invocation.handle, result)
            prev_state, state = state, command.real_next_state(state, args, result)

            check: FailedCheck | None = None
            if not spec.postcondition(state):
                check = FailedCheck.SPEC
            elif not command.postcondition(prev_state, state, args, result):
                check = FailedCheck.COMMAND
            if check is not None:
                logger.debug("Step %d: %s postcondition violated", index, check)
                failure = PostconditionFailed(
                    check, index, invocation, prev_state, state, args, result
                )
                return ExecutionTrace(tuple(steps), failure, state)

            steps.append(StepRecord(index, invocation, args, prev_state, state, result))

        return ExecutionTrace(tuple(steps), PASSED, state)
    finally:
        if spec.cleanup is not None:
            spec.cleanup(state)
