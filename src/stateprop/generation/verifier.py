"""Validity verifier for candidate command sequences.

Hypothesis shrinks by mutating its choice sequence with no knowledge of the
model. A candidate produced that way (or supplied by hand, or minimised by
removing steps) is replayed here against the abstract model exactly as
generation would have built it, and rejected if the model's own rules do
not hold.

Pure: never calls ``command``, never touches the real system.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from stateprop.spec import CompiledSpec
from stateprop.symbolic import CommandInvocation, iter_symbolic

__all__ = ["first_invalid_step", "is_valid_sequence"]

logger = logging.getLogger(__name__)


def first_invalid_step(spec: CompiledSpec, invocations: Sequence[CommandInvocation]) -> int | None:
    """Index of the first step breaking the model's rules, or None if all hold.

    A step is invalid when:
    - its handle root was already produced (indices are never reused)
    - an argument references a handle not produced by a strictly earlier step
    - ``requires(state)`` or ``precondition(state, args)`` is false

    Raises:
        UnknownCommandError: If a step names an undeclared command
    """
    state = spec.initial_model_state()
    available = set(spec.initial_roots())

    for index, invocation in enumerate(invocations):
        command = spec.registry.lookup(invocation.name)
        if invocation.handle.root in available or not invocation.handle.is_root:
            logger.debug("Step %d rejected: handle %r reused", index, invocation.handle)
            return index
        if any(ref.root not in available for ref in iter_symbolic(invocation.args)):
            logger.debug("Step %d rejected: references a handle not yet produced", index)
            return index
        if not command.requires(state) or not command.precondition(state, invocation.args):
            logger.debug("Step %d rejected: %s not eligible in model state", index, invocation.name)
            return index
        available.add(invocation.handle.root)
        state = command.model_next_state(state, invocation.args, invocation.handle)

    return None


def is_valid_sequence(spec: CompiledSpec, invocations: Sequence[CommandInvocation]) -> bool:
    """True if every step of ``invocations`` is valid against the model."""
    return first_invalid_step(spec, invocations) is None
