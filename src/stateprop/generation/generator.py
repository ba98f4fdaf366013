"""Command sequence generation against the abstract model.

Sequences are drawn step by step on a size budget ``n``:

1. Draw ``k`` in ``0..n``; ``k == 0`` stops. Stopping has weight 1 and
   continuing weight ``n``, and shrinking ``k`` towards 0 shortens the
   sequence.
2. Otherwise draw a command name from ``generate_command(state)``, check
   ``requires``, draw arguments from ``args(state)`` and check
   ``precondition``. A rejected draw is redrawn at the same size and index.
3. Allocate the next symbolic handle, advance the model with
   ``model_next_state(state, args, handle)`` and continue with ``n - 1``.

The loop is iterative; each step adds a handful of Hypothesis frames, so a
recursive formulation would hit the interpreter's recursion limit on long
sequences.

Generation never calls ``command``. Given the same Hypothesis choices it
produces the same sequence, which keeps shrinking and seed replay
deterministic.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial
from typing import Any, NoReturn

from hypothesis import event, reject
from hypothesis import strategies as st
from hypothesis.strategies import DrawFn, SearchStrategy

from stateprop.diagnostics import ErrorTemplate, MalformedArgsError, MalformedGeneratorError
from stateprop.spec import CompiledSpec, ResolvedCommand, SystemSpec, compile_spec
from stateprop.symbolic import CommandInvocation, SymbolicValue

from .config import GenerationConfig
from .verifier import is_valid_sequence

__all__ = ["command_sequences", "valid_command_sequences"]

logger = logging.getLogger(__name__)

type CommandSequence = tuple[CommandInvocation, ...]


def command_sequences(
    spec: SystemSpec | CompiledSpec,
    config: GenerationConfig | None = None,
) -> SearchStrategy[CommandSequence]:
    """Strategy of command sequences generated against the model.

    Candidates reached by shrinking are not re-validated; use
    ``valid_command_sequences`` for that.

    Args:
        spec: System specification (compiled once here if needed)
        config: Generation limits (default: GenerationConfig())
    """
    return _command_sequences(compile_spec(spec), config or GenerationConfig())


def valid_command_sequences(
    spec: SystemSpec | CompiledSpec,
    config: GenerationConfig | None = None,
) -> SearchStrategy[CommandSequence]:
    """Strategy of command sequences re-validated by the verifier.

    Every example, including every shrink candidate, satisfies the model's
    requires/precondition rules and symbolic reference ordering.
    """
    compiled = compile_spec(spec)
    return command_sequences(compiled, config).filter(partial(is_valid_sequence, compiled))


@st.composite
def _command_sequences(
    draw: DrawFn, spec: CompiledSpec, config: GenerationConfig
) -> CommandSequence:
    state = spec.initial_model_state()
    size = draw(st.integers(min_value=0, max_value=config.max_size))
    steps: list[CommandInvocation] = []

    while draw(st.integers(min_value=0, max_value=size)) > 0:
        command, args = _draw_step(draw, spec, state, config)
        handle = SymbolicValue(len(steps))
        steps.append(CommandInvocation(handle, command.name, args))
        state = command.model_next_state(state, args, handle)
        size -= 1

    return tuple(steps)


def _draw_step(
    draw: DrawFn, spec: CompiledSpec, state: Any, config: GenerationConfig
) -> tuple[ResolvedCommand, tuple[Any, ...]]:
    """Draw one eligible command and its arguments, redrawing on rejection."""
    for attempt in range(config.max_draw_retries):
        command = spec.registry.lookup(draw(_command_names(spec, state)))
        if not command.requires(state):
            continue
        args = _draw_args(draw, command, state)
        if command.precondition(state, args):
            if attempt:
                event("redrawn steps")
            return command, args
    _exhausted(config)


def _command_names(spec: CompiledSpec, state: Any) -> SearchStrategy[str]:
    strategy = spec.generate_command(state)
    if not isinstance(strategy, SearchStrategy):
        raise MalformedGeneratorError(ErrorTemplate.malformed_generator(strategy))
    return strategy


def _draw_args(draw: DrawFn, command: ResolvedCommand, state: Any) -> tuple[Any, ...]:
    strategy = command.args(state)
    if not isinstance(strategy, SearchStrategy):
        raise MalformedArgsError(ErrorTemplate.malformed_args(command.name, strategy))
    args: Sequence[Any] = draw(strategy)
    if not isinstance(args, list | tuple):
        raise MalformedArgsError(ErrorTemplate.malformed_args(command.name, args))
    return tuple(args)


def _exhausted(config: GenerationConfig) -> NoReturn:
    logger.warning(
        "No eligible command after %d draws; rejecting test case",
        config.max_draw_retries,
    )
    reject()
