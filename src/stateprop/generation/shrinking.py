"""Step-removal shrinking for concrete command sequences.

Hypothesis shrinks generated sequences itself. This module covers sequences
that exist outside a Hypothesis run, such as a failing case replayed from a
report: the removal tree offers every sequence with one step dropped, and
``minimize`` walks it greedily using the verifier as acceptance predicate.

Removing a step leaves the handles of later steps untouched; steps that
referenced the removed handle are rejected by the verifier, so such
candidates never reach the real system.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from stateprop.spec import CompiledSpec
from stateprop.symbolic import CommandInvocation

from .verifier import is_valid_sequence

__all__ = ["ShrinkNode", "minimize", "removal_candidates", "shrink_tree"]

logger = logging.getLogger(__name__)

type CommandSequence = tuple[CommandInvocation, ...]


def removal_candidates(invocations: Sequence[CommandInvocation]) -> Iterator[CommandSequence]:
    """Yield ``invocations`` with exactly one step removed, first to last."""
    steps = tuple(invocations)
    for index in range(len(steps)):
        yield steps[:index] + steps[index + 1 :]


@dataclass(frozen=True, slots=True)
class ShrinkNode:
    """Lazy node of the step-removal tree.

    Attributes:
        value: The sequence at this node
    """

    value: CommandSequence

    def children(self) -> Iterator[ShrinkNode]:
        """Nodes for each single-step removal of ``value``."""
        for candidate in removal_candidates(self.value):
            yield ShrinkNode(candidate)


def shrink_tree(invocations: Sequence[CommandInvocation]) -> ShrinkNode:
    """Root of the removal tree for ``invocations``."""
    return ShrinkNode(tuple(invocations))


def minimize(
    spec: CompiledSpec,
    invocations: Sequence[CommandInvocation],
    still_fails: Callable[[CommandSequence], bool],
) -> CommandSequence:
    """Greedily drop steps while the sequence stays valid and failing.

    At each node the first child that the verifier accepts and for which
    ``still_fails`` holds becomes the new root; the search ends when no
    child qualifies.

    Args:
        spec: Compiled specification (for the verifier)
        invocations: A failing, valid sequence
        still_fails: Predicate re-running a candidate; usually performs
            real side effects, so it is only called on verified candidates

    Returns:
        A locally minimal failing sequence
    """
    node = shrink_tree(invocations)
    attempts = 0
    while True:
        for child in node.children():
            if not is_valid_sequence(spec, child.value):
                continue
            attempts += 1
            if still_fails(child.value):
                node = child
                break
        else:
            logger.debug(
                "Minimised to %d steps after %d replays", len(node.value), attempts
            )
            return node.value
