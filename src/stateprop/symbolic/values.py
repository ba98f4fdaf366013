"""Symbolic values and generated command invocations.

A symbolic value is a placeholder for the not-yet-known result of a
generated step. It is an index (or the reserved ``"setup"`` root) plus an
immutable projection path; it never points at the result itself.

    >>> queue = SymbolicValue(0)
    >>> queue
    #<0>
    >>> queue["items"][0]
    #<0>['items'][0]

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Any

from stateprop.constants import SETUP_ROOT
from stateprop.core.depth_guard import DepthGuard

__all__ = [
    "SETUP",
    "CommandInvocation",
    "SymbolicValue",
    "iter_symbolic",
    "project",
]


@dataclass(frozen=True, slots=True)
class SymbolicValue:
    """Opaque handle for the result of a generated step.

    Attributes:
        root: Step index assigned at generation time, or ``"setup"``
        path: Projection keys applied, in order, after resolving the root
    """

    root: int | str
    path: tuple[Hashable, ...] = ()

    def __getitem__(self, key: Hashable) -> SymbolicValue:
        """Project by key (composes a path, executes nothing)."""
        return SymbolicValue(self.root, (*self.path, key))

    @property
    def is_root(self) -> bool:
        """True if no projection has been applied."""
        return not self.path

    def root_handle(self) -> SymbolicValue:
        """The unprojected handle this value derives from."""
        return self if not self.path else SymbolicValue(self.root)

    def __repr__(self) -> str:
        return f"#<{self.root}>" + "".join(f"[{key!r}]" for key in self.path)


# Handle standing for the value returned by the spec's setup hook.
SETUP = SymbolicValue(SETUP_ROOT)


def project(handle: SymbolicValue, key: Hashable) -> SymbolicValue:
    """Return ``handle`` projected by ``key``."""
    return handle[key]


@dataclass(frozen=True, slots=True)
class CommandInvocation:
    """A generated step: ``handle = (name *args)``.

    Attributes:
        handle: Symbolic value receiving the step's result
        name: Command name in the spec's commands mapping
        args: Concrete or symbolic arguments, possibly nested
    """

    handle: SymbolicValue
    name: str
    args: tuple[Any, ...] = ()

    def __str__(self) -> str:
        rendered = " ".join([self.name, *(repr(arg) for arg in self.args)])
        return f"{self.handle!r} = ({rendered})"


def iter_symbolic(value: Any, guard: DepthGuard | None = None) -> Iterator[SymbolicValue]:
    """Yield every symbolic value nested in ``value``.

    Walks lists, tuples, dicts (keys and values), sets and frozensets.

    Raises:
        DepthLimitExceededError: If nesting exceeds MAX_DEPTH
    """
    if guard is None:
        guard = DepthGuard()
    with guard:
        match value:
            case SymbolicValue():
                yield value
            case dict():
                for key, item in value.items():
                    yield from iter_symbolic(key, guard)
                    yield from iter_symbolic(item, guard)
            case list() | tuple() | set() | frozenset():
                for item in value:
                    yield from iter_symbolic(item, guard)
            case _:
                pass
