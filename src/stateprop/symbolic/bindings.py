"""Binding table for concrete substitution of symbolic values.

The table is append-only: each root is bound exactly once, in execution
order, so resolution of a handle from a strictly earlier step always
succeeds. Failing lookups are engine invariant violations, not test
failures.

Python 3.13+.
"""

from __future__ import annotations

import copy
from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from stateprop.core.depth_guard import DepthGuard
from stateprop.diagnostics import ErrorTemplate, RebindError, UnboundSymbolError

from .values import SymbolicValue, iter_symbolic

__all__ = ["Bindings", "lookup_key"]


def lookup_key(value: Any, key: Hashable) -> Any:
    """Apply one projection step to a concrete value.

    Mappings use ``.get``; non-string sequences accept in-range integer
    keys. Anything else projects to ``None``.
    """
    if isinstance(value, Mapping):
        return value.get(key)
    if (
        isinstance(value, Sequence)
        and not isinstance(value, str | bytes)
        and isinstance(key, int)
        and -len(value) <= key < len(value)
    ):
        return value[key]
    return None


class Bindings:
    """Append-only table from symbolic roots to concrete results.

    Example:
        >>> table = Bindings()
        >>> table.bind(SymbolicValue(0), {"items": [7]})
        >>> table.resolve([SymbolicValue(0)["items"][0], "x"])
        [7, 'x']
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        """Initialize empty binding table."""
        self._values: dict[int | str, Any] = {}

    def bind(self, handle: SymbolicValue, value: Any) -> None:
        """Bind the root of ``handle`` to ``value``.

        Raises:
            RebindError: If the root is already bound
        """
        if handle.root in self._values:
            raise RebindError(ErrorTemplate.symbol_rebound(handle))
        self._values[handle.root] = value

    def is_bound(self, handle: SymbolicValue) -> bool:
        """Check whether the root of ``handle`` has a concrete value."""
        return handle.root in self._values

    def __len__(self) -> int:
        return len(self._values)

    def resolve(self, value: Any) -> Any:
        """Substitute concrete values for every symbolic value in ``value``.

        Values holding no symbolic value are returned as is. Containers
        holding one are rebuilt with their own type: namedtuples via
        ``_make``, mappings by copy so a ``defaultdict`` keeps its factory.

        Raises:
            UnboundSymbolError: If a referenced root is not bound
            DepthLimitExceededError: If nesting exceeds MAX_DEPTH
        """
        return self._resolve(value, DepthGuard())

    def _resolve(self, value: Any, guard: DepthGuard) -> Any:
        with guard:
            if isinstance(value, SymbolicValue):
                return self._resolve_handle(value)
            if next(iter_symbolic(value), None) is None:
                return value
            match value:
                case dict():
                    rebuilt = copy.copy(value)
                    rebuilt.clear()
                    for key, item in value.items():
                        rebuilt[self._resolve(key, guard)] = self._resolve(item, guard)
                    return rebuilt
                case tuple() if hasattr(value, "_make"):
                    return type(value)._make(self._resolve(item, guard) for item in value)
                case list() | tuple() | set() | frozenset():
                    return type(value)(self._resolve(item, guard) for item in value)
                case _:
                    return value

    def _resolve_handle(self, handle: SymbolicValue) -> Any:
        if handle.root not in self._values:
            raise UnboundSymbolError(ErrorTemplate.unbound_symbol(handle))
        result = self._values[handle.root]
        for key in handle.path:
            result = lookup_key(result, key)
        return result
