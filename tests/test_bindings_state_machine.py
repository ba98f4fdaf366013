"""State machine testing for the symbolic binding table using Hypothesis.

Drives Bindings through interleaved bind / project / resolve sequences and
checks every resolution against a plain-dict model of bound results.

Target Coverage:
- Append-only binding in step order
- Projection paths of arbitrary length over nested dicts and lists
- Rebind and unbound lookups raising invariant violations

This catches bugs that only appear in specific operation orders, e.g. a
projection of a handle bound several steps earlier.

References:
- Hypothesis stateful testing: https://hypothesis.readthedocs.io/en/latest/stateful.html
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import settings
from hypothesis import strategies as st
from hypothesis.stateful import Bundle, RuleBasedStateMachine, initialize, invariant, rule

from stateprop import SymbolicValue
from stateprop.diagnostics import RebindError, UnboundSymbolError
from stateprop.symbolic import Bindings
from tests.strategies import projection_keys

# =============================================================================
# Strategies
# =============================================================================


def step_results() -> st.SearchStrategy[Any]:
    """Nested dicts and lists whose keys overlap with projection_keys()."""
    return st.recursive(
        st.one_of(st.none(), st.integers(), st.text(max_size=3)),
        lambda children: st.one_of(
            st.lists(children, max_size=4),
            st.dictionaries(st.sampled_from(["a", "b", "c", "x"]), children, max_size=3),
        ),
        max_leaves=8,
    )


def _expected(result: Any, path: tuple[Any, ...]) -> Any:
    for key in path:
        if isinstance(result, dict):
            result = result.get(key)
        elif isinstance(result, list) and isinstance(key, int) and -len(result) <= key < len(result):
            result = result[key]
        else:
            return None
    return result


# =============================================================================
# State Machine
# =============================================================================


class BindingsStateMachine(RuleBasedStateMachine):
    """State machine for the append-only binding table.

    Bundles (state containers):
    - handles: Bound roots and projections of them

    Invariants:
    - One binding per executed step
    - Every handle in the bundle resolves to the model's value
    """

    handles = Bundle("handles")

    @initialize()
    def setup_table(self) -> None:
        """Start from an empty table."""
        self.table = Bindings()
        self.results: dict[int, Any] = {}

    @rule(target=handles, result=step_results())
    def bind_step(self, result: Any) -> SymbolicValue:
        """Bind the next step's result to a fresh root."""
        handle = SymbolicValue(len(self.results))
        self.table.bind(handle, result)
        self.results[handle.root] = result  # type: ignore[index]
        return handle

    @rule(target=handles, handle=handles, key=projection_keys())
    def project_handle(self, handle: SymbolicValue, key: str | int) -> SymbolicValue:
        """Extend a handle's path; nothing is evaluated."""
        return handle[key]

    @rule(handle=handles)
    def resolve_handle(self, handle: SymbolicValue) -> None:
        """Resolution follows the path through the bound result."""
        expected = _expected(self.results[handle.root], handle.path)  # type: ignore[index]
        assert self.table.resolve(handle) == expected

    @rule(handle=handles, plain=st.integers())
    def resolve_nested(self, handle: SymbolicValue, plain: int) -> None:
        """Handles inside containers resolve in place."""
        expected = _expected(self.results[handle.root], handle.path)  # type: ignore[index]
        assert self.table.resolve({"h": [handle, plain]}) == {"h": [expected, plain]}

    @rule(handle=handles)
    def rebind_rejected(self, handle: SymbolicValue) -> None:
        """Bound roots can never be rebound."""
        with pytest.raises(RebindError):
            self.table.bind(handle, "again")

    @rule()
    def next_root_unbound(self) -> None:
        """The root the next step will get is not resolvable yet."""
        with pytest.raises(UnboundSymbolError):
            self.table.resolve(SymbolicValue(len(self.results)))

    @invariant()
    def one_binding_per_step(self) -> None:
        """The table grows by exactly one per bind."""
        assert len(self.table) == len(self.results)


# =============================================================================
# Test Entry Point
# =============================================================================


TestBindingsStateMachine = BindingsStateMachine.TestCase
TestBindingsStateMachine.settings = settings(
    max_examples=100,
    stateful_step_count=30,
    deadline=None,
)


class TestBindingsStateMachineBasic:
    """Basic sanity tests for the state machine itself."""

    def test_state_machine_bind_and_resolve(self) -> None:
        """A single bind then projection resolves through the model."""
        machine = BindingsStateMachine()
        machine.setup_table()

        handle = machine.bind_step({"a": [1, 2]})
        machine.resolve_handle(machine.project_handle(handle, "a"))
        machine.one_binding_per_step()

        assert machine.table.resolve(handle["a"][1]) == 2
