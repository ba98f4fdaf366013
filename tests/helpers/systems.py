"""Example systems under test and their specifications.

Shared by the runner, generator and orchestrator tests:

- queue_spec: FIFO queue with new/push/pop; generic next_state for both phases
- store_spec: key-value store with setup/cleanup, split model/real initial
  states and symbolic projection (``receipt["key"]``)

Every factory takes optional knobs so a single test can plant a bug or
observe lifecycle calls.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from hypothesis import strategies as st

from stateprop import CommandInvocation, CommandSpec, SymbolicValue, SystemSpec

# =============================================================================
# Queue
# =============================================================================


class Queue:
    """Minimal FIFO container."""

    def __init__(self) -> None:
        self.items: list[int] = []

    def push(self, value: int) -> None:
        self.items.append(value)

    def pop(self) -> int:
        return self.items.pop(0)

    def __repr__(self) -> str:
        return f"Queue({self.items!r})"


def new_queue() -> Queue:
    return Queue()


def push(queue: Queue, value: int) -> None:
    queue.push(value)


def pop(queue: Queue) -> int:
    return queue.pop()


def pop_returning_queue(queue: Queue) -> Queue:
    """Buggy pop: drops the element but returns the container."""
    queue.pop()
    return queue


def push_rejecting_negatives(queue: Queue, value: int) -> None:
    """Buggy push: raises for negative values."""
    if value < 0:
        msg = f"negative value {value}"
        raise ValueError(msg)
    queue.push(value)


def queue_initial_state() -> dict[str, Any]:
    return {"queue": None, "elements": ()}


def queue_spec(
    *,
    pop_command: Callable[[Queue], Any] = pop,
    push_command: Callable[[Queue, int], None] = push,
    postcondition: Callable[[Any], bool] | None = None,
) -> SystemSpec:
    """FIFO queue: ``new``, ``push(queue, v)``, ``pop(queue)``.

    State (both phases): ``{"queue": handle-or-Queue, "elements": tuple}``.
    """
    return SystemSpec(
        commands={
            "new": CommandSpec(
                command=new_queue,
                requires=lambda state: state["queue"] is None,
                next_state=lambda state, args, result: {"queue": result, "elements": ()},
            ),
            "push": CommandSpec(
                command=push_command,
                requires=lambda state: state["queue"] is not None,
                args=lambda state: st.tuples(st.just(state["queue"]), st.integers()),
                next_state=lambda state, args, result: {
                    **state,
                    "elements": (*state["elements"], args[1]),
                },
            ),
            "pop": CommandSpec(
                command=pop_command,
                requires=lambda state: state["queue"] is not None,
                args=lambda state: st.tuples(st.just(state["queue"])),
                precondition=lambda state, args: bool(state["elements"]),
                next_state=lambda state, args, result: {
                    **state,
                    "elements": state["elements"][1:],
                },
                postcondition=lambda prev, nxt, args, result: result == prev["elements"][0],
            ),
        },
        initial_state=queue_initial_state,
        postcondition=postcondition,
    )


def queue_scenario() -> tuple[CommandInvocation, ...]:
    """``#<0> = (new)``, ``#<1> = (push #<0> 0)``, ``#<2> = (pop #<0>)``."""
    queue = SymbolicValue(0)
    return (
        CommandInvocation(queue, "new"),
        CommandInvocation(SymbolicValue(1), "push", (queue, 0)),
        CommandInvocation(SymbolicValue(2), "pop", (queue,)),
    )


# =============================================================================
# Key-value store with lifecycle
# =============================================================================


@dataclass
class Store:
    """Key-value store that must be closed after use."""

    data: dict[str, int] = field(default_factory=dict)
    closed: bool = False

    def put(self, key: str, value: int) -> dict[str, Any]:
        self.data[key] = value
        return {"key": key, "value": value}

    def get(self, key: str) -> int | None:
        return self.data.get(key)


@dataclass
class Lifecycle:
    """Records setup and cleanup calls of a store spec."""

    setups: list[Store] = field(default_factory=list)
    cleanups: list[Any] = field(default_factory=list)

    def setup(self) -> Store:
        store = Store()
        self.setups.append(store)
        return store

    def cleanup(self, state: Any) -> None:
        self.cleanups.append(state)
        state["store"].closed = True


def _receipt_keys(state: dict[str, Any]) -> st.SearchStrategy[Any]:
    return st.sampled_from(state["receipts"]).map(lambda receipt: receipt["key"])


def store_spec(lifecycle: Lifecycle, *, get_offset: int = 0) -> SystemSpec:
    """Key-value store: ``put(store, key, value)``, ``get(store, receipt["key"])``.

    ``put`` returns a receipt; ``get`` reads back through a projection of an
    earlier receipt. ``get_offset`` plants a read bug when non-zero.
    """

    def get(store: Store, key: str) -> int | None:
        value = store.get(key)
        return None if value is None else value + get_offset

    def put_next_state(state: dict[str, Any], args: tuple[Any, ...], result: Any) -> Any:
        _, key, value = args
        return {
            **state,
            "keys": {**state["keys"], key: value},
            "receipts": (*state["receipts"], result),
        }

    return SystemSpec(
        commands={
            "put": CommandSpec(
                command=Store.put,
                args=lambda state: st.tuples(
                    st.just(state["store"]),
                    st.sampled_from(["a", "b", "c"]),
                    st.integers(min_value=0, max_value=9),
                ),
                next_state=put_next_state,
            ),
            "get": CommandSpec(
                command=get,
                requires=lambda state: bool(state["receipts"]),
                args=lambda state: st.tuples(st.just(state["store"]), _receipt_keys(state)),
                postcondition=lambda prev, nxt, args, result: result == prev["keys"][args[1]],
            ),
        },
        setup=lifecycle.setup,
        cleanup=lifecycle.cleanup,
        model_initial_state=lambda store: {"store": store, "keys": {}, "receipts": ()},
        real_initial_state=lambda store: {"store": store, "keys": {}, "receipts": ()},
        postcondition=lambda state: not state["store"].closed,
    )
