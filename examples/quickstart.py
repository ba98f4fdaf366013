"""Quickstart example for stateprop.

This example checks a small FIFO queue against a model of its contents,
first with a correct implementation, then with a planted bug, and prints
the failing and shrunk command sequences.

Run this example:
    python examples/quickstart.py

Note: Examples use small Hypothesis budgets for fast terminal output.
"""

from hypothesis import settings
from hypothesis import strategies as st

from stateprop import (
    CommandInvocation,
    CommandSpec,
    StatefulChecker,
    SymbolicValue,
    SystemSpec,
    format_test_results,
    run_commands,
)
from stateprop.runtime import TraceFormatter


class Queue:
    def __init__(self):
        self.items = []

    def __repr__(self):
        return f"Queue({self.items!r})"


def new_queue():
    return Queue()


def push(queue, value):
    queue.items.append(value)


def pop(queue):
    return queue.items.pop(0)


def buggy_pop(queue):
    # Returns the most recently pushed element instead of the oldest.
    return queue.items.pop()


def queue_spec(pop_command):
    return SystemSpec(
        commands={
            "new": CommandSpec(
                command=new_queue,
                requires=lambda state: state["queue"] is None,
                next_state=lambda state, args, result: {"queue": result, "elements": ()},
            ),
            "push": CommandSpec(
                command=push,
                requires=lambda state: state["queue"] is not None,
                args=lambda state: st.tuples(st.just(state["queue"]), st.integers(0, 9)),
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
        initial_state=lambda: {"queue": None, "elements": ()},
    )


FAST = settings(max_examples=100, database=None)

# Example 1: Running a hand-written sequence
print("=" * 50)
print("Example 1: Hand-Written Sequence")
print("=" * 50)

q = SymbolicValue(0)
steps = (
    CommandInvocation(q, "new"),
    CommandInvocation(SymbolicValue(1), "push", (q, 1)),
    CommandInvocation(SymbolicValue(2), "pop", (q,)),
)
trace = run_commands(queue_spec(pop), steps)
print(TraceFormatter().format(trace))
print(f"passed: {trace.passed}")

# Example 2: Checking a correct implementation
print("\n" + "=" * 50)
print("Example 2: Correct Queue")
print("=" * 50)

result = StatefulChecker(queue_spec(pop), settings=FAST).check(random_seed=0)
print(f"passed: {result.passed}")

# Example 3: Finding and shrinking a bug
print("\n" + "=" * 50)
print("Example 3: Buggy Queue")
print("=" * 50)

spec = queue_spec(buggy_pop)
result = StatefulChecker(spec, settings=FAST).check(random_seed=0)
print(f"passed: {result.passed}")
print(format_test_results(spec, result))

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
