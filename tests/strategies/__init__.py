"""Hypothesis strategies for stateprop property-based testing.

Reusable strategies for generating test data across test modules.

Usage:
    from tests.strategies import nested_arguments, symbolic_values

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - nested_arguments
"""

from .symbolic import nested_arguments, projection_keys, symbolic_values

__all__ = [
    "nested_arguments",
    "projection_keys",
    "symbolic_values",
]
