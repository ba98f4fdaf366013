"""Shared constants for stateprop.

Centralized configuration constants used across the generation and runtime
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Generation limits: size budget and redraw budget for command sequences
- Depth limits: recursion protection for nested argument walking
- Symbolic roots: reserved handle names

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Generation limits
    "DEFAULT_MAX_SIZE",
    "DEFAULT_MAX_DRAW_RETRIES",
    # Depth limits
    "MAX_DEPTH",
    # Symbolic roots
    "SETUP_ROOT",
    # Report markers
    "FAIL_MARKER",
    "POSTCONDITION_VIOLATION",
]

# ============================================================================
# GENERATION LIMITS
# ============================================================================

# Upper bound for the initial size budget of a generated command sequence.
# Each generated step consumes one unit, so this is also the maximum
# sequence length. Hypothesis caps the number of choices per test case,
# and 50 steps with typical argument strategies stays well inside it.
DEFAULT_MAX_SIZE: int = 50

# Consecutive rejected draws (requires/precondition false) tolerated for a
# single step before the test case is handed back to Hypothesis as rejected.
DEFAULT_MAX_DRAW_RETRIES: int = 100

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth when walking command arguments for symbolic handles.
# Arguments nested deeper than this are almost certainly cyclic or malformed.
MAX_DEPTH: int = 100

# ============================================================================
# SYMBOLIC ROOTS
# ============================================================================

# Root name of the handle standing for the value returned by `setup`.
SETUP_ROOT: str = "setup"

# ============================================================================
# REPORT MARKERS
# ============================================================================

FAIL_MARKER: str = "!! fail"
POSTCONDITION_VIOLATION: str = "postcondition violation"
