"""stateprop - model-based stateful property testing on Hypothesis.

Describe the operations of a real system and an abstract model of their
behaviour; stateprop generates precondition-valid command sequences against
the model, runs them against the real system and checks that reality
matches the model's predictions. Hypothesis provides generation, shrinking
and seeding.

Public API:
    SystemSpec - Whole-system specification (commands, lifecycle, initial state)
    CommandSpec - Dual (model/real) semantics of one operation
    StatefulChecker - Generate, run, shrink and report over one SystemSpec
    reality_matches_model - Build a pytest-collectable property from a SystemSpec
    run_commands - Execute one command sequence against the real system
    format_test_results - Render failing and shrunk sequences step by step
    GenerationConfig - Size and redraw limits for sequence generation
    SymbolicValue - Placeholder for the result of an earlier step

Exceptions:
    StatePropError - Base exception class
    SpecError - Malformed specification (fatal)
    GenerationExhaustedError - No valid sequence could be generated
    PostconditionViolationError - Reality disagreed with the model

Submodules:
    stateprop.spec - Specification model and command registry
    stateprop.symbolic - Symbolic values and binding tables
    stateprop.generation - Sequence generator, verifier, shrinking
    stateprop.runtime - Command runner, traces, trace rendering
    stateprop.diagnostics - Error types and diagnostic formatting
"""

from .diagnostics import (
    GenerationExhaustedError,
    PostconditionViolationError,
    SpecError,
    StatePropError,
)
from .generation import GenerationConfig
from .orchestrator import (
    CheckResult,
    StatefulChecker,
    format_test_results,
    reality_matches_model,
)
from .runtime import ExecutionTrace, run_commands
from .spec import CommandSpec, SystemSpec
from .symbolic import CommandInvocation, SymbolicValue

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("stateprop")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CheckResult",
    "CommandInvocation",
    "CommandSpec",
    "ExecutionTrace",
    "GenerationConfig",
    "GenerationExhaustedError",
    "PostconditionViolationError",
    "SpecError",
    "StatePropError",
    "StatefulChecker",
    "SymbolicValue",
    "SystemSpec",
    "__version__",
    "format_test_results",
    "reality_matches_model",
    "run_commands",
]
