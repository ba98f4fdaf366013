"""Diagnostic system for stateprop errors.

Provides structured error diagnostics with codes, categories and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    EmptySpecError,
    GenerationExhaustedError,
    InvalidSlotError,
    InvariantViolationError,
    MalformedArgsError,
    MalformedGeneratorError,
    MissingCommandError,
    PostconditionViolationError,
    RebindError,
    SpecError,
    StatePropError,
    UnboundSymbolError,
    UnknownCommandError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptySpecError",
    "ErrorCategory",
    "ErrorTemplate",
    "GenerationExhaustedError",
    "InvalidSlotError",
    "InvariantViolationError",
    "MalformedArgsError",
    "MalformedGeneratorError",
    "MissingCommandError",
    "OutputFormat",
    "PostconditionViolationError",
    "RebindError",
    "SpecError",
    "StatePropError",
    "UnboundSymbolError",
    "UnknownCommandError",
]
