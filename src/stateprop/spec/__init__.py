"""Specification model: command and system specs, fallback resolution.

Python 3.13+.
"""

from .model import CommandSpec, CompiledSpec, SystemSpec, compile_spec
from .registry import CommandRegistry, ResolvedCommand

__all__ = [
    "CommandRegistry",
    "CommandSpec",
    "CompiledSpec",
    "ResolvedCommand",
    "SystemSpec",
    "compile_spec",
]
