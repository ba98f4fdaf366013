"""Symbolic value system.

Opaque result handles, key-path projection and concrete substitution.

Python 3.13+.
"""

from .bindings import Bindings, lookup_key
from .values import SETUP, CommandInvocation, SymbolicValue, iter_symbolic, project

__all__ = [
    "SETUP",
    "Bindings",
    "CommandInvocation",
    "SymbolicValue",
    "iter_symbolic",
    "lookup_key",
    "project",
]
