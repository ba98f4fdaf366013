"""Generation phase: command sequence generation, verification, shrinking.

Everything in this package is pure with respect to the system under test.

Python 3.13+.
"""

from .config import GenerationConfig
from .generator import command_sequences, valid_command_sequences
from .shrinking import ShrinkNode, minimize, removal_candidates, shrink_tree
from .verifier import first_invalid_step, is_valid_sequence

__all__ = [
    "GenerationConfig",
    "ShrinkNode",
    "command_sequences",
    "first_invalid_step",
    "is_valid_sequence",
    "minimize",
    "removal_candidates",
    "shrink_tree",
    "valid_command_sequences",
]
