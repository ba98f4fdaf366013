"""Generation configuration.

Provides a single frozen dataclass holding every knob of command-sequence
generation. Hypothesis settings (examples, seeds, phases) are separate and
belong to the caller; this object only bounds what one generated test case
may look like.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from stateprop.constants import DEFAULT_MAX_DRAW_RETRIES, DEFAULT_MAX_SIZE

__all__ = ["GenerationConfig"]


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Immutable configuration for command-sequence generation.

    Attributes:
        max_size: Upper bound for the initial size budget (default: 50).
            The budget shrinks by one per generated step, so this is also
            the maximum sequence length. Zero generates only empty sequences.
        max_draw_retries: Consecutive draws a single step may reject
            (requires or precondition false) before the whole test case is
            rejected back to Hypothesis (default: 100).

    Example:
        >>> config = GenerationConfig(max_size=10)
        >>> checker = StatefulChecker(spec, config=config)
    """

    max_size: int = DEFAULT_MAX_SIZE
    max_draw_retries: int = DEFAULT_MAX_DRAW_RETRIES

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_size is negative or max_draw_retries is not positive.
        """
        if self.max_size < 0:
            msg = "max_size must be non-negative"
            raise ValueError(msg)
        if self.max_draw_retries <= 0:
            msg = "max_draw_retries must be positive"
            raise ValueError(msg)
