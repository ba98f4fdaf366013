"""Property orchestration: generate, verify, run, reduce.

Wires the verifier-filtered generator and the command runner into one
Hypothesis property. Hypothesis drives the example loop, shrinking and
seeding; this module decides what a failure is:

- a captured command exception is the authoritative cause and is re-raised
  as-is, so Hypothesis shrinks towards the same exception
- a postcondition violation raises PostconditionViolationError

Specification and internal errors are never treated as test outcomes.

Example:
    >>> checker = StatefulChecker(queue_spec)
    >>> result = checker.check()
    >>> if not result.passed:
    ...     print(format_test_results(queue_spec, result))

    # Or let pytest collect the property directly:
    >>> test_queue = reality_matches_model(queue_spec)

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from hypothesis import HealthCheck, currently_in_test_context, given, note, seed
from hypothesis import settings as hypothesis_settings
from hypothesis.errors import FailedHealthCheck, Unsatisfiable
from hypothesis.strategies import SearchStrategy

from stateprop.diagnostics import (
    ErrorTemplate,
    GenerationExhaustedError,
    InvariantViolationError,
    PostconditionViolationError,
    SpecError,
)
from stateprop.generation import GenerationConfig, minimize, valid_command_sequences
from stateprop.runtime import ExecutionTrace, PostconditionFailed, TraceFormatter, run_commands
from stateprop.spec import CompiledSpec, SystemSpec, compile_spec
from stateprop.symbolic import CommandInvocation

__all__ = [
    "CheckResult",
    "StatefulChecker",
    "evaluate",
    "format_test_results",
    "reality_matches_model",
]

logger = logging.getLogger(__name__)

type CommandSequence = tuple[CommandInvocation, ...]


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of a full Hypothesis run over a specification.

    Attributes:
        passed: True if no failing sequence was found
        failing: First failing sequence Hypothesis found (before shrinking)
        shrunk: Minimal failing sequence after shrinking
        cause: Exception Hypothesis re-raised for the minimal example
    """

    passed: bool
    failing: CommandSequence | None = None
    shrunk: CommandSequence | None = None
    cause: BaseException | None = None


def evaluate(trace: ExecutionTrace) -> bool:
    """Reduce a trace to pass/fail.

    Returns:
        True if the run passed, False on a postcondition violation

    Raises:
        Exception: The exception captured from the real command, if any
    """
    if trace.passed:
        return True
    if trace.exception is not None:
        raise trace.exception
    return False


class StatefulChecker:
    """Model-based property over one specification.

    Args:
        spec: System specification (compiled once)
        config: Generation limits (default: GenerationConfig())
        settings: Hypothesis settings; defaults to the loaded profile with
            ``deadline=None``. ``report_multiple_bugs`` is always disabled
            so a single failure cause is raised.
    """

    __slots__ = ("_config", "_settings", "_spec", "_strategy")

    def __init__(
        self,
        spec: SystemSpec | CompiledSpec,
        *,
        config: GenerationConfig | None = None,
        settings: hypothesis_settings | None = None,
    ) -> None:
        self._spec = compile_spec(spec)
        self._config = config or GenerationConfig()
        self._settings = _checker_settings(settings)
        self._strategy = valid_command_sequences(self._spec, self._config)

    @property
    def spec(self) -> CompiledSpec:
        """The compiled specification."""
        return self._spec

    @property
    def config(self) -> GenerationConfig:
        """Generation limits in effect."""
        return self._config

    @property
    def strategy(self) -> SearchStrategy[CommandSequence]:
        """Strategy of verifier-accepted command sequences."""
        return self._strategy

    def replay(self, invocations: Sequence[CommandInvocation]) -> ExecutionTrace:
        """Run a specific sequence again against the real system.

        Performs real side effects (fresh setup and cleanup) every call.
        """
        return run_commands(self._spec, invocations)

    def assert_sequence(self, invocations: Sequence[CommandInvocation]) -> ExecutionTrace:
        """Run a sequence and raise if reality disagrees with the model.

        Inside a Hypothesis test the failing trace is attached with
        ``note()`` so it is printed for the minimal example.

        Raises:
            PostconditionViolationError: If a postcondition failed
            Exception: The real command's exception, unchanged
        """
        trace = self.replay(invocations)
        if not trace.passed and currently_in_test_context():
            note("Commands:\n" + TraceFormatter().format(trace))
        if not evaluate(trace) and isinstance(trace.outcome, PostconditionFailed):
            raise PostconditionViolationError(trace.outcome.diagnostic, trace)
        return trace

    def property(self) -> Callable[[], None]:
        """Zero-argument Hypothesis test, collectable by pytest."""
        return self._build_test(on_failure=None)

    def check(self, *, random_seed: int | None = None) -> CheckResult:
        """Run Hypothesis over the specification and collect the result.

        Args:
            random_seed: Fixed seed for reproducible generation

        Returns:
            CheckResult; on failure holds the first and the shrunk sequence

        Raises:
            GenerationExhaustedError: If Hypothesis could not draw enough
                valid sequences
            SpecError: If the specification is malformed
            InvariantViolationError: If an engine invariant broke
        """
        failures: list[CommandSequence] = []
        test = self._build_test(on_failure=failures.append)
        if random_seed is not None:
            test = seed(random_seed)(test)

        try:
            test()
        except (Unsatisfiable, FailedHealthCheck) as exc:
            raise GenerationExhaustedError(ErrorTemplate.generation_exhausted(str(exc))) from exc
        except (SpecError, InvariantViolationError):
            raise
        except Exception as exc:  # pylint: disable=broad-exception-caught
            if not failures:
                raise
            logger.info(
                "Falsified: %d-step sequence shrunk to %d steps (%s)",
                len(failures[0]),
                len(failures[-1]),
                type(exc).__name__,
            )
            return CheckResult(False, failures[0], failures[-1], exc)
        return CheckResult(True)

    def minimize(self, invocations: Sequence[CommandInvocation]) -> CommandSequence:
        """Drop steps from a failing sequence while its failure class persists.

        Replays every verifier-accepted candidate against the real system.
        A passing sequence is returned unchanged.
        """
        target = self.replay(invocations).failure_class
        if target is None:
            return tuple(invocations)
        return minimize(
            self._spec,
            invocations,
            lambda candidate: self.replay(candidate).failure_class == target,
        )

    def _build_test(
        self, on_failure: Callable[[CommandSequence], None] | None
    ) -> Callable[[], None]:
        def reality_matches_model(commands: CommandSequence) -> None:
            try:
                self.assert_sequence(commands)
            except Exception:
                if on_failure is not None:
                    on_failure(commands)
                raise

        return self._settings(given(self._strategy)(reality_matches_model))


def _checker_settings(parent: hypothesis_settings | None) -> hypothesis_settings:
    if parent is None:
        return hypothesis_settings(
            deadline=None,
            report_multiple_bugs=False,
            suppress_health_check=[HealthCheck.too_slow],
        )
    return hypothesis_settings(parent, report_multiple_bugs=False)


def reality_matches_model(
    spec: SystemSpec | CompiledSpec,
    *,
    config: GenerationConfig | None = None,
    settings: hypothesis_settings | None = None,
) -> Callable[[], None]:
    """Build a pytest-collectable property checking ``spec``.

    Example:
        >>> test_queue_matches_model = reality_matches_model(queue_spec)
    """
    return StatefulChecker(spec, config=config, settings=settings).property()


def format_test_results(
    spec: SystemSpec | CompiledSpec,
    result: CheckResult,
    formatter: TraceFormatter | None = None,
) -> str:
    """Render the failing and shrunk sequences of ``result``, step by step.

    Both sequences are run again against the live system to recover their
    results; nothing is rendered for a passing result.
    """
    if result.passed or result.failing is None or result.shrunk is None:
        return ""
    formatter = formatter or TraceFormatter()
    return "\n".join(
        [
            "Failing test case:",
            formatter.format(run_commands(spec, result.failing)),
            "Shrunk:",
            formatter.format(run_commands(spec, result.shrunk)),
        ]
    )
