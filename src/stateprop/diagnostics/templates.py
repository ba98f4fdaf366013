"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    # =========================================================================
    # Specification errors
    # =========================================================================

    @staticmethod
    def unknown_command(name: object) -> Diagnostic:
        """Command name drawn from generate_command is not declared.

        Args:
            name: The drawn command name

        Returns:
            Diagnostic for UNKNOWN_COMMAND
        """
        msg = f"Command {name!r} not found in commands map"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_COMMAND,
            message=msg,
            hint="Check that generate_command only yields declared command names",
            command_name=str(name),
        )

    @staticmethod
    def malformed_args(name: str, received: object) -> Diagnostic:
        """Argument generator of a command is not usable.

        Args:
            name: Command name
            received: The offending strategy or drawn value

        Returns:
            Diagnostic for MALFORMED_ARGS
        """
        msg = (
            f"Argument generator of command '{name}' produced "
            f"{type(received).__name__}, expected a strategy of lists or tuples"
        )
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_ARGS,
            message=msg,
            hint="Return e.g. st.tuples(...) or st.lists(...) from the args slot",
            command_name=name,
        )

    @staticmethod
    def malformed_generator(received: object) -> Diagnostic:
        """generate_command did not return a strategy.

        Args:
            received: The value returned by generate_command

        Returns:
            Diagnostic for MALFORMED_GENERATOR
        """
        msg = f"generate_command returned {type(received).__name__}, expected a strategy"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_GENERATOR,
            message=msg,
            hint="Return e.g. st.sampled_from([...]) of command names",
        )

    @staticmethod
    def missing_command(name: str) -> Diagnostic:
        """Command spec without a callable command slot.

        Args:
            name: Command name

        Returns:
            Diagnostic for MISSING_COMMAND
        """
        msg = f"Command '{name}' has no callable 'command' slot"
        return Diagnostic(
            code=DiagnosticCode.MISSING_COMMAND,
            message=msg,
            hint="Every command must define the real side-effecting call",
            command_name=name,
        )

    @staticmethod
    def empty_spec() -> Diagnostic:
        """System spec declares no commands.

        Returns:
            Diagnostic for EMPTY_SPEC
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_SPEC,
            message="Specification declares no commands",
            hint="Add at least one entry to the commands mapping",
        )

    @staticmethod
    def invalid_slot(owner: str, slot: str, reason: str) -> Diagnostic:
        """Slot is unknown or holds a non-callable value.

        Args:
            owner: "system" or the command name owning the slot
            slot: Slot name
            reason: Short description of the problem

        Returns:
            Diagnostic for INVALID_SLOT
        """
        msg = f"Invalid slot '{slot}' on {owner}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SLOT,
            message=msg,
            hint="Slots must be callables with the documented signature",
        )

    # =========================================================================
    # Generation errors
    # =========================================================================

    @staticmethod
    def generation_exhausted(detail: str) -> Diagnostic:
        """No precondition-valid sequence could be generated.

        Args:
            detail: Message from the generation backend

        Returns:
            Diagnostic for GENERATION_EXHAUSTED
        """
        msg = f"Unable to generate valid command sequences: {detail}"
        return Diagnostic(
            code=DiagnosticCode.GENERATION_EXHAUSTED,
            message=msg,
            hint=(
                "A requires/precondition slot rejects nearly every draw; "
                "narrow generate_command or args to eligible choices"
            ),
        )

    # =========================================================================
    # Verification failures
    # =========================================================================

    @staticmethod
    def postcondition_violated(name: str, step_index: int, check: str) -> Diagnostic:
        """Postcondition returned false after executing a step.

        Args:
            name: Command name
            step_index: Position of the step in the sequence
            check: Which check failed ("spec" or "command")

        Returns:
            Diagnostic for POSTCONDITION_VIOLATED
        """
        msg = f"{check} postcondition violated after step {step_index} ({name})"
        return Diagnostic(
            code=DiagnosticCode.POSTCONDITION_VIOLATED,
            message=msg,
            command_name=name,
            step_index=step_index,
        )

    @staticmethod
    def initial_postcondition_violated() -> Diagnostic:
        """Spec postcondition returned false for the initial real state.

        Returns:
            Diagnostic for INITIAL_POSTCONDITION_VIOLATED
        """
        return Diagnostic(
            code=DiagnosticCode.INITIAL_POSTCONDITION_VIOLATED,
            message="spec postcondition violated by the initial state",
            hint="Check setup and real_initial_state",
        )

    # =========================================================================
    # Internal invariant violations
    # =========================================================================

    @staticmethod
    def unbound_symbol(handle: object) -> Diagnostic:
        """Symbolic handle resolved before its step produced a result.

        Args:
            handle: The unresolved handle

        Returns:
            Diagnostic for UNBOUND_SYMBOL
        """
        msg = f"Symbolic value {handle} is not bound"
        return Diagnostic(
            code=DiagnosticCode.UNBOUND_SYMBOL,
            message=msg,
            hint="Arguments may only reference results of strictly earlier steps",
        )

    @staticmethod
    def symbol_rebound(handle: object) -> Diagnostic:
        """Symbolic root bound twice.

        Args:
            handle: The handle being rebound

        Returns:
            Diagnostic for SYMBOL_REBOUND
        """
        msg = f"Symbolic value {handle} is already bound"
        return Diagnostic(
            code=DiagnosticCode.SYMBOL_REBOUND,
            message=msg,
            hint="Handle indices are assigned once and never reused",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Nested argument structure exceeds the walking depth limit.

        Args:
            max_depth: The configured limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum argument nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Check command arguments for cyclic containers",
        )
