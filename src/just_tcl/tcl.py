"""Main Tcl class - the primary API for just-tcl.

Example usage:
    from just_tcl import Tcl

    tcl = Tcl()
    result = tcl.run("set x 5; puts $x")
    print(result.stdout)  # "5\\n"

    # Raw evaluation, with the control signal visible
    tcl.eval("+ 2 3")  # Result(value="5", signal=Signal.NORMAL)

    # Stream puts output somewhere instead of capturing it
    tcl = Tcl(output=sys.stdout)
"""

from __future__ import annotations

import io
import logging
from typing import Optional, TextIO

from .interpreter import (
    CommandRegistry,
    ControlOutsideContextError,
    Environment,
    Interpreter,
    Result,
    Signal,
    register_builtins,
)
from .types import Command, ExecResult

logger = logging.getLogger(__name__)

_CONTROL_CONTEXTS = {
    Signal.RETURN: "a procedure",
    Signal.BREAK: "a loop",
    Signal.CONTINUE: "a loop",
}


class Tcl:
    """Main Tcl interpreter class.

    Each instance owns its own dispatch table and global frame, so any
    number of independent interpreters can coexist.
    """

    def __init__(
        self,
        *,
        commands: Optional[dict[str, Command]] = None,
        env: Optional[dict[str, str]] = None,
        output: Optional[TextIO] = None,
    ):
        """Initialize the Tcl interpreter.

        Args:
            commands: Extra commands, registered after the built-ins (so
                they may shadow them).
            env: Initial global variables.
            output: Sink for ``puts``. If not provided, output is captured
                and returned in ``ExecResult.stdout`` by :meth:`run`.
        """
        self._commands = dict(commands or {})
        self._initial_env = dict(env or {})
        self._sink = output
        self._interpreter = self._create_interpreter()

    def _create_interpreter(self) -> Interpreter:
        registry = register_builtins(CommandRegistry())
        for name, command in self._commands.items():
            registry.register(name, command)
        return Interpreter(
            registry,
            env=Environment(self._initial_env),
            output=self._sink if self._sink is not None else io.StringIO(),
        )

    @property
    def interpreter(self) -> Interpreter:
        return self._interpreter

    @property
    def output(self) -> TextIO:
        """The sink ``puts`` currently writes to."""
        return self._interpreter.output

    @property
    def env(self) -> dict[str, str]:
        """Get the global variables."""
        return dict(self._interpreter.env.global_frame)

    @property
    def commands(self) -> list[str]:
        """Names of all registered commands."""
        return list(self._interpreter.commands)

    def register(self, name: str, command: Command) -> None:
        """Register (or replace) a command on this interpreter."""
        self._interpreter.commands.register(name, command)

    def eval(self, script: str) -> Result:
        """Evaluate a script at top level and return the raw result."""
        return self._interpreter.eval(script)

    def run(self, script: str) -> ExecResult:
        """Evaluate a script and report its outcome.

        An error, or a return/break/continue that escapes the top level,
        produces exit code 1 and a message on stderr.

        Returns:
            ExecResult with stdout, stderr, exit_code, result and final env.
        """
        capture: Optional[io.StringIO] = None
        previous = self._interpreter.output
        if self._sink is None:
            capture = io.StringIO()
            self._interpreter.output = capture
        try:
            result = self.eval(script)
        finally:
            self._interpreter.output = previous
        stdout = capture.getvalue() if capture is not None else ""

        message = None
        if result.signal is Signal.ERROR:
            message = result.value
        elif not result.is_normal:
            message = ControlOutsideContextError(result.signal.value, _CONTROL_CONTEXTS[result.signal]).message

        if message is not None:
            logger.debug("script failed with %s: %s", result.kind or result.signal, message)
            return ExecResult(
                stdout=stdout,
                stderr=f"error: {message}\n",
                exit_code=1,
                env=self.env,
            )
        return ExecResult(
            stdout=stdout,
            stderr="",
            exit_code=0,
            result=result.value,
            env=self.env,
        )

    def reset(self) -> None:
        """Reset the interpreter to its initial commands and variables."""
        self._interpreter = self._create_interpreter()
