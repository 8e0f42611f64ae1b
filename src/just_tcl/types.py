"""Public types for just-tcl."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from .interpreter.types import InterpreterContext, Result


class Command(Protocol):
    """Anything that can be invoked by name from a script.

    Built-ins and user procedures are called the same way: with the
    substituted argument values (command name excluded) and the context.
    """

    name: str

    def execute(self, ctx: "InterpreterContext", args: list[str]) -> "Result":
        ...


BuiltinHandler = Callable[["InterpreterContext", list[str]], "Result"]


@dataclass(frozen=True)
class Builtin:
    """A command implemented natively by a Python function."""

    name: str
    handler: BuiltinHandler

    def execute(self, ctx: "InterpreterContext", args: list[str]) -> "Result":
        return self.handler(ctx, args)


@dataclass
class ExecResult:
    """Result of running a script through :class:`just_tcl.Tcl`."""

    stdout: str
    """Captured ``puts`` output (empty when an output sink was supplied)."""

    stderr: str
    """Error report for a script that failed."""

    exit_code: int
    """0 on success, 1 when an error (or stray control signal) escaped."""

    result: str = ""
    """Value of the last command evaluated."""

    env: dict[str, str] = field(default_factory=dict)
    """Global variables after the run."""
