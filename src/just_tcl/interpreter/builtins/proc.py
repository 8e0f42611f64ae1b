"""Procedure builtin implementation.

Usage: proc name params body

Define a procedure. params is a whitespace-separated list of parameter
names; body is a script. Defining a name that already exists replaces the
previous command.

Calling a procedure pushes a fresh frame holding only its parameters, runs
the body in it, and pops the frame again however the body finished. A
return inside the body ends the call with the returned value; errors pass
through untouched. break and continue cannot cross the call boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import ArgumentCountMismatchError, ControlOutsideContextError, WrongArgsError
from ..types import Result, Signal

if TYPE_CHECKING:
    from ..types import InterpreterContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Procedure:
    """A user-defined command."""

    name: str
    params: tuple[str, ...]
    body: str

    def execute(self, ctx: "InterpreterContext", args: list[str]) -> Result:
        if len(args) != len(self.params):
            raise ArgumentCountMismatchError(self.name, list(self.params))

        with ctx.env.frame(self.name):
            for param, value in zip(self.params, args):
                ctx.env.define(param, value)
            result = ctx.eval(self.body)

        if result.signal is Signal.RETURN:
            return Result.ok(result.value)
        if result.signal in (Signal.BREAK, Signal.CONTINUE):
            raise ControlOutsideContextError(result.signal.value, "a loop")
        return result


def handle_proc(ctx: "InterpreterContext", args: list[str]) -> Result:
    """Execute the proc builtin."""
    if len(args) != 3:
        raise WrongArgsError("proc name args body")
    name, params, body = args
    procedure = Procedure(name, tuple(params.split()), body)
    ctx.commands.register(name, procedure)
    logger.debug("defined procedure %s(%s)", name, ", ".join(procedure.params))
    return Result.ok()
