"""Variable and output builtins: set, puts.

Usage: set varName value
       puts string
"""

from typing import TYPE_CHECKING

from ..errors import WrongArgsError
from ..types import Result

if TYPE_CHECKING:
    from ..types import InterpreterContext


def handle_set(ctx: "InterpreterContext", args: list[str]) -> Result:
    """Bind a variable in the current frame and return the new value."""
    if len(args) != 2:
        raise WrongArgsError("set varName value")
    name, value = args
    ctx.env.define(name, value)
    return Result.ok(value)


def handle_puts(ctx: "InterpreterContext", args: list[str]) -> Result:
    """Write a line to the output sink."""
    if len(args) != 1:
        raise WrongArgsError("puts string")
    ctx.output.write(args[0] + "\n")
    return Result.ok()
