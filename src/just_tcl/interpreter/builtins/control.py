"""Control signal builtins: return, break, continue.

These builtins do nothing but raise a signal. The signal travels up
through the enclosing scripts until the construct that consumes it:
a procedure call for return, the innermost while loop for break and
continue.
"""

from typing import TYPE_CHECKING

from ..errors import WrongArgsError
from ..types import Result, Signal

if TYPE_CHECKING:
    from ..types import InterpreterContext


def handle_return(ctx: "InterpreterContext", args: list[str]) -> Result:
    """Execute the return builtin.

    Usage: return ?value?

    Leave the current procedure with value (or the empty string).
    """
    if len(args) > 1:
        raise WrongArgsError("return ?value?")
    return Result(args[0] if args else "", Signal.RETURN)


def handle_break(ctx: "InterpreterContext", args: list[str]) -> Result:
    """Execute the break builtin.

    Usage: break

    Exit from the innermost enclosing while loop.
    """
    if args:
        raise WrongArgsError("break")
    return Result("", Signal.BREAK)


def handle_continue(ctx: "InterpreterContext", args: list[str]) -> Result:
    """Execute the continue builtin.

    Usage: continue

    Skip to the next iteration of the innermost enclosing while loop.
    """
    if args:
        raise WrongArgsError("continue")
    return Result("", Signal.CONTINUE)
