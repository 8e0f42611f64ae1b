"""Control Flow Execution.

Handles the conditional and looping commands:
- if/else
- while (consumes break/continue)

Conditions are scripts, not expressions: the condition is evaluated and
its value counts as true when it parses as a nonzero integer. Any other
value, non-numeric text and the empty string included, is false.
"""

from typing import TYPE_CHECKING, Union

from .errors import InvalidNumberError, WrongArgsError
from .types import Result, Signal
from .values import parse_int

if TYPE_CHECKING:
    from .types import InterpreterContext


def evaluate_condition(ctx: "InterpreterContext", script: str) -> Union[Result, bool]:
    """Evaluate a condition script.

    Returns the truth value, or the condition's result when it ended with
    a signal other than NORMAL (which the caller must propagate).
    """
    result = ctx.eval(script)
    if not result.is_normal:
        return result
    try:
        return parse_int(result.value) != 0
    except InvalidNumberError:
        return False


def execute_if(ctx: "InterpreterContext", args: list[str]) -> Result:
    """Execute an if command.

    Usage: if cond body ?else? ?elseBody?
    """
    if len(args) == 4 and args[2] == "else":
        args = [args[0], args[1], args[3]]
    if len(args) not in (2, 3):
        raise WrongArgsError("if cond body ?else? ?elseBody?")

    test = evaluate_condition(ctx, args[0])
    if isinstance(test, Result):
        return test

    if test:
        return ctx.eval(args[1])
    if len(args) == 3:
        return ctx.eval(args[2])
    return Result.ok()


def execute_while(ctx: "InterpreterContext", args: list[str]) -> Result:
    """Execute a while loop.

    Usage: while cond body

    break ends the loop and continue moves on to the next test; both are
    consumed here. return and errors stop the loop and propagate.
    """
    if len(args) != 2:
        raise WrongArgsError("while cond body")
    cond, body = args

    while True:
        test = evaluate_condition(ctx, cond)
        if isinstance(test, Result):
            return test
        if not test:
            return Result.ok()

        result = ctx.eval(body)
        if result.signal is Signal.BREAK:
            return Result.ok()
        if result.signal in (Signal.NORMAL, Signal.CONTINUE):
            continue
        return result
