"""Arithmetic and comparison builtins.

Usage: + a b | - a b | * a b | / a b
       == a b | != a b | < a b | <= a b | > a b | >= a b

Both operands must be integers. Comparisons produce 1 or 0. Division
truncates toward zero.
"""

import operator
from typing import TYPE_CHECKING, Callable

from ..errors import DivisionByZeroError, WrongArgsError
from ..types import Result
from ..values import format_int, parse_int

if TYPE_CHECKING:
    from ..types import InterpreterContext
    from ...types import BuiltinHandler


def _divide(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZeroError()
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _compare(op: Callable[[int, int], bool]) -> Callable[[int, int], int]:
    return lambda a, b: int(op(a, b))


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "==": _compare(operator.eq),
    "!=": _compare(operator.ne),
    "<": _compare(operator.lt),
    "<=": _compare(operator.le),
    ">": _compare(operator.gt),
    ">=": _compare(operator.ge),
}


def make_math_handler(name: str) -> "BuiltinHandler":
    """Build the handler for one binary operator."""
    apply = OPERATORS[name]

    def handle_math(ctx: "InterpreterContext", args: list[str]) -> Result:
        if len(args) != 2:
            raise WrongArgsError(f"{name} a b")
        a, b = (parse_int(arg) for arg in args)
        return Result.ok(format_int(apply(a, b)))

    handle_math.__name__ = f"handle_math_{name}"
    return handle_math
