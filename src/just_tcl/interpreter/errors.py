"""Interpreter errors.

These exceptions never cross a command boundary: the evaluator catches
them where the failing command runs and turns them into an ``ERROR``
result, which then travels upward as data like any other signal.
"""

from enum import Enum


class ErrorKind(Enum):
    """Categories of evaluation errors."""

    SYNTAX = "Syntax"
    UNDEFINED_VARIABLE = "UndefinedVariable"
    UNKNOWN_COMMAND = "UnknownCommand"
    INVALID_NUMBER = "InvalidNumber"
    DIVISION_BY_ZERO = "DivisionByZero"
    ARGUMENT_COUNT_MISMATCH = "ArgumentCountMismatch"
    WRONG_NUMBER_OF_ARGUMENTS = "WrongNumberOfArguments"
    CONTROL_OUTSIDE_CONTEXT = "ControlOutsideContext"


class TclError(Exception):
    """Base class for evaluation errors."""

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UndefinedVariableError(TclError):
    """Raised when reading a variable that is not bound in the current frame."""

    kind = ErrorKind.UNDEFINED_VARIABLE

    def __init__(self, name: str):
        super().__init__(f'can\'t read "{name}": no such variable')
        self.name = name


class UnknownCommandError(TclError):
    """Raised when a command name has no entry in the dispatch table."""

    kind = ErrorKind.UNKNOWN_COMMAND

    def __init__(self, name: str):
        super().__init__(f'invalid command name "{name}"')
        self.name = name


class InvalidNumberError(TclError):
    """Raised when a value does not parse as an integer."""

    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, text: str):
        super().__init__(f'expected integer but got "{text}"')
        self.text = text


class IntegerTooLargeError(TclError):
    """Raised when an integer has too many digits to convert to or from text."""

    kind = ErrorKind.INVALID_NUMBER

    def __init__(self):
        super().__init__("integer value too large to represent")


class DivisionByZeroError(TclError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self):
        super().__init__("divide by zero")


class ArgumentCountMismatchError(TclError):
    """Raised when a procedure is called with the wrong number of arguments."""

    kind = ErrorKind.ARGUMENT_COUNT_MISMATCH

    def __init__(self, name: str, params: list[str]):
        usage = " ".join([name, *params])
        super().__init__(f'wrong # args: should be "{usage}"')
        self.name = name


class WrongArgsError(TclError):
    """Raised when a built-in is called with the wrong number of arguments."""

    kind = ErrorKind.WRONG_NUMBER_OF_ARGUMENTS

    def __init__(self, usage: str):
        super().__init__(f'wrong # args: should be "{usage}"')
        self.usage = usage


class ControlOutsideContextError(TclError):
    """Raised when break/continue/return escape the construct that consumes them."""

    kind = ErrorKind.CONTROL_OUTSIDE_CONTEXT

    def __init__(self, command: str, context: str):
        super().__init__(f'invoked "{command}" outside of {context}')
        self.command = command
