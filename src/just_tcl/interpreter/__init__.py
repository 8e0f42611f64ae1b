"""Interpreter module for just-tcl."""

from .builtins import BUILTINS, Procedure, register_builtins
from .errors import (
    ArgumentCountMismatchError,
    ControlOutsideContextError,
    DivisionByZeroError,
    ErrorKind,
    IntegerTooLargeError,
    InvalidNumberError,
    TclError,
    UndefinedVariableError,
    UnknownCommandError,
    WrongArgsError,
)
from .interpreter import Interpreter
from .registry import CommandRegistry
from .types import Environment, Frame, InterpreterContext, Result, Signal
from .values import parse_int

__all__ = [
    "BUILTINS",
    "Procedure",
    "register_builtins",
    # Errors
    "ArgumentCountMismatchError",
    "ControlOutsideContextError",
    "DivisionByZeroError",
    "ErrorKind",
    "IntegerTooLargeError",
    "InvalidNumberError",
    "TclError",
    "UndefinedVariableError",
    "UnknownCommandError",
    "WrongArgsError",
    # Engine
    "Interpreter",
    "CommandRegistry",
    "Environment",
    "Frame",
    "InterpreterContext",
    "Result",
    "Signal",
    "parse_int",
]
