"""Interpreter types for just-tcl."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterator, Optional, TextIO

from .errors import ErrorKind, UndefinedVariableError

if TYPE_CHECKING:
    from .registry import CommandRegistry

logger = logging.getLogger(__name__)


class Signal(Enum):
    """Control-flow tag carried by every evaluation result."""

    NORMAL = "normal"
    RETURN = "return"
    BREAK = "break"
    CONTINUE = "continue"
    ERROR = "error"


@dataclass(frozen=True)
class Result:
    """Outcome of one evaluation step: a value plus a control signal.

    For ``ERROR`` results the value holds the error message and ``kind``
    says which category of error occurred.
    """

    value: str = ""
    signal: Signal = Signal.NORMAL
    kind: Optional[ErrorKind] = None

    @property
    def is_normal(self) -> bool:
        return self.signal is Signal.NORMAL

    @classmethod
    def ok(cls, value: str = "") -> Result:
        return cls(value)

    @classmethod
    def error(cls, kind: ErrorKind, message: str) -> Result:
        return cls(message, Signal.ERROR, kind)


class Frame(dict):
    """Variable bindings for one procedure invocation or the top level.

    ``procedure`` names the procedure that owns the frame; it is None for
    the global frame.
    """

    def __init__(self, *args, procedure: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.procedure = procedure


class Environment:
    """Stack of call frames.

    Only the innermost frame is ever searched. At top level that frame is
    the global frame; inside a procedure it is the procedure's own frame,
    so neither caller nor global variables are visible from a body.
    """

    def __init__(self, bindings: Optional[dict[str, str]] = None):
        self._global = Frame(bindings or {})
        self._frames: list[Frame] = [self._global]

    @property
    def current(self) -> Frame:
        return self._frames[-1]

    @property
    def global_frame(self) -> Frame:
        return self._global

    @property
    def depth(self) -> int:
        """Number of active procedure frames above the global frame."""
        return len(self._frames) - 1

    def define(self, name: str, value: str) -> None:
        """Bind (or rebind) a variable in the current frame."""
        self.current[name] = value

    def lookup(self, name: str) -> str:
        """Return the value bound to name in the current frame.

        Raises:
            UndefinedVariableError: if name is not bound.
        """
        try:
            return self.current[name]
        except KeyError:
            raise UndefinedVariableError(name) from None

    def push_frame(self, procedure: Optional[str] = None) -> Frame:
        frame = Frame(procedure=procedure)
        self._frames.append(frame)
        logger.debug("push frame for %s (depth %d)", procedure, self.depth)
        return frame

    def pop_frame(self) -> Frame:
        if len(self._frames) == 1:
            raise RuntimeError("cannot pop the global frame")
        frame = self._frames.pop()
        logger.debug("pop frame for %s (depth %d)", frame.procedure, self.depth)
        return frame

    @contextmanager
    def frame(self, procedure: Optional[str] = None) -> Iterator[Frame]:
        """Push a frame for the duration of a procedure call.

        The frame is popped on every exit path, including exceptions.
        """
        frame = self.push_frame(procedure)
        try:
            yield frame
        finally:
            self.pop_frame()


@dataclass
class InterpreterContext:
    """Context provided to commands."""

    env: Environment
    """Call frames."""

    commands: "CommandRegistry"
    """Command dispatch table."""

    output: TextIO
    """Sink written to by ``puts``."""

    eval: Callable[[str], Result]
    """Function to evaluate a script in the current frame."""
