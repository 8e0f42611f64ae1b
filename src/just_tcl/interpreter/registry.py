"""Command dispatch table.

Maps command names to commands. Registration always succeeds and the
last registration wins, which is how ``proc`` redefines a procedure and
how a host can shadow a built-in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from .errors import UnknownCommandError

if TYPE_CHECKING:
    from ..types import Command

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Name to command mapping owned by one interpreter."""

    def __init__(self, commands: "dict[str, Command] | None" = None):
        self._commands: dict[str, Command] = {}
        if commands:
            for name, command in commands.items():
                self.register(name, command)

    def register(self, name: str, command: "Command") -> None:
        """Insert or replace the command registered under name."""
        if name in self._commands:
            logger.debug("replacing command %r", name)
        self._commands[name] = command

    def resolve(self, name: str) -> "Command":
        """Return the command registered under name.

        Raises:
            UnknownCommandError: if nothing is registered under name.
        """
        try:
            return self._commands[name]
        except KeyError:
            raise UnknownCommandError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._commands))

    def __len__(self) -> int:
        return len(self._commands)
