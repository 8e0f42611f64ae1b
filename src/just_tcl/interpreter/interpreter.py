"""Interpreter - the evaluation engine.

Evaluates a script command by command:

1. The parser yields the next command as a list of words.
2. Each word is substituted into a string value (variables are looked up,
   ``[...]`` scripts are evaluated recursively, braced text is kept as-is).
3. The first value names the command, which is resolved in the dispatch
   table and invoked with the remaining values.
4. Any result whose signal is not NORMAL stops the script and is returned
   as-is; otherwise the last command's value is the script's value.

Nested scripts (loop bodies, procedure bodies, command substitutions) are
evaluated by recursive calls, so script nesting depth maps directly onto the
Python call stack. Deep enough recursion ends in RecursionError, which is
deliberately left uncaught.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from ..parser import Braced, CommandNode, CommandSubst, Literal, ParseException, Parser, Variable, WordNode
from .errors import ErrorKind, TclError
from .registry import CommandRegistry
from .types import Environment, InterpreterContext, Result


class Interpreter:
    """String-substitution evaluator for Tcl-style scripts."""

    def __init__(
        self,
        commands: CommandRegistry,
        env: Optional[Environment] = None,
        output: Optional[TextIO] = None,
    ):
        """Initialize the interpreter.

        Args:
            commands: Command dispatch table
            env: Call frames (creates an empty global frame if not provided)
            output: Sink for ``puts`` (defaults to sys.stdout)
        """
        self._commands = commands
        self._env = env or Environment()
        self._ctx = InterpreterContext(
            env=self._env,
            commands=commands,
            output=output or sys.stdout,
            eval=self.eval,
        )

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def commands(self) -> CommandRegistry:
        return self._commands

    @property
    def context(self) -> InterpreterContext:
        return self._ctx

    @property
    def output(self) -> TextIO:
        return self._ctx.output

    @output.setter
    def output(self, sink: TextIO) -> None:
        self._ctx.output = sink

    def eval(self, script: str) -> Result:
        """Evaluate a script in the current frame."""
        parser = Parser(script)
        result = Result.ok()
        while True:
            try:
                command = parser.next_command()
            except ParseException as e:
                return Result.error(ErrorKind.SYNTAX, e.message)
            if command is None:
                return result
            result = self.execute_command(command)
            if not result.is_normal:
                return result

    def execute_command(self, node: CommandNode) -> Result:
        """Substitute a command's words and invoke it."""
        args: list[str] = []
        for word in node.words:
            substituted = self.substitute_word(word)
            if not substituted.is_normal:
                return substituted
            args.append(substituted.value)
        return self.invoke(args)

    def invoke(self, args: list[str]) -> Result:
        """Resolve args[0] as a command and run it with the remaining values."""
        name, *rest = args
        try:
            command = self._commands.resolve(name)
            return command.execute(self._ctx, rest)
        except TclError as e:
            return Result.error(e.kind, e.message)

    def substitute_word(self, word: WordNode) -> Result:
        """Turn a word into its string value.

        A failed variable lookup becomes an ERROR result. A command
        substitution that ends with any non-NORMAL signal aborts the word
        and that result is returned unchanged.
        """
        pieces: list[str] = []
        for part in word.parts:
            if isinstance(part, (Literal, Braced)):
                pieces.append(part.text)
            elif isinstance(part, Variable):
                try:
                    pieces.append(self._env.lookup(part.name))
                except TclError as e:
                    return Result.error(e.kind, e.message)
            elif isinstance(part, CommandSubst):
                nested = self.eval(part.script)
                if not nested.is_normal:
                    return nested
                pieces.append(nested.value)
        return Result.ok("".join(pieces))
