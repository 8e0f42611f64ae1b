"""Word types produced by the tokenizer.

A command is a sequence of words. Each word is built from one or more
adjacent parts (``foo$x[bar]`` is a single word of three parts), and every
part is one of the four substitution variants below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    """Text taken as-is (backslash escapes already resolved)."""

    text: str


@dataclass(frozen=True)
class Variable:
    """``$name`` or ``${name}``; replaced by the variable's value."""

    name: str


@dataclass(frozen=True)
class CommandSubst:
    """``[script]``; replaced by the result of evaluating the script."""

    script: str


@dataclass(frozen=True)
class Braced:
    """``{text}``; passed through verbatim with no substitution."""

    text: str


Word = Union[Literal, Variable, CommandSubst, Braced]


@dataclass(frozen=True)
class WordNode:
    """One argument of a command, made of adjacent word parts."""

    parts: tuple[Word, ...]


@dataclass(frozen=True)
class CommandNode:
    """A single command: its words, in order, before substitution."""

    words: tuple[WordNode, ...]
    line: int = 1
