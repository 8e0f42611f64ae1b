"""Parser - groups lexer tokens into commands.

Commands are produced one at a time so the evaluator can run each command
before the rest of the script is read; a syntax error further down a
script only surfaces once evaluation reaches it.
"""

from __future__ import annotations

from typing import Iterator, Optional

from .lexer import Lexer, ParseException, Token, TokenType
from .types import Braced, CommandNode, CommandSubst, Literal, Variable, Word, WordNode


def _to_part(token: Token) -> Word:
    if token.type == TokenType.LITERAL:
        return Literal(token.value)
    if token.type == TokenType.BRACED:
        return Braced(token.value)
    if token.type == TokenType.VARIABLE:
        return Variable(token.value)
    return CommandSubst(token.value)


def _append_part(parts: list[Word], part: Word) -> None:
    """Append a part, merging runs of literal text."""
    if isinstance(part, Literal) and parts and isinstance(parts[-1], Literal):
        parts[-1] = Literal(parts[-1].text + part.text)
    elif isinstance(part, Literal) and not part.text and parts:
        return
    else:
        parts.append(part)


class Parser:
    """Streaming parser over one script."""

    def __init__(self, text: str):
        self._lexer = Lexer(text)
        self._done = False

    def next_command(self) -> Optional[CommandNode]:
        """Return the next non-empty command, or None at end of script.

        Raises:
            ParseException: on unterminated braces, quotes or brackets.
        """
        if self._done:
            return None

        words: list[WordNode] = []
        parts: list[Word] = []
        in_word = False
        line = 0

        while True:
            token = self._lexer.next_token()

            if token.type in (TokenType.SEP, TokenType.EOL, TokenType.EOF):
                if in_word:
                    words.append(WordNode(tuple(parts)))
                    parts = []
                    in_word = False
                if token.type == TokenType.EOF:
                    self._done = True
                    return CommandNode(tuple(words), line) if words else None
                if token.type == TokenType.EOL and words:
                    return CommandNode(tuple(words), line)
                continue

            if not words and not in_word:
                line = token.line
            _append_part(parts, _to_part(token))
            in_word = True

    def __iter__(self) -> Iterator[CommandNode]:
        while True:
            command = self.next_command()
            if command is None:
                return
            yield command


def parse(text: str) -> list[CommandNode]:
    """Parse a whole script into its commands.

    Raises:
        ParseException: on malformed nesting anywhere in the script.
    """
    return list(Parser(text))


def is_complete(text: str) -> bool:
    """Check whether text ends outside any open brace, quote or bracket.

    Used by the REPL to decide whether to keep reading lines.
    """
    try:
        parse(text)
    except ParseException as e:
        return not e.message.startswith("missing")
    return True


__all__ = ["Parser", "ParseException", "is_complete", "parse"]
