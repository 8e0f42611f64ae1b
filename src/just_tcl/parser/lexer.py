"""Lexer - cursor-based tokenizer for Tcl-style command text.

The lexer walks a script one token at a time. Word-forming tokens
(literal text, braced text, variables, command substitutions) that are not
separated by whitespace belong to the same word; the parser glues them
together. A newline or ``;`` outside braces, brackets and quotes ends a
command.

Rules:
- ``{...}`` at the start of a word is taken verbatim, nesting tracked by depth
- ``"..."`` at the start of a word allows ``$`` and ``[]`` substitution inside
- ``$name`` / ``${name}`` is a variable reference
- ``[...]`` is a nested script, nesting tracked by depth
- ``\\x`` escapes a single character (``\\n``, ``\\t`` and ``\\r`` translate)
- ``#`` at the start of a command comments out the rest of the line
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of tokens produced by the lexer."""

    SEP = "sep"
    EOL = "eol"
    EOF = "eof"
    LITERAL = "literal"
    BRACED = "braced"
    VARIABLE = "variable"
    COMMAND = "command"


WORD_TOKENS = frozenset({
    TokenType.LITERAL,
    TokenType.BRACED,
    TokenType.VARIABLE,
    TokenType.COMMAND,
})

WHITESPACE = " \t\r"
COMMAND_TERMINATORS = "\n;"

ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


class ParseException(Exception):
    """Raised for malformed brace, quote or bracket nesting."""

    def __init__(self, message: str, line: int = 1, column: int = 1):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column


@dataclass(frozen=True)
class Token:
    """A lexical token."""

    type: TokenType
    value: str
    start: int
    end: int
    line: int


def is_name_char(c: str) -> bool:
    """Check if a character may appear in a bare ``$name`` reference."""
    return c.isalnum() or c == "_"


class Lexer:
    """Tokenizer over a single script string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self._prev = TokenType.EOL
        self._at_command_start = True
        self._in_quotes = False
        self._line = 1
        self._line_pos = 0

    def tokenize(self) -> list[Token]:
        """Tokenize the whole input (up to and including EOF)."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                return tokens

    def next_token(self) -> Token:
        """Produce the next token and advance the cursor."""
        token = self._scan()
        self._prev = token.type
        if token.type in WORD_TOKENS:
            self._at_command_start = False
        elif token.type != TokenType.SEP:
            self._at_command_start = True
        return token

    def _scan(self) -> Token:
        text = self.text
        while True:
            if self.pos >= len(text):
                if self._in_quotes:
                    raise self._error('missing "', self.pos)
                if self._prev in (TokenType.EOL, TokenType.EOF):
                    return self._token(TokenType.EOF, "", self.pos)
                return self._token(TokenType.EOL, "", self.pos)

            if self._in_quotes:
                return self._scan_quoted()

            c = text[self.pos]
            if c in WHITESPACE or self._at_line_continuation():
                return self._scan_separator()
            if c in COMMAND_TERMINATORS:
                return self._scan_end_of_line()
            if c == "#" and self._at_command_start:
                self._skip_comment()
                continue

            at_word_start = self._prev in (TokenType.SEP, TokenType.EOL)
            if at_word_start and c == "{":
                return self._scan_braced()
            if at_word_start and c == '"':
                self._in_quotes = True
                self.pos += 1
                return self._scan_quoted()
            if c == "[":
                return self._scan_command()
            if c == "$":
                return self._scan_variable()
            return self._scan_bare()

    # -- helpers ---------------------------------------------------------

    def _line_at(self, pos: int) -> int:
        if pos < self._line_pos:
            self._line, self._line_pos = 1, 0
        self._line += self.text.count("\n", self._line_pos, pos)
        self._line_pos = pos
        return self._line

    def _token(self, type_: TokenType, value: str, start: int) -> Token:
        return Token(type=type_, value=value, start=start, end=self.pos, line=self._line_at(start))

    def _error(self, message: str, pos: int) -> ParseException:
        line = self._line_at(pos)
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return ParseException(message, line, column)

    def _at_line_continuation(self) -> bool:
        return self.text.startswith("\\\n", self.pos)

    def _read_escape(self) -> str:
        """Consume a backslash sequence and return the character it denotes."""
        self.pos += 1
        if self.pos >= len(self.text):
            return "\\"
        c = self.text[self.pos]
        self.pos += 1
        return ESCAPES.get(c, c)

    def _check_word_end(self, what: str) -> None:
        """A braced or quoted word must be followed by a word boundary."""
        if self.pos < len(self.text):
            c = self.text[self.pos]
            if c not in WHITESPACE and c not in COMMAND_TERMINATORS and not self._at_line_continuation():
                raise self._error(f"extra characters after close-{what}", self.pos)

    # -- scanners --------------------------------------------------------

    def _scan_separator(self) -> Token:
        start = self.pos
        text = self.text
        while self.pos < len(text):
            if text[self.pos] in WHITESPACE:
                self.pos += 1
            elif self._at_line_continuation():
                self.pos += 2
            else:
                break
        return self._token(TokenType.SEP, text[start:self.pos], start)

    def _scan_end_of_line(self) -> Token:
        start = self.pos
        text = self.text
        while self.pos < len(text) and (text[self.pos] in WHITESPACE or text[self.pos] in COMMAND_TERMINATORS):
            self.pos += 1
        return self._token(TokenType.EOL, text[start:self.pos], start)

    def _skip_comment(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos] != "\n":
            if self._at_line_continuation():
                self.pos += 1
            self.pos += 1

    def _scan_braced(self) -> Token:
        start = self.pos
        text = self.text
        depth = 1
        self.pos += 1
        while self.pos < len(text):
            c = text[self.pos]
            if c == "\\":
                self.pos += 2
                continue
            if c == "{":
                depth += 1
            elif c == "}":
                depth -= 1
                if depth == 0:
                    value = text[start + 1:self.pos]
                    self.pos += 1
                    self._check_word_end("brace")
                    return self._token(TokenType.BRACED, value, start)
            self.pos += 1
        raise self._error("missing close-brace", start)

    def _scan_command(self) -> Token:
        start = self.pos
        text = self.text
        depth = 1
        brace_depth = 0
        self.pos += 1
        while self.pos < len(text):
            c = text[self.pos]
            if c == "\\":
                self.pos += 2
                continue
            if c == "{":
                brace_depth += 1
            elif c == "}" and brace_depth > 0:
                brace_depth -= 1
            elif brace_depth == 0:
                if c == "[":
                    depth += 1
                elif c == "]":
                    depth -= 1
                    if depth == 0:
                        value = text[start + 1:self.pos]
                        self.pos += 1
                        return self._token(TokenType.COMMAND, value, start)
            self.pos += 1
        raise self._error("missing close-bracket", start)

    def _scan_variable(self) -> Token:
        start = self.pos
        text = self.text
        self.pos += 1
        if self.pos < len(text) and text[self.pos] == "{":
            close = text.find("}", self.pos)
            if close < 0:
                raise self._error("missing close-brace for variable name", start)
            name = text[self.pos + 1:close]
            self.pos = close + 1
            return self._token(TokenType.VARIABLE, name, start)

        name_start = self.pos
        while self.pos < len(text) and is_name_char(text[self.pos]):
            self.pos += 1
        if self.pos == name_start:
            # A lone "$" is ordinary text
            return self._token(TokenType.LITERAL, "$", start)
        return self._token(TokenType.VARIABLE, text[name_start:self.pos], start)

    def _scan_bare(self) -> Token:
        start = self.pos
        text = self.text
        chars: list[str] = []
        while self.pos < len(text):
            c = text[self.pos]
            if c in WHITESPACE or c in COMMAND_TERMINATORS or c in "$[":
                break
            if c == "\\":
                if self._at_line_continuation():
                    break
                chars.append(self._read_escape())
                continue
            chars.append(c)
            self.pos += 1
        return self._token(TokenType.LITERAL, "".join(chars), start)

    def _scan_quoted(self) -> Token:
        """Scan inside a double-quoted word, stopping at substitutions."""
        start = self.pos
        text = self.text
        chars: list[str] = []
        while self.pos < len(text):
            c = text[self.pos]
            if c == '"':
                self.pos += 1
                self._in_quotes = False
                self._check_word_end("quote")
                return self._token(TokenType.LITERAL, "".join(chars), start)
            if c in "$[":
                if chars:
                    return self._token(TokenType.LITERAL, "".join(chars), start)
                if c == "$":
                    return self._scan_variable()
                return self._scan_command()
            if c == "\\":
                chars.append(self._read_escape())
                continue
            chars.append(c)
            self.pos += 1
        raise self._error('missing "', start)
