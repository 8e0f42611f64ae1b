"""Parser module for just-tcl."""

from .lexer import (
    Lexer,
    Token,
    TokenType,
    ParseException,
    is_name_char,
)
from .parser import (
    Parser,
    is_complete,
    parse,
)
from .types import (
    Braced,
    CommandNode,
    CommandSubst,
    Literal,
    Variable,
    Word,
    WordNode,
)

__all__ = [
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "ParseException",
    "is_name_char",
    # Parser
    "Parser",
    "is_complete",
    "parse",
    # Words
    "Braced",
    "CommandNode",
    "CommandSubst",
    "Literal",
    "Variable",
    "Word",
    "WordNode",
]
