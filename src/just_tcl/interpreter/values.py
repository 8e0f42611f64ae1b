"""Value helpers.

Every runtime value is a string. Commands that need a number parse it on
demand; there is no other value representation.
"""

import re

from .errors import IntegerTooLargeError, InvalidNumberError

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_int(text: str) -> int:
    """Parse a decimal integer value.

    Surrounding whitespace is allowed; anything else that is not an
    optionally signed run of digits raises InvalidNumberError. Digit runs
    past the interpreter's conversion limit raise IntegerTooLargeError.
    """
    if not _INTEGER_RE.fullmatch(text):
        raise InvalidNumberError(text)
    try:
        return int(text)
    except ValueError:
        raise IntegerTooLargeError() from None


def format_int(value: int) -> str:
    """Format an integer result as a value string."""
    try:
        return str(value)
    except ValueError:
        raise IntegerTooLargeError() from None
