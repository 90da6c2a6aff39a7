import re

EXIT_SENTINEL = "exit"

# whitespace and line terminators trimmed from both ends of a field
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY = re.compile(r"[+-]?Infinity")
_PREFIXED_INT = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def is_exit(text: str) -> bool:
    # compared on the raw line, so " exit" is a name
    return text.lower() == EXIT_SENTINEL


def is_blank(text: str) -> bool:
    return trim(text) == ""


def is_numeric(text: str) -> bool:
    """
    Loose numeric-string check used for the age field.

    Surrounding whitespace is ignored. Accepts signed integers and decimals
    with an optional exponent, a signed ``Infinity``, and unsigned hex, octal
    and binary integer literals, all written with ASCII digits. Blank strings
    are not numeric.
    """
    stripped = trim(text)
    if not stripped:
        return False
    return any(
        pattern.fullmatch(stripped) for pattern in (_DECIMAL, _INFINITY, _PREFIXED_INT)
    )


def valid_name(text: str) -> bool:
    return not is_blank(text)


def valid_age(text: str) -> bool:
    return not is_blank(text) and is_numeric(text)


def valid_city(text: str) -> bool:
    return not is_blank(text)
