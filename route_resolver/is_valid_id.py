"""Predicate for checking whether a route segment addresses a record id."""

import re

# Whitespace and line terminators trimmed by the JS store before coercion.
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Mirrors the string-to-number coercion of the JS store that produces routes:
# surrounding whitespace is ignored, an empty string is 0, and hex/octal/binary
# literals, exponents and Infinity are all numeric. Only ASCII digits count.
_NUMERIC_RE = re.compile(
    r"""
    (?:
        [+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)
      | 0[xX][0-9a-fA-F]+
      | 0[oO][0-7]+
      | 0[bB][01]+
    )?
    """,
    re.VERBOSE | re.ASCII,
)


def is_numeric(value: str) -> bool:
    """Check if a string coerces to a number rather than NaN."""
    return _NUMERIC_RE.fullmatch(value.strip(JS_WHITESPACE)) is not None


def is_valid_id(value: str | None) -> bool:
    """Check if a segment is a record id: not null and numerically coercible."""
    if value is None or value == "null":
        return False
    return is_numeric(value)
