"""Character classification, case conversion and integer/text conversion."""

import itertools

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = " \t\n\v\f\r"


def _code(c):
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _wrap32(value):
    """Reduce an integer to the range of a signed 32-bit int."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def is_alpha(c):
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c):
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c):
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c):
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c):
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _shift_case(c, low, high, delta):
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c):
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    return _shift_case(c, "a", "z", -32)


def to_lower(c):
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    return _shift_case(c, "A", "Z", 32)


def atoi(s):
    """Parse a leading decimal integer, with 32-bit wrap-around on overflow.

    Leading whitespace and one optional sign are skipped; parsing stops at the
    first non-digit. A string with no digits yields 0.
    """
    rest = s.lstrip(_SPACES)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    digits = "".join(itertools.takewhile(lambda ch: "0" <= ch <= "9", rest))
    return _wrap32(int(digits or "0") * sign)


def itoa(n):
    """Format a 32-bit signed integer as decimal text."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)