"""String helpers: splitting, searching, comparing, trimming and bounded copies.

Functions that take text work on ``str``. The bounded-copy functions
(``strlcpy`` and ``strlcat``) work on NUL-terminated byte buffers, so they
take a ``bytearray`` destination and a bytes-like source.
"""

from itertools import islice, zip_longest


def _check_non_negative(**values):
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def _c_length(buf):
    """Length of a byte buffer up to its first NUL, or the whole buffer."""
    index = bytes(buf).find(b"\0")
    return len(buf) if index < 0 else index


def split(s, delim):
    """Split s on the delimiter character, dropping empty words."""
    return [word for word in s.split(delim) if word]


def strchr(s, c):
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s, c):
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strdup(s):
    """Return a copy of s."""
    return s[:]


def striteri(s, f):
    """Call f(index, char) for every element of the mutable sequence s.

    A value returned by f, other than None, replaces that element in place.
    """
    for index, char in enumerate(list(s)):
        replacement = f(index, char)
        if replacement is not None:
            s[index] = replacement


def strmapi(s, f):
    """Build a new string from f(index, char) for every character of s."""
    return "".join(f(index, char) for index, char in enumerate(s))


def strjoin(a, b):
    """Concatenate two strings."""
    return a + b


def strlcpy(dst, src, size):
    """Copy src into the buffer dst, writing at most size bytes with the NUL.

    Returns the length of src, so a result of size or more means the copy
    was truncated. A size of 0 leaves dst untouched.
    """
    _check_non_negative(size=size)
    source = bytes(src)[: _c_length(src)]
    if size == 0:
        return len(source)
    copied = source[: size - 1]
    if len(dst) < len(copied) + 1:
        raise ValueError(
            f"destination of {len(dst)} bytes cannot hold {len(copied) + 1} bytes"
        )
    dst[: len(copied) + 1] = copied + b"\0"
    return len(source)


def strlcat(dst, src, size):
    """Append src to the NUL-terminated string in dst, bounded by size.

    Returns the length of the string it tried to build. When the string
    already in dst fills size or more, nothing is written and the result is
    the length of src plus size.
    """
    _check_non_negative(size=size)
    src_len = _c_length(src)
    if dst is None and size == 0:
        return src_len
    dst_len = _c_length(dst)
    if dst_len >= size:
        return src_len + size
    view = memoryview(dst)[dst_len:]
    strlcpy(view, src, size - dst_len)
    return dst_len + src_len


def strlen(s):
    """Length of s; for a byte buffer, the length up to its first NUL."""
    if isinstance(s, str):
        return len(s)
    return _c_length(s)


def strncmp(a, b, n):
    """Compare at most n characters of a and b.

    Returns 0 when they match, otherwise the difference between the code
    points of the first pair that differs. The end of a string compares as
    NUL, and comparison stops at a NUL.
    """
    _check_non_negative(n=n)
    for x, y in islice(zip_longest(a, b, fillvalue="\0"), n):
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            break
    return 0


def strnstr(haystack, needle, n):
    """Index of the first needle lying wholly within the first n characters.

    An empty needle is found at index 0; otherwise None when absent.
    """
    _check_non_negative(n=n)
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def strtrim(s, chars):
    """Remove characters in chars from both ends of s."""
    return s.strip(chars)


def substr(s, start, length):
    """Return up to length characters of s beginning at start.

    A start past the end yields an empty string.
    """
    _check_non_negative(start=start, length=length)
    if start > len(s):
        return ""
    return s[start : start + length]