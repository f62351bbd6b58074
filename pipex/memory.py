"""Byte-buffer operations on bytes-like objects."""


def _check_span(buf, n, offset=0):
    if n < 0 or offset < 0:
        raise ValueError("length and offset must not be negative")
    if offset + n > len(buf):
        raise ValueError(
            f"span of {n} bytes at offset {offset} exceeds buffer of {len(buf)} bytes"
        )


def bzero(buf, n):
    """Zero the first n bytes of buf in place."""
    _check_span(buf, n)
    buf[:n] = bytes(n)


def calloc(nelem, elsize):
    """Return a zero-filled buffer of nelem * elsize bytes."""
    if nelem < 0 or elsize < 0:
        raise ValueError("sizes must not be negative")
    return bytearray(nelem * elsize)


def memchr(buf, c, n):
    """Return the index of the first byte equal to c within the first n bytes, or None."""
    _check_span(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n):
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst, src, n):
    """Copy the first n bytes of src into dst and return dst."""
    _check_span(dst, n)
    _check_span(src, n)
    dst[:n] = src[:n]
    return dst


def memmove(buf, dst_offset, src_offset, n):
    """Copy n bytes within buf from src_offset to dst_offset; overlap is safe."""
    _check_span(buf, n, dst_offset)
    _check_span(buf, n, src_offset)
    buf[dst_offset : dst_offset + n] = bytes(buf[src_offset : src_offset + n])
    return buf


def memset(buf, c, n):
    """Set the first n bytes of buf to the low byte of c and return buf."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf