"""C-style string and memory routines over byte buffers.

Buffers written to are mutable byte sequences (``bytearray`` or a writable
``memoryview``). Strings read from may be any bytes-like object or ``str``
(encoded as UTF-8); a NUL byte, or the end of the data, terminates them.
"""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]
Buffer = Union[bytearray, memoryview]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _c_string(data: BytesLike) -> bytes:
    """The bytes of ``data`` up to, not including, the first NUL."""
    raw = _as_bytes(data)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def memcpy(dest: Buffer, src: BytesLike, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    source = _as_bytes(src)
    if n < 0 or n > len(source) or n > len(dest):
        raise ValueError(
            f"cannot copy {n} bytes from {len(source)} into a buffer of {len(dest)}"
        )
    dest[:n] = source[:n]
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The ranges may overlap; the result is as if the source were copied first.
    """
    size = len(buffer)
    if n < 0 or dest < 0 or src < 0 or dest + n > size or src + n > size:
        raise ValueError(
            f"move of {n} bytes from {src} to {dest} exceeds buffer of {size}"
        )
    if n and dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def strcpy(dest: Buffer, src: BytesLike) -> Buffer:
    """Copy the string ``src`` and its NUL terminator into ``dest``."""
    data = _c_string(src) + b"\0"
    if len(data) > len(dest):
        raise ValueError(
            f"string of {len(data) - 1} bytes does not fit a buffer of {len(dest)}"
        )
    dest[:len(data)] = data
    return dest


def strncpy(dest: Buffer, src: BytesLike, n: int) -> Buffer:
    """Write exactly ``n`` bytes: ``src`` truncated to ``n``, padded with NULs.

    As in C, no terminator is added when ``src`` has ``n`` or more bytes.
    """
    if n < 0 or n > len(dest):
        raise ValueError(f"cannot write {n} bytes into a buffer of {len(dest)}")
    dest[:n] = _c_string(src)[:n].ljust(n, b"\0")
    return dest


def strlen(data: BytesLike) -> int:
    """Number of bytes before the first NUL."""
    return len(_c_string(data))


def strcmp(s1: BytesLike, s2: BytesLike) -> int:
    """Difference of the first differing unsigned bytes; 0 when equal."""
    a, b = _c_string(s1), _c_string(s2)
    for x, y in zip(a, b):
        if x != y:
            return x - y
    if len(a) < len(b):
        return -b[len(a)]
    if len(a) > len(b):
        return a[len(b)]
    return 0