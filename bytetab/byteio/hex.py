# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Byte <-> two-char uppercase hex conversion, with no state of its own.
"""
from __future__ import annotations

from typing import Any, MutableSequence, Sequence, Iterable

from ..common import verify_offset_and_count


def nibble_to_char(value: int) -> str:
    n = value & 0x0F
    return chr(n + 0x37 if n > 9 else n + 0x30)


def char_to_nibble(c: str) -> int:
    if '0' <= c <= '9':
        return ord(c) - 0x30
    if 'A' <= c <= 'F':
        return ord(c) - 0x37
    if 'a' <= c <= 'f':
        return ord(c) - 0x57
    raise ValueError(f'Not a hex digit: {c!r}')


HEX_PAIRS = tuple(nibble_to_char(b >> 4) + nibble_to_char(b) for b in range(0x100))


def encode_byte(b: int) -> str:
    if not 0 <= b <= 0xFF:
        raise ValueError(f'Byte value out of range: {b}')
    return HEX_PAIRS[b]


def decode_byte(pair: str) -> int:
    if len(pair) != 2:
        raise ValueError(f'Expected 2 hex digits, got {len(pair)}: {pair!r}')
    return (char_to_nibble(pair[0]) << 4) | char_to_nibble(pair[1])


def encode_into(
    source: Sequence[int],
    source_offset: int,
    source_count: int,
    destination: MutableSequence[str],
    destination_offset: int,
):
    """
    Write ``source_count`` bytes of ``source`` starting at ``source_offset`` as
    hex digits into ``destination``, two slots per byte, starting at
    ``destination_offset``.

    Either everything is written or :class:`OutOfRangeError` is raised before
    ``destination`` is touched. Zero-count writes always succeed.
    """
    if source_count == 0:
        return
    verify_offset_and_count(len(source), source_offset, source_count, 'source_offset', 'source_count')
    verify_offset_and_count(len(destination), destination_offset, source_count * 2, 'destination_offset', 'destination')

    encoded = encode(source[idx] for idx in range(source_offset, source_offset + source_count))
    for idx, c in enumerate(encoded, start=destination_offset):
        destination[idx] = c


def encode(source: Iterable[int]) -> str:
    return ''.join(encode_byte(b) for b in source)


def decode(text: str) -> bytes:
    if len(text) % 2:
        raise ValueError(f'Odd number of hex digits: {len(text)}')
    return bytes(decode_byte(text[i:i + 2]) for i in range(0, len(text), 2))


def encode_to_sink(source: Iterable[int], sink: Any):
    text = encode(source)
    if text:
        sink.write(text)
