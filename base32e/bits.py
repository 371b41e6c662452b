#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import List, Sequence

from base32e.alphabet import GROUP_BITS
from base32e.errors import (
    Base32EError,
    EmptyInputError,
    NullInputError,
    OutOfRangeError,
    TooLargeError,
    TooLongError,
)

BYTE_BITS = 8
MAX_GROUPS = 64
GROUP_MASK = (1 << GROUP_BITS) - 1


class _GroupWriter:
    """MSB-first bit accumulator that emits fixed-width groups."""

    def __init__(self, width: int = GROUP_BITS) -> None:
        self._width = width
        self._mask = (1 << width) - 1
        self._groups: List[int] = []
        self._acc = 0
        self._bits = 0

    def write(self, code: int, length: int) -> None:
        self._acc = (self._acc << length) | (code & ((1 << length) - 1))
        self._bits += length
        while self._bits >= self._width:
            shift = self._bits - self._width
            self._groups.append((self._acc >> shift) & self._mask)
            self._acc &= (1 << shift) - 1
            self._bits -= self._width

    def to_groups(self) -> List[int]:
        return list(self._groups)


def group_count_for(byte_length: int) -> int:
    total_bits = byte_length * BYTE_BITS
    return (total_bits + GROUP_BITS - 1) // GROUP_BITS


def byte_length_for(group_count: int) -> int:
    # Floor: drops the zero bits encode put in front of the first group.
    return group_count * GROUP_BITS // BYTE_BITS


def bytes_to_groups(data: bytes) -> List[int]:
    """Split a big-endian byte buffer into 5-bit groups, most significant first.

    The buffer is read as one unsigned integer. When ``8 * len(data)`` is not a
    multiple of 5 the first group is left-padded with zero bits, so a single
    byte gives two groups (2 padding bits + 8 payload bits).
    """
    if data is None:
        raise NullInputError("data must not be None")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise Base32EError("data must be bytes")
    raw = bytes(data)
    if not raw:
        raise EmptyInputError("the input must contain at least one byte")
    count = group_count_for(len(raw))
    if count > MAX_GROUPS:
        raise TooLargeError(
            f"the input is too large to produce a valid email-safe string (maximum {MAX_GROUPS} characters)"
        )

    writer = _GroupWriter()
    writer.write(0, count * GROUP_BITS - len(raw) * BYTE_BITS)
    for b in raw:
        writer.write(b, BYTE_BITS)
    return writer.to_groups()


def groups_to_bytes(groups: Sequence[int]) -> bytes:
    """Join 5-bit groups back into a big-endian byte buffer.

    The result is ``floor(5 * len(groups) / 8)`` bytes long, zero-padded on the
    left. If the groups carry set bits above that width (a non-canonical
    string) the value is returned at its own minimal width instead, which is
    longer.
    """
    if len(groups) > MAX_GROUPS:
        raise TooLongError(f"the input cannot exceed {MAX_GROUPS} groups")
    if not groups:
        raise EmptyInputError("the input must contain at least one group")

    value = 0
    for i, g in enumerate(groups):
        if not isinstance(g, int) or isinstance(g, bool) or not 0 <= g <= GROUP_MASK:
            raise OutOfRangeError(g, index=i)
        value = (value << GROUP_BITS) | g

    size = byte_length_for(len(groups))
    natural = max(1, (value.bit_length() + 7) // BYTE_BITS)
    return value.to_bytes(max(size, natural), "big")
