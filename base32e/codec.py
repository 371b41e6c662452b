#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import List

from base32e.alphabet import ALPHABET_SET, symbol_of, value_of
from base32e.bits import MAX_GROUPS, byte_length_for, bytes_to_groups, group_count_for, groups_to_bytes
from base32e.errors import (
    Base32EError,
    EmptyInputError,
    InvalidSymbolError,
    NullInputError,
    TooLongError,
    TooShortError,
)

MAX_EMAIL_NAME_SIZE = MAX_GROUPS
# Largest buffer whose encoding still fits in MAX_EMAIL_NAME_SIZE symbols.
MAX_INPUT_BYTES = MAX_EMAIL_NAME_SIZE * 5 // 8
MIN_NAME_SIZE = 2


def encoded_length(byte_length: int) -> int:
    return group_count_for(byte_length)


def decoded_length(name_length: int) -> int:
    return byte_length_for(name_length)


def encode(data: bytes) -> str:
    """Encode a byte buffer into an email-safe Base32E string.

    Raises NullInputError for None, EmptyInputError for an empty buffer and
    TooLargeError when the result would exceed 64 characters (more than 40
    bytes of input).
    """
    if data is None:
        raise NullInputError("data must not be None")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise Base32EError("data must be bytes")
    if len(data) < 1:
        raise EmptyInputError("the input must contain at least one byte")

    groups = bytes_to_groups(data)
    return "".join(symbol_of(g) for g in groups)


def decode(name: str) -> bytes:
    """Decode a Base32E string back into bytes.

    No case folding is done here: normalize with ``name.lower()`` first if the
    value may come from a case-insensitive source.
    """
    if name is None:
        raise NullInputError("name must not be None")
    if not isinstance(name, str):
        raise Base32EError("name must be str")
    if not name.strip():
        raise EmptyInputError("the input string cannot be empty or consist only of whitespace")
    if len(name) > MAX_EMAIL_NAME_SIZE:
        raise TooLongError(f"the input string cannot exceed {MAX_EMAIL_NAME_SIZE} characters")
    if len(name) < MIN_NAME_SIZE:
        raise TooShortError(f"the input string must have at least {MIN_NAME_SIZE} characters to carry one byte")

    groups: List[int] = []
    for i, ch in enumerate(name):
        try:
            groups.append(value_of(ch))
        except InvalidSymbolError:
            raise InvalidSymbolError(ch, index=i) from None
    return groups_to_bytes(groups)


def is_email_base32(value: str, case_insensitive: bool = True) -> bool:
    """True if ``value`` is non-empty and made only of alphabet characters.

    Unlike decode() no length limit is applied.
    """
    if not value or not isinstance(value, str):
        return False
    for ch in value:
        if case_insensitive:
            ch = ch.lower()
        if ch not in ALPHABET_SET:
            return False
    return True
