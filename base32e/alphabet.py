#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Dict, FrozenSet

from base32e.errors import InvalidSymbolError, OutOfRangeError

# Lowercase letters and digits without 1, l, 0, o.
ALPHABET = "abcdefghijkmnpqrstuvwxyz23456789"
GROUP_BITS = 5

SYMBOL_TO_VALUE: Dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}
ALPHABET_SET: FrozenSet[str] = frozenset(ALPHABET)


def symbol_of(value: int) -> str:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value < len(ALPHABET):
        raise OutOfRangeError(value)
    return ALPHABET[value]


def value_of(symbol: str) -> int:
    try:
        return SYMBOL_TO_VALUE[symbol]
    except (KeyError, TypeError):
        raise InvalidSymbolError(symbol) from None
