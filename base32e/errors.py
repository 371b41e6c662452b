#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional


class Base32EError(ValueError):
    pass


class NullInputError(Base32EError):
    pass


class EmptyInputError(Base32EError):
    pass


class TooLargeError(Base32EError):
    """Byte buffer would encode to more than 64 symbols."""


class TooLongError(Base32EError):
    """Symbol string (or group sequence) is longer than 64."""


class TooShortError(Base32EError):
    """Symbol string carries no whole byte."""


class InvalidSymbolError(Base32EError):
    def __init__(self, symbol: str, index: Optional[int] = None) -> None:
        if index is None:
            msg = f"character {symbol!r} is not in the Base32E alphabet"
        else:
            msg = f"character {symbol!r} at index {index} is not in the Base32E alphabet"
        super().__init__(msg)
        self.symbol = symbol
        self.index = index


class OutOfRangeError(Base32EError):
    def __init__(self, value: object, index: Optional[int] = None) -> None:
        if index is None:
            msg = f"value {value!r} is out of range, must be between 0 and 31"
        else:
            msg = f"element at index {index} is invalid ({value!r}), values must be between 0 and 31"
        super().__init__(msg)
        self.value = value
        self.index = index
