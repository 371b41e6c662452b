#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
base32e package

Email-safe Base32 codec ("Base32E"): turns 1..40 byte identifiers (hashes,
public keys) into lowercase strings of at most 64 characters that can be used
as the local part of an email address, and back.
"""

from __future__ import annotations

from base32e.alphabet import ALPHABET, symbol_of, value_of
from base32e.bits import bytes_to_groups, groups_to_bytes
from base32e.codec import (
    MAX_EMAIL_NAME_SIZE,
    MAX_INPUT_BYTES,
    decode,
    encode,
    encoded_length,
    decoded_length,
    is_email_base32,
)
from base32e.errors import (
    Base32EError,
    EmptyInputError,
    InvalidSymbolError,
    NullInputError,
    OutOfRangeError,
    TooLargeError,
    TooLongError,
    TooShortError,
)

VERSION = "1.0.0"

__all__ = [
    "VERSION",
    "ALPHABET",
    "MAX_EMAIL_NAME_SIZE",
    "MAX_INPUT_BYTES",
    "symbol_of",
    "value_of",
    "bytes_to_groups",
    "groups_to_bytes",
    "encode",
    "decode",
    "encoded_length",
    "decoded_length",
    "is_email_base32",
    "Base32EError",
    "NullInputError",
    "EmptyInputError",
    "TooLargeError",
    "TooLongError",
    "TooShortError",
    "InvalidSymbolError",
    "OutOfRangeError",
]
