#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import unittest

from base32e.alphabet import ALPHABET
from base32e.codec import (
    MAX_EMAIL_NAME_SIZE,
    MAX_INPUT_BYTES,
    decode,
    decoded_length,
    encode,
    encoded_length,
    is_email_base32,
)
from base32e.errors import (
    Base32EError,
    EmptyInputError,
    InvalidSymbolError,
    NullInputError,
    TooLargeError,
    TooLongError,
    TooShortError,
)


class EncodeDecodeTests(unittest.TestCase):
    def test_limits(self) -> None:
        self.assertEqual(MAX_EMAIL_NAME_SIZE, 64)
        self.assertEqual(MAX_INPUT_BYTES, 40)

    def test_encode_zero_byte(self) -> None:
        self.assertEqual(encode(b"\x00"), "aa")

    def test_encode_ff_byte(self) -> None:
        name = encode(b"\xff")
        self.assertEqual(len(name), 2)
        self.assertEqual(name, "h9")
        self.assertEqual(decode(name), b"\xff")

    def test_encode_known_vector(self) -> None:
        self.assertEqual(encode(b"\x01\x02\x03\x04\x05"), "aebagbaf")
        self.assertEqual(decode("aebagbaf"), b"\x01\x02\x03\x04\x05")

    def test_encode_accepts_bytearray_and_memoryview(self) -> None:
        self.assertEqual(encode(bytearray(b"\xff")), "h9")
        self.assertEqual(encode(memoryview(b"\xff")), "h9")

    def test_roundtrip_all_lengths(self) -> None:
        for n in range(1, MAX_INPUT_BYTES + 1):
            for data in (os.urandom(n), bytes(range(255, 255 - n, -1)), b"\xff" * n):
                name = encode(data)
                self.assertEqual(len(name), encoded_length(n))
                self.assertLessEqual(len(name), MAX_EMAIL_NAME_SIZE)
                self.assertTrue(set(name) <= set(ALPHABET))
                self.assertEqual(decoded_length(len(name)), n)
                self.assertEqual(decode(name), data)

    def test_roundtrip_keeps_leading_zero_bytes(self) -> None:
        for data in (b"\x00\x01", b"\x00\x00\x00\xab", b"\x00" * 7 + b"\x01", bytes(40), b"\x00"):
            self.assertEqual(decode(encode(data)), data)
        self.assertEqual(encode(b"\x00\x01"), "aaab")

    def test_full_size_output(self) -> None:
        self.assertEqual(encode(b"\xff" * 40), "9" * 64)
        self.assertEqual(decode("9" * 64), b"\xff" * 40)

    def test_encode_errors(self) -> None:
        with self.assertRaises(NullInputError):
            encode(None)  # type: ignore[arg-type]
        with self.assertRaises(EmptyInputError):
            encode(b"")
        with self.assertRaises(TooLargeError):
            encode(b"\x00" * 41)
        with self.assertRaises(Base32EError):
            encode("abc")  # type: ignore[arg-type]

    def test_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            encode(b"")

    def test_decode_null_and_empty(self) -> None:
        with self.assertRaises(NullInputError):
            decode(None)  # type: ignore[arg-type]
        # Whitespace is checked before the length ceiling.
        for bad in ("", " ", "   \t\n", " " * 65):
            with self.assertRaises(EmptyInputError):
                decode(bad)

    def test_decode_too_long_regardless_of_symbols(self) -> None:
        with self.assertRaises(TooLongError):
            decode("a" * 65)
        with self.assertRaises(TooLongError):
            decode("l" * 65)

    def test_decode_single_symbol_is_rejected(self) -> None:
        with self.assertRaises(TooShortError):
            decode("a")

    def test_decode_invalid_symbol(self) -> None:
        with self.assertRaises(InvalidSymbolError) as ctx:
            decode("abcdefgl")
        self.assertEqual(ctx.exception.symbol, "l")
        self.assertEqual(ctx.exception.index, 7)
        with self.assertRaises(InvalidSymbolError):
            decode("aa aa")

    def test_decode_does_not_fold_case(self) -> None:
        with self.assertRaises(InvalidSymbolError):
            decode("H9")
        self.assertEqual(decode("H9".lower()), b"\xff")

    def test_decode_non_canonical_padding(self) -> None:
        # First group carries bits above the 8-bit payload.
        self.assertEqual(decode("9a"), b"\x03\xe0")
        self.assertEqual(decode("ab"), b"\x01")


class IsEmailBase32Tests(unittest.TestCase):
    def test_null_empty_whitespace(self) -> None:
        self.assertFalse(is_email_base32(None))  # type: ignore[arg-type]
        self.assertFalse(is_email_base32(""))
        self.assertFalse(is_email_base32("   "))

    def test_non_string(self) -> None:
        self.assertFalse(is_email_base32(b"abc"))  # type: ignore[arg-type]
        self.assertFalse(is_email_base32(123))  # type: ignore[arg-type]

    def test_full_alphabet(self) -> None:
        self.assertTrue(is_email_base32(ALPHABET))
        self.assertTrue(is_email_base32(ALPHABET.upper()))
        self.assertTrue(is_email_base32("AbcDefGhJkMnPqRsTuVwXyZ23456789"))
        self.assertTrue(is_email_base32("23456789"))

    def test_case_insensitive_by_default(self) -> None:
        self.assertTrue(is_email_base32("ABC"))
        self.assertTrue(is_email_base32("abc"))

    def test_case_sensitive(self) -> None:
        self.assertFalse(is_email_base32("ABC", case_insensitive=False))
        self.assertFalse(is_email_base32("aBc", case_insensitive=False))
        self.assertTrue(is_email_base32("abc", case_insensitive=False))

    def test_excluded_characters(self) -> None:
        self.assertFalse(is_email_base32("abcl"))
        self.assertFalse(is_email_base32("ABCO"))
        self.assertFalse(is_email_base32("abc!"))
        self.assertFalse(is_email_base32("ab0"))
        self.assertFalse(is_email_base32("ab1"))

    def test_no_length_ceiling(self) -> None:
        self.assertTrue(is_email_base32("a" * 65))
        self.assertFalse(is_email_base32("a" * 64 + "l"))

    def test_looser_than_decode(self) -> None:
        value = "a" * 65
        self.assertTrue(is_email_base32(value))
        with self.assertRaises(TooLongError):
            decode(value)


if __name__ == "__main__":
    unittest.main()
