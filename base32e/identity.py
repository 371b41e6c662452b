#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import base64
import hashlib
from typing import Tuple, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import x25519

from base32e.codec import MAX_EMAIL_NAME_SIZE, decode, encode, is_email_base32
from base32e.errors import Base32EError

KEY_SIZE = 32

PublicKeyLike = Union[x25519.X25519PublicKey, bytes, bytearray]


class IdentityError(Base32EError):
    pass


def b64d(s: str) -> bytes:
    return base64.b64decode(s.encode("ascii"))


def load_private_key(path: str) -> x25519.X25519PrivateKey:
    with open(path, "r", encoding="utf-8") as f:
        raw = b64d(f.read().strip())
    return x25519.X25519PrivateKey.from_private_bytes(raw)


def load_public_key(path: str) -> x25519.X25519PublicKey:
    with open(path, "r", encoding="utf-8") as f:
        raw = b64d(f.read().strip())
    return x25519.X25519PublicKey.from_public_bytes(raw)


def public_key_bytes(key: PublicKeyLike) -> bytes:
    if isinstance(key, x25519.X25519PublicKey):
        return key.public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
    if isinstance(key, (bytes, bytearray)):
        raw = bytes(key)
        if len(raw) != KEY_SIZE:
            raise IdentityError(f"public key must be {KEY_SIZE} bytes, got {len(raw)}")
        return raw
    raise IdentityError("public key must be X25519PublicKey or bytes")


def normalize_name(name: str, case_insensitive: bool = True) -> str:
    """Check a local part is Base32E; lowercase it when case is ignored."""
    if not is_email_base32(name, case_insensitive=case_insensitive):
        raise IdentityError(f"not a Base32E name: {name!r}")
    if len(name) > MAX_EMAIL_NAME_SIZE:
        raise IdentityError(f"name cannot exceed {MAX_EMAIL_NAME_SIZE} characters")
    return name.lower() if case_insensitive else name


def public_key_to_name(key: PublicKeyLike) -> str:
    return encode(public_key_bytes(key))


def name_to_public_key(name: str) -> x25519.X25519PublicKey:
    raw = decode(normalize_name(name))
    if len(raw) != KEY_SIZE:
        raise IdentityError(f"name decodes to {len(raw)} bytes, expected a {KEY_SIZE}-byte public key")
    return x25519.X25519PublicKey.from_public_bytes(raw)


def digest_name(data: bytes) -> str:
    """SHA-256 of ``data`` as a 52-character local part."""
    return encode(hashlib.sha256(bytes(data)).digest())


def make_address(name: str, domain: str) -> str:
    local = normalize_name(name)
    host = str(domain or "").strip().lstrip("@")
    if not host or "@" in host:
        raise IdentityError(f"invalid domain: {domain!r}")
    return f"{local}@{host}"


def split_address(address: str, case_insensitive: bool = True) -> Tuple[str, str]:
    if not isinstance(address, str) or "@" not in address:
        raise IdentityError(f"not an email address: {address!r}")
    local, _, host = address.strip().rpartition("@")
    if not host:
        raise IdentityError(f"missing domain in {address!r}")
    return normalize_name(local, case_insensitive=case_insensitive), host
