#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import argparse
import base64
import binascii
import datetime as _dt
import os
import sys
from typing import Dict, List, Optional

from base32e import VERSION
from base32e.codec import decode, encode, is_email_base32
from base32e.config import DEFAULT_CONFIG, INPUT_FORMATS, load_config
from base32e.errors import Base32EError
from base32e.identity import (
    digest_name,
    load_private_key,
    load_public_key,
    make_address,
    name_to_public_key,
    normalize_name,
    public_key_bytes,
    public_key_to_name,
    split_address,
)

BASE_DIR = os.path.dirname(os.path.abspath(sys.argv[0]))
CONFIG_FILE = os.path.join(BASE_DIR, "config.json")

VERBOSE = False


class UsageError(Exception):
    pass


def ts_now() -> str:
    return _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def out(msg: str) -> None:
    sys.stderr.write(msg + "\n")
    sys.stderr.flush()


def debug(msg: str) -> None:
    if VERBOSE:
        out(f"{ts_now()} {msg}")


def read_input(value: Optional[str], path: Optional[str], fmt: str) -> bytes:
    """Payload bytes from a file (``-`` is stdin) or the positional value."""
    if path:
        if path == "-":
            data = sys.stdin.buffer.read()
        else:
            try:
                with open(path, "rb") as f:
                    data = f.read()
            except OSError as e:
                raise UsageError(f"cannot read {path}: {e}") from e
        if fmt == "raw":
            return data
    else:
        if value is None:
            raise UsageError("no input given (pass a value or --file)")
        if fmt == "raw":
            raise UsageError("--format raw needs --file")
        data = value.encode("utf-8")

    try:
        text = data.decode("ascii", errors="strict").strip()
        if fmt == "hex":
            return bytes.fromhex(text)
        return base64.b64decode(text, validate=True)
    except (ValueError, binascii.Error) as e:
        raise UsageError(f"invalid {fmt} input: {e}") from e


def render_output(data: bytes, fmt: str) -> str:
    if fmt == "base64":
        return base64.b64encode(data).decode("ascii")
    return data.hex()


def prepare_name(name: str, case_insensitive: bool) -> str:
    if case_insensitive and is_email_base32(name):
        return name.lower()
    return name


def with_domain(name: str, domain: str) -> str:
    if domain:
        return make_address(name, domain)
    return name


def cmd_encode(args: argparse.Namespace, cfg: Dict[str, object]) -> int:
    fmt = args.format or str(cfg["input_format"])
    data = read_input(args.value, args.file, fmt)
    debug(f"encode: {len(data)} bytes ({fmt})")
    name = encode(data)
    print(with_domain(name, args.domain if args.domain is not None else str(cfg["domain"])))
    return 0


def cmd_decode(args: argparse.Namespace, cfg: Dict[str, object]) -> int:
    case_insensitive = bool(cfg["case_insensitive"]) and not args.case_sensitive
    name = args.name
    if "@" in name:
        name, _, host = name.strip().rpartition("@")
        debug(f"decode: stripped domain {host}")
    data = decode(prepare_name(name, case_insensitive))
    debug(f"decode: {len(name)} symbols -> {len(data)} bytes")
    fmt = args.format if args.format in ("hex", "base64") else "hex"
    print(render_output(data, fmt))
    return 0


def cmd_check(args: argparse.Namespace, cfg: Dict[str, object]) -> int:
    case_insensitive = bool(cfg["case_insensitive"]) and not args.case_sensitive
    rc = 0
    for value in args.values:
        ok = is_email_base32(value, case_insensitive=case_insensitive)
        print(f"{value}: {'ok' if ok else 'invalid'}")
        if not ok:
            rc = 1
    return rc


def cmd_key_name(args: argparse.Namespace, cfg: Dict[str, object]) -> int:
    try:
        if args.private:
            key = load_private_key(args.keyfile).public_key()
        else:
            key = load_public_key(args.keyfile)
    except OSError as e:
        raise UsageError(f"cannot read {args.keyfile}: {e}") from e
    except ValueError as e:
        raise UsageError(f"invalid key file {args.keyfile}: {e}") from e
    name = public_key_to_name(key)
    print(with_domain(name, args.domain if args.domain is not None else str(cfg["domain"])))
    return 0


def cmd_key_from_name(args: argparse.Namespace, cfg: Dict[str, object]) -> int:
    name = args.name
    if "@" in name:
        name, _host = split_address(name)
    key = name_to_public_key(name)
    print(base64.b64encode(public_key_bytes(key)).decode("ascii"))
    return 0


def cmd_digest_name(args: argparse.Namespace, cfg: Dict[str, object]) -> int:
    data = read_input(None, args.file, "raw")
    debug(f"digest-name: sha256 over {len(data)} bytes")
    name = digest_name(data)
    print(with_domain(name, args.domain if args.domain is not None else str(cfg["domain"])))
    return 0


def cmd_address(args: argparse.Namespace, cfg: Dict[str, object]) -> int:
    domain = args.domain if args.domain is not None else str(cfg["domain"])
    if not domain:
        raise UsageError("no domain given (pass --domain or set it in config)")
    print(make_address(normalize_name(args.name), domain))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="base32eTool.py",
        description="Email-safe Base32 (Base32E) encoder/decoder.",
    )
    ap.add_argument("--version", action="store_true", help="print version and exit.")
    ap.add_argument("--config", default=CONFIG_FILE, help=f"JSON config file (default: {CONFIG_FILE}).")
    ap.add_argument("-v", "--verbose", action="store_true", help="diagnostic output on stderr.")
    sub = ap.add_subparsers(dest="command")

    p = sub.add_parser("encode", help="encode bytes into a Base32E name.")
    p.add_argument("value", nargs="?", default=None, help="payload (hex or base64, see --format).")
    p.add_argument("--file", default=None, help="read payload from file ('-' for stdin).")
    p.add_argument("--format", choices=INPUT_FORMATS, default=None, help="payload format (default: from config, hex).")
    p.add_argument("--domain", default=None, help="append @domain to the result.")
    p.set_defaults(func=cmd_encode)

    p = sub.add_parser("decode", help="decode a Base32E name (or name@domain) into bytes.")
    p.add_argument("name")
    p.add_argument("--format", choices=("hex", "base64"), default="hex", help="output format (default: hex).")
    p.add_argument("--case-sensitive", action="store_true", help="do not lowercase the name before decoding.")
    p.set_defaults(func=cmd_decode)

    p = sub.add_parser("check", help="check that values use only the Base32E alphabet.")
    p.add_argument("values", nargs="+")
    p.add_argument("--case-sensitive", action="store_true", help="reject uppercase letters.")
    p.set_defaults(func=cmd_check)

    p = sub.add_parser("key-name", help="Base32E name of an X25519 public key file (base64).")
    p.add_argument("keyfile")
    p.add_argument("--private", action="store_true", help="keyfile holds the private key; derive the public one.")
    p.add_argument("--domain", default=None, help="append @domain to the result.")
    p.set_defaults(func=cmd_key_name)

    p = sub.add_parser("key-from-name", help="X25519 public key (base64) from a Base32E name or address.")
    p.add_argument("name")
    p.set_defaults(func=cmd_key_from_name)

    p = sub.add_parser("digest-name", help="Base32E name of the SHA-256 of a file.")
    p.add_argument("file", help="file to hash ('-' for stdin).")
    p.add_argument("--domain", default=None, help="append @domain to the result.")
    p.set_defaults(func=cmd_digest_name)

    p = sub.add_parser("address", help="build name@domain from a Base32E name.")
    p.add_argument("name")
    p.add_argument("--domain", default=None, help="mail domain (default: from config).")
    p.set_defaults(func=cmd_address)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    global VERBOSE
    ap = build_parser()
    args = ap.parse_args(argv)
    VERBOSE = bool(args.verbose)

    if args.version:
        print(f"base32eTool.py v{VERSION}")
        return 0
    if not args.command:
        ap.print_help()
        return 2

    cfg = load_config(args.config) if args.config else dict(DEFAULT_CONFIG)
    debug(f"config: {args.config} -> {cfg}")
    try:
        return int(args.func(args, cfg))
    except UsageError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    except Base32EError as e:
        print(f"[ERROR] {type(e).__name__}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
