#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
import os
from typing import Dict

INPUT_FORMATS = ("hex", "base64", "raw")

DEFAULT_CONFIG: Dict[str, object] = {
    "case_insensitive": True,
    "input_format": "hex",
    "domain": "",
}


def _valid(key: str, value: object) -> bool:
    if key == "case_insensitive":
        return isinstance(value, bool)
    if key == "input_format":
        return value in INPUT_FORMATS
    if key == "domain":
        return isinstance(value, str)
    return False


def load_config(path: str) -> Dict[str, object]:
    """Defaults merged with the JSON file at ``path``.

    A missing or unreadable file gives the defaults; unknown keys and values
    of the wrong type are ignored.
    """
    cfg = dict(DEFAULT_CONFIG)
    if not path or not os.path.isfile(path):
        return cfg
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg
    for key, value in data.items():
        if key in cfg and _valid(key, value):
            cfg[key] = value
    return cfg


def save_config(path: str, cfg: Dict[str, object]) -> None:
    tmp = path + ".tmp"
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2, sort_keys=True)
    os.replace(tmp, path)
