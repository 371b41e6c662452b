#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import json
import tempfile
import unittest
from pathlib import Path

from base32e.config import DEFAULT_CONFIG, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_missing_file_gives_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg = load_config(str(Path(td) / "missing.json"))
        self.assertEqual(cfg, DEFAULT_CONFIG)
        self.assertIsNot(cfg, DEFAULT_CONFIG)

    def test_invalid_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "config.json"
            path.write_text(
                json.dumps({"case_insensitive": False, "domain": "example.org", "input_format": "bogus", "extra": 1}),
                encoding="utf-8",
            )
            cfg = load_config(str(path))
        self.assertIs(cfg["case_insensitive"], False)
        self.assertEqual(cfg["domain"], "example.org")
        self.assertEqual(cfg["input_format"], "hex")
        self.assertNotIn("extra", cfg)

    def test_broken_json_gives_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(str(path)), DEFAULT_CONFIG)
            path.write_text("[1, 2]", encoding="utf-8")
            self.assertEqual(load_config(str(path)), DEFAULT_CONFIG)

    def test_save_then_load(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "sub" / "config.json"
            cfg = dict(DEFAULT_CONFIG)
            cfg["input_format"] = "base64"
            save_config(str(path), cfg)
            self.assertFalse(Path(str(path) + ".tmp").exists())
            self.assertEqual(load_config(str(path)), cfg)


if __name__ == "__main__":
    unittest.main()
