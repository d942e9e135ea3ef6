# tests/core/config/test_descriptor_hashing.py
"""
Testes do hashing canônico de definições e descritores.
"""

import hashlib
import json

import pytest

from devshell import compose, compute_descriptor_hash
from devshell.core.config.hashing import compute_config_hash


def _canonical_json_bytes(obj: dict) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def test_hash_matches_canonical_json_sha256():
    cfg = {"b": ["x", "y"], "a": {"z": "1"}}
    assert compute_config_hash(cfg) == hashlib.sha256(_canonical_json_bytes(cfg)).hexdigest()


def test_hash_independent_of_key_order():
    assert compute_config_hash({"a": "1", "b": "2"}) == compute_config_hash({"b": "2", "a": "1"})


def test_hash_rejects_non_dict():
    with pytest.raises(TypeError):
        compute_config_hash(["not", "a", "dict"])


def test_descriptor_hash_is_hex_sha256():
    value = compute_descriptor_hash(compose("darwin-aarch64"))
    assert len(value) == 64
    int(value, 16)
