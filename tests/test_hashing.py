"""Tests for the token digest."""

import hashlib

from session_tokens.hashing import DIGEST_HEX_LENGTH, digest, token_material


def test_digest_is_sha256_hex():
    assert digest(b"abc") == hashlib.sha256(b"abc").hexdigest()


def test_digest_fixed_length():
    for data in (b"", b"x", b"a" * 10_000):
        out = digest(data)
        assert len(out) == DIGEST_HEX_LENGTH
        assert out == out.lower()
        int(out, 16)


def test_digest_deterministic():
    assert digest(b"same input") == digest(b"same input")


def test_token_material_layout():
    assert token_material("abc123", "s3cret", 1000) == b"abc123-s3cret-1000"


def test_known_vector():
    expected = hashlib.sha256(b"abc123-s3cret-1000").hexdigest()
    assert digest(token_material("abc123", "s3cret", 1000)) == expected


def test_each_component_changes_digest():
    base = digest(token_material("abc123", "s3cret", 1000))
    assert digest(token_material("abc124", "s3cret", 1000)) != base
    assert digest(token_material("abc123", "s3creT", 1000)) != base
    assert digest(token_material("abc123", "s3cret", 1001)) != base


def test_no_collisions_over_timestamps():
    digests = {digest(token_material("abc123", "s3cret", ms)) for ms in range(2000)}
    assert len(digests) == 2000
