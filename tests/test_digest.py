"""Unit tests for signature digestion."""

from __future__ import annotations

import hashlib

import pytest

from ticket_airdrop.digest import digitize, hash_signature
from ticket_airdrop.errors import ConfigError


def test_digitize_maps_non_digits_to_code_points() -> None:
    assert digitize("a1b") == "97" + "1" + "98"
    assert digitize("Z") == "90"
    assert digitize("é") == "233"


def test_digitize_passes_digits_through() -> None:
    assert digitize("0123456789") == "0123456789"


def test_digitize_is_total_and_all_digits() -> None:
    signature = "1f2a7c0e9d-+ /xyz"
    stream = digitize(signature)
    assert stream.isdigit()
    assert len(stream) >= len(signature)


@pytest.mark.parametrize("mode", ["sha256", "sha512"])
def test_hash_modes_digest_signature_bytes(mode: str) -> None:
    signature = "1f7a3c"
    expected = hashlib.new(mode, signature.encode("utf-8")).hexdigest()
    assert hash_signature(signature, mode) == expected
    assert digitize(signature, mode) == digitize(expected)


def test_hash_none_keeps_signature() -> None:
    assert hash_signature("abc", "none") == "abc"


def test_unknown_hash_mode_is_rejected() -> None:
    with pytest.raises(ConfigError):
        digitize("abc", "md5")  # type: ignore[arg-type]


def test_digitize_is_deterministic() -> None:
    signature = "20" + "ab" * 64
    assert digitize(signature, "sha512") == digitize(signature, "sha512")
