"""Unit tests for chunk extraction and amount helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from ticket_airdrop.errors import MalformedInputError
from ticket_airdrop.utils import Utils


def test_parse_chunk_skips_leading_zeros() -> None:
    assert Utils.parse_chunk("000045") == 45
    assert Utils.parse_chunk("000000") == 0
    assert Utils.parse_chunk("010") == 10
    assert Utils.parse_chunk("999999999") == 999999999


def test_parse_chunk_rejects_non_digits() -> None:
    for bad in ("12a", "", " 12", "-12", "1.2"):
        with pytest.raises(MalformedInputError):
            Utils.parse_chunk(bad)


def test_chunk_discards_short_tail() -> None:
    assert Utils.chunk("1234567890", 3) == ["123", "456", "789"]
    assert Utils.chunk("123456", 3) == ["123", "456"]
    assert Utils.chunk("12", 3) == []
    assert Utils.chunk("", 9) == []


def test_chunk_rejects_non_positive_width() -> None:
    with pytest.raises(ValueError):
        Utils.chunk("123", 0)


def test_reverse_chunk_twice_restores_digits() -> None:
    assert Utils.reverse_chunk(Utils.reverse_chunk("120")) == "120"


def test_reverse_chunk_leading_zero_changes_value() -> None:
    # "120" reversed is "021", which parses to 21, not 120 reversed back.
    reversed_text = Utils.reverse_chunk("120")
    assert reversed_text == "021"
    assert Utils.parse_chunk(reversed_text) == 21
    assert Utils.parse_chunk(Utils.reverse_chunk(str(21))) == 12


def test_human_readable_uses_five_decimals() -> None:
    assert Utils.human_readable(2500000) == Decimal("25.00000")
    assert Utils.human_readable(1) == Decimal("0.00001")
    assert Utils.human_readable(0) == Decimal("0")


def test_rounding_is_half_up() -> None:
    assert Utils.round_int(Decimal("0.5")) == 1
    assert Utils.round_int(Decimal("2.5")) == 3
    assert Utils.round_int(Decimal("2.49999")) == 2
    assert Utils.round5(Decimal("0.000005")) == Decimal("0.00001")
    assert Utils.format_amount(Decimal("33.333333")) == "33.33333"
