"""Pytest fixtures shared across the airdrop tests."""

from __future__ import annotations

import pytest

from ticket_airdrop.ledger import build_leaderboard, parse_record, tally_weights
from ticket_airdrop.models import LeaderboardEntry


@pytest.fixture
def scenario_signature() -> str:
    """Forward draws of this signature are [50, 150, 999999999]."""
    return "000000050000000150999999999"


@pytest.fixture
def ticket_records() -> list[dict]:
    return [
        {"id": "1.18.0", "account": "1.2.100", "current_type": "lock_360_days",
         "amount": {"amount": 2500000, "asset_id": "1.3.0"}},
        {"id": "1.18.1", "account": "1.2.200", "current_type": "lock_180_days",
         "amount": {"amount": "1000000", "asset_id": "1.3.0"}},
        {"id": "1.18.2", "account": "1.2.300", "current_type": "liquid",
         "amount": {"amount": 99999999, "asset_id": "1.3.0"}},
    ]


@pytest.fixture
def leaderboard(ticket_records: list[dict]) -> list[LeaderboardEntry]:
    names = {"1.2.100": "alice", "1.2.200": "bob"}
    entries = [parse_record(record) for record in ticket_records]
    return build_leaderboard(tally_weights(entries), names.get)
