"""Tests for the command line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ticket_airdrop import cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("AIRDROP_METHODS", "AIRDROP_MODE", "AIRDROP_HASH_MODE", "AIRDROP_REWARD_POOL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def tickets_file(tmp_path: Path, ticket_records: list[dict]) -> Path:
    path = tmp_path / "tickets.json"
    path.write_text(json.dumps(ticket_records), encoding="utf-8")
    return path


def test_leaderboard_draw_verify_round_trip(
    tmp_path: Path, tickets_file: Path, scenario_signature: str
) -> None:
    board = tmp_path / "leaderboard.json"
    airdrop = tmp_path / "airdrop.json"

    assert cli.main(["leaderboard", "--tickets", str(tickets_file), "--out", str(board)]) == 0
    entries = json.loads(board.read_text(encoding="utf-8"))
    assert [(e["id"], e["range"]) for e in entries] == [
        ("1.2.100", {"from": 0, "to": 100}),
        ("1.2.200", {"from": 101, "to": 121}),
    ]

    assert cli.main([
        "draw", "--leaderboard", str(board), "--signature", scenario_signature,
        "--block", "42", "--methods", "forward", "--mode", "strict",
        "--pool", "1000", "--out", str(airdrop),
    ]) == 0
    result = json.loads(airdrop.read_text(encoding="utf-8"))
    assert result["block_number"] == 42
    assert result["result"][0]["percent"] == "33.33333"
    assert result["result"][0]["reward"] == "333.33330"

    assert cli.main([
        "verify", "--artifact", str(airdrop), "--leaderboard", str(board),
        "--signature", scenario_signature,
    ]) == 0

    result["result"][0]["qty"] = 2
    airdrop.write_text(json.dumps(result), encoding="utf-8")
    assert cli.main([
        "verify", "--artifact", str(airdrop), "--leaderboard", str(board),
        "--signature", scenario_signature,
    ]) == 1


def test_draw_requires_a_signature_source(tmp_path: Path, tickets_file: Path) -> None:
    board = tmp_path / "leaderboard.json"
    assert cli.main(["leaderboard", "--tickets", str(tickets_file), "--out", str(board)]) == 0
    assert cli.main(["draw", "--leaderboard", str(board), "--out", str(tmp_path / "a.json")]) == 1


def test_unknown_method_exits_non_zero(tmp_path: Path, tickets_file: Path, scenario_signature: str) -> None:
    board = tmp_path / "leaderboard.json"
    cli.main(["leaderboard", "--tickets", str(tickets_file), "--out", str(board)])
    assert cli.main([
        "draw", "--leaderboard", str(board), "--signature", scenario_signature,
        "--methods", "tubes", "--out", str(tmp_path / "a.json"),
    ]) == 1


def test_missing_input_file_exits_non_zero(tmp_path: Path) -> None:
    assert cli.main(["leaderboard", "--tickets", str(tmp_path / "missing.json")]) == 1


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])
