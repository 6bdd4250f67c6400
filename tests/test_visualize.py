"""Smoke tests for the chart renderers."""

from __future__ import annotations

from pathlib import Path

from ticket_airdrop.distributions import generate_draws
from ticket_airdrop.models import LeaderboardEntry
from ticket_airdrop.visualize import (
    plot_draw_histogram,
    plot_geometric_samples,
    plot_leaderboard,
    split_draw,
)


def test_split_draw_recovers_coordinates() -> None:
    x, y, z = split_draw([3_002_001, 999_999_999])
    assert list(x) == [1, 999]
    assert list(y) == [2, 999]
    assert list(z) == [3, 999]


def test_plots_are_written(tmp_path: Path, leaderboard: list[LeaderboardEntry]) -> None:
    draws = generate_draws("000000000999999999", ["fish"])

    assert plot_leaderboard(leaderboard, tmp_path / "board.png").stat().st_size > 0
    assert plot_draw_histogram(draws, tmp_path / "draws.png").stat().st_size > 0
    assert plot_geometric_samples(draws, tmp_path / "out" / "samples.png").stat().st_size > 0


def test_histogram_of_no_draws(tmp_path: Path) -> None:
    assert plot_draw_histogram([], tmp_path / "empty.png").exists()


def test_split_draw_skips_values_outside_the_cube() -> None:
    x, y, z = split_draw([2_941_000_123, 5_004_003, 1_000_000_000, 999_999_999])
    assert list(x) == [3, 999]
    assert list(y) == [4, 999]
    assert list(z) == [5, 999]


def test_samples_plot_with_hypercube_draws(tmp_path: Path) -> None:
    draws = generate_draws("99999" * 4, ["forward", "hypercube"])
    assert min(draws) <= 999_999_999 < max(draws)
    assert plot_geometric_samples(draws, tmp_path / "hyper.png").stat().st_size > 0
