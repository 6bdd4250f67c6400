"""
Resolve pooled draw numbers against the leaderboard range table
"""

import logging
from bisect import bisect_right
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from .errors import ConfigError, EmptyLeaderboardError, NoValidDrawsError
from .models import LeaderboardEntry, NormalizationMode, WinnerRecord
from .utils import Utils

logger = logging.getLogger(__name__)

MODES = ('wraparound', 'strict')


def deduplicate(draws: Iterable[int]) -> List[int]:
    """Drop repeated draw numbers, keeping first-seen order."""
    return list(dict.fromkeys(draws))


def normalize(number: int, bound: int, mode: NormalizationMode = 'wraparound') -> int:
    """
    Bring a draw number into the range table.

    In wraparound mode numbers above the table's upper bound are reduced
    modulo that bound; strict mode leaves every number as it is.

    Example:
        >>> normalize(1500, 999)
        501
    """
    if mode == 'strict' or number <= bound:
        return number
    return number - (number // bound) * bound


def find_entry(
    number: int,
    leaderboard: Sequence[LeaderboardEntry],
    starts: Optional[Sequence[int]] = None,
) -> Optional[LeaderboardEntry]:
    """Leaderboard entry whose inclusive range holds the number, if any."""
    if starts is None:
        starts = [entry.range_from for entry in leaderboard]
    index = bisect_right(starts, number) - 1
    if index < 0:
        return None
    entry = leaderboard[index]
    return entry if entry.contains(number) else None


def resolve_winners(
    draws: Iterable[int],
    leaderboard: Sequence[LeaderboardEntry],
    mode: NormalizationMode = 'wraparound',
    reward_pool: Decimal = Decimal(0),
) -> List[WinnerRecord]:
    """
    Map draw numbers onto leaderboard ranges and share out the reward pool.

    Args:
        draws: Pooled draw numbers from the distribution methods
        leaderboard: Range table, ordered by range start
        mode: 'wraparound' or 'strict'
        reward_pool: Amount to distribute

    Returns:
        WinnerRecord list in leaderboard order

    Raises:
        EmptyLeaderboardError: If the range table is empty or unusable
        NoValidDrawsError: If there is nothing to resolve
    """
    if mode not in MODES:
        raise ConfigError(f"Unsupported normalization mode: {mode}")
    if not leaderboard:
        raise EmptyLeaderboardError("Cannot resolve winners against an empty leaderboard")

    ordered = sorted(leaderboard, key=lambda entry: entry.range_from)
    bound = ordered[-1].range_to
    if mode == 'wraparound' and bound <= 0:
        raise EmptyLeaderboardError("Leaderboard range bound is zero; cannot wrap draws")

    numbers = [normalize(n, bound, mode) for n in deduplicate(draws)]
    if not numbers:
        raise NoValidDrawsError("No valid draws to resolve")

    starts = [entry.range_from for entry in ordered]
    hits: Dict[str, List[int]] = {}
    unmatched = 0
    for number in numbers:
        entry = find_entry(number, ordered, starts)
        if entry is None:
            unmatched += 1
            continue
        hits.setdefault(entry.id, []).append(number)

    total = Decimal(len(numbers))
    winners = []
    for entry in leaderboard:
        won = hits.get(entry.id)
        if not won:
            continue
        percent = Utils.round5(Decimal(len(won)) / total * 100)
        winners.append(WinnerRecord(
            id=entry.id,
            name=entry.name,
            numbers=sorted(set(won)),
            count=len(won),
            percent=percent,
            reward=Utils.round5(percent / 100 * Decimal(reward_pool)),
        ))

    logger.info("%d draws resolved: %d winners, %d unmatched",
                len(numbers), len(winners), unmatched)
    return winners
