"""
Ticket weighting and leaderboard partitioning
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from .errors import EmptyLeaderboardError, MalformedInputError
from .models import HolderTally, LeaderboardEntry, LedgerEntry
from .utils import Utils

logger = logging.getLogger(__name__)

MULTIPLIERS: Dict[str, int] = {
    'lock_180': 2,
    'lock_360': 4,
    'lock_720': 8,
    'lock_forever': 8,
}

UNKNOWN_NAME = '???'

NameResolver = Callable[[str], Optional[str]]


def _lock_kind(current_type: str) -> str:
    # Node records spell the lock periods as lock_180_days etc.
    kind = current_type[:-len('_days')] if current_type.endswith('_days') else current_type
    if kind != 'liquid' and kind not in MULTIPLIERS:
        raise MalformedInputError(f"Unknown ticket type: {current_type}")
    return kind


def _raw_amount(amount: Any) -> int:
    if isinstance(amount, Mapping):
        amount = amount.get('amount')
    if isinstance(amount, bool) or amount is None:
        raise MalformedInputError(f"Invalid ticket amount: {amount!r}")
    if isinstance(amount, str):
        if not amount.isdigit():
            raise MalformedInputError(f"Invalid ticket amount: {amount!r}")
        return int(amount)
    if not isinstance(amount, int) or amount < 0:
        raise MalformedInputError(f"Invalid ticket amount: {amount!r}")
    return amount


def parse_record(record: Mapping[str, Any]) -> LedgerEntry:
    """
    Build a LedgerEntry from a raw ticket object.

    Args:
        record: dict with 'id', 'account', 'current_type' and 'amount'

    Returns:
        LedgerEntry

    Raises:
        MalformedInputError: On unknown ticket types or bad amounts
    """
    try:
        return LedgerEntry(
            id=str(record['id']),
            account=str(record['account']),
            lock_kind=_lock_kind(str(record['current_type'])),
            amount=_raw_amount(record['amount']),
        )
    except KeyError as exc:
        raise MalformedInputError(f"Ticket record missing field {exc}") from exc


def weigh(entry: LedgerEntry) -> int:
    """Weight of a locked ticket; liquid tickets weigh nothing."""
    if entry.lock_kind == 'liquid':
        return 0
    return entry.amount * MULTIPLIERS[entry.lock_kind]


def tally_weights(entries: Iterable[LedgerEntry]) -> Dict[str, HolderTally]:
    """
    Accumulate the weight and ticket ids of every account.

    Liquid tickets are excluded entirely. Accounts keep first-seen order.

    Args:
        entries: Ledger snapshot

    Returns:
        dict of account id -> HolderTally
    """
    tallies: Dict[str, HolderTally] = {}
    seen = set()
    for entry in entries:
        if entry.lock_kind == 'liquid':
            continue
        if entry.id in seen:
            logger.warning("Duplicate ticket %s skipped", entry.id)
            continue
        seen.add(entry.id)
        tally = tallies.setdefault(entry.account, HolderTally())
        tally.weight += weigh(entry)
        tally.tickets.append(entry.id)
    return tallies


def build_leaderboard(
    tallies: Mapping[str, HolderTally],
    name_resolver: Optional[NameResolver] = None,
) -> List[LeaderboardEntry]:
    """
    Rank holders by weight and give each a disjoint lottery range.

    Each holder's range is [cursor, cursor + round(amount)]; the cursor then
    moves past it by one extra unit so neighbouring ranges never touch.

    Args:
        tallies: Output of tally_weights
        name_resolver: Optional callable mapping account id to a name

    Returns:
        LeaderboardEntry list, heaviest first

    Raises:
        EmptyLeaderboardError: If the total weight is zero
    """
    amounts = {account: Utils.human_readable(t.weight) for account, t in tallies.items()}
    total = sum(amounts.values())
    if not total:
        raise EmptyLeaderboardError("Total ticket weight is zero; nothing to partition")

    ranked = sorted(amounts.items(), key=lambda item: (-item[1], item[0]))

    leaderboard = []
    cursor = 0
    for account, amount in ranked:
        size = Utils.round_int(amount)
        name = name_resolver(account) if name_resolver else None
        leaderboard.append(LeaderboardEntry(
            id=account,
            name=name or UNKNOWN_NAME,
            amount=amount,
            tickets=list(tallies[account].tickets),
            percent=Utils.round5(amount / total * 100),
            range_from=cursor,
            range_to=cursor + size,
        ))
        cursor += size + 1

    logger.info("Leaderboard built: %d holders, %s total weight", len(leaderboard), total)
    return leaderboard
