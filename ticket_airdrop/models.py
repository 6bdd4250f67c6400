"""
Data models for the airdrop leaderboard and results
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional

from .utils import Utils

LockKind = Literal['liquid', 'lock_180', 'lock_360', 'lock_720', 'lock_forever']
NormalizationMode = Literal['wraparound', 'strict']


@dataclass(frozen=True)
class LedgerEntry:
    """One ticket record from the ledger snapshot"""
    id: str
    account: str
    lock_kind: LockKind
    amount: int


@dataclass
class HolderTally:
    """Accumulated weight of one account"""
    weight: int = 0
    tickets: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class LeaderboardEntry:
    """Ranked ticket holder with its lottery range"""
    id: str
    name: str
    amount: Decimal
    tickets: List[str]
    percent: Decimal
    range_from: int
    range_to: int

    def contains(self, number: int) -> bool:
        return self.range_from <= number <= self.range_to

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'amount': Utils.format_amount(self.amount),
            'name': self.name,
            'tickets': list(self.tickets),
            'percent': Utils.format_amount(self.percent),
            'range': {'from': self.range_from, 'to': self.range_to},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LeaderboardEntry':
        return cls(
            id=data['id'],
            name=data.get('name') or '???',
            amount=Utils.round5(str(data['amount'])),
            tickets=list(data.get('tickets', [])),
            percent=Utils.round5(str(data['percent'])),
            range_from=int(data['range']['from']),
            range_to=int(data['range']['to']),
        )


@dataclass(frozen=True)
class WinnerRecord:
    """Lottery outcome for one leaderboard entry"""
    id: str
    name: str
    numbers: List[int]
    count: int
    percent: Decimal
    reward: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'numbers': list(self.numbers),
            'qty': self.count,
            'percent': Utils.format_amount(self.percent),
            'reward': Utils.format_amount(self.reward),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WinnerRecord':
        return cls(
            id=data['id'],
            name=data.get('name') or '???',
            numbers=[int(n) for n in data['numbers']],
            count=int(data['qty']),
            percent=Utils.round5(str(data['percent'])),
            reward=Utils.round5(str(data['reward'])),
        )


@dataclass(frozen=True)
class AirdropResult:
    """Published audit artifact of one airdrop run"""
    result: List[WinnerRecord]
    block_number: Optional[int]
    generation_methods: List[str]
    total_distributed: Decimal
    hash_mode: str = 'none'
    mode: NormalizationMode = 'wraparound'
    total_draws: int = 0
    fish_splinter: bool = False
    fish_depth: str = 'beam'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'result': [record.to_dict() for record in self.result],
            'block_number': self.block_number,
            'generation_methods': list(self.generation_methods),
            'total_distributed': Utils.format_amount(self.total_distributed),
            'hash_mode': self.hash_mode,
            'mode': self.mode,
            'total_draws': self.total_draws,
            'fish_splinter': self.fish_splinter,
            'fish_depth': self.fish_depth,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AirdropResult':
        return cls(
            result=[WinnerRecord.from_dict(r) for r in data['result']],
            block_number=data.get('block_number'),
            generation_methods=list(data['generation_methods']),
            total_distributed=Utils.round5(str(data['total_distributed'])),
            hash_mode=data.get('hash_mode', 'none'),
            mode=data.get('mode', 'wraparound'),
            total_draws=int(data.get('total_draws', 0)),
            fish_splinter=bool(data.get('fish_splinter', False)),
            fish_depth=data.get('fish_depth', 'beam'),
        )
