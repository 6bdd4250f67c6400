"""
ticket_airdrop

Deterministic, publicly verifiable airdrop lottery over BitShares tickets.

Features:
- Lock-weighted leaderboard with disjoint lottery ranges
- Draw numbers derived only from a block's witness signature
- Numeric and 3-D geometric distribution methods
- Winner resolution with proportional rewards
- Recomputation-based verification of published results
"""

__version__ = "1.0.0"

from .airdrop import AirdropEngine, verify_airdrop
from .client import BitsharesClient
from .config import AirdropConfig
from .digest import digitize
from .distributions import METHODS, DrawOptions, generate_draws
from .errors import (
    AirdropError,
    ConfigError,
    EmptyLeaderboardError,
    MalformedInputError,
    NoValidDrawsError,
    NodeError,
    UnknownMethodError,
    VerificationError,
)
from .ledger import build_leaderboard, parse_record, tally_weights
from .models import (
    AirdropResult,
    LeaderboardEntry,
    LedgerEntry,
    WinnerRecord,
)
from .resolver import resolve_winners
from .utils import Utils

__all__ = [
    "AirdropEngine",
    "verify_airdrop",
    "BitsharesClient",
    "AirdropConfig",
    "digitize",
    "METHODS",
    "DrawOptions",
    "generate_draws",
    "AirdropError",
    "ConfigError",
    "EmptyLeaderboardError",
    "MalformedInputError",
    "NoValidDrawsError",
    "NodeError",
    "UnknownMethodError",
    "VerificationError",
    "build_leaderboard",
    "parse_record",
    "tally_weights",
    "AirdropResult",
    "LeaderboardEntry",
    "LedgerEntry",
    "WinnerRecord",
    "resolve_winners",
    "Utils",
]
