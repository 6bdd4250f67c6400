"""Environment-backed configuration for an airdrop run."""

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
import os
from typing import Any, Optional, Tuple

from .digest import HASH_MODES
from .distributions import FISH_DEPTHS, DrawOptions, get_method
from .errors import ConfigError
from .resolver import MODES


@dataclass(frozen=True)
class AirdropConfig:
    """Every input of a run besides the signature and the leaderboard."""

    hash_mode: str = 'none'
    methods: Tuple[str, ...] = ('forward',)
    mode: str = 'wraparound'
    reward_pool: Decimal = Decimal(0)
    fish_splinter: bool = False
    fish_depth: str = 'beam'
    node_url: str = 'http://localhost:8090'
    timeout: int = 30

    @property
    def draw_options(self) -> DrawOptions:
        return DrawOptions(fish_splinter=self.fish_splinter, fish_depth=self.fish_depth)

    def validate(self) -> 'AirdropConfig':
        if self.hash_mode not in HASH_MODES:
            raise ConfigError(f"Unsupported hash mode: {self.hash_mode}")
        if not self.methods:
            raise ConfigError("At least one distribution method is required")
        for name in self.methods:
            get_method(name)
        if self.mode not in MODES:
            raise ConfigError(f"Unsupported normalization mode: {self.mode}")
        if self.reward_pool < 0:
            raise ConfigError(f"Reward pool must not be negative: {self.reward_pool}")
        if self.fish_depth not in FISH_DEPTHS:
            raise ConfigError(f"Unsupported fish depth: {self.fish_depth}")
        if self.timeout <= 0:
            raise ConfigError(f"Timeout must be positive: {self.timeout}")
        return self

    def override(self, **changes: Any) -> 'AirdropConfig':
        """Copy with the given fields replaced; None values are ignored."""
        changes = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **changes).validate()

    @classmethod
    def from_env(cls) -> 'AirdropConfig':
        """Load and validate configuration from AIRDROP_* environment variables."""
        defaults = cls()
        return cls(
            hash_mode=_read_str('AIRDROP_HASH_MODE', defaults.hash_mode),
            methods=parse_methods(_read_str('AIRDROP_METHODS', ','.join(defaults.methods))),
            mode=_read_str('AIRDROP_MODE', defaults.mode),
            reward_pool=parse_decimal(_read_str('AIRDROP_REWARD_POOL', str(defaults.reward_pool))),
            fish_splinter=_read_bool('AIRDROP_FISH_SPLINTER', defaults.fish_splinter),
            fish_depth=_read_str('AIRDROP_FISH_DEPTH', defaults.fish_depth),
            node_url=_read_str('AIRDROP_NODE_URL', defaults.node_url),
            timeout=_read_int('AIRDROP_TIMEOUT', defaults.timeout),
        ).validate()


def parse_methods(raw: Optional[str]) -> Optional[Tuple[str, ...]]:
    if raw is None:
        return None
    return tuple(name.strip() for name in raw.split(',') if name.strip())


def parse_decimal(raw: Optional[str]) -> Optional[Decimal]:
    if raw is None:
        return None
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ConfigError(f"Invalid decimal value: {raw}") from exc
    if not value.is_finite():
        raise ConfigError(f"Invalid decimal value: {raw}")
    return value


def _read_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip()


def _read_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {'1', 'true', 'yes', 'on'}:
        return True
    if normalized in {'0', 'false', 'no', 'off'}:
        return False
    raise ConfigError(f"Invalid boolean value for {name}: {raw}")


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"Invalid integer value for {name}: {raw}") from exc
