"""
Exception hierarchy for the airdrop engine
"""


class AirdropError(RuntimeError):
    """Base class for every failure raised by ticket_airdrop."""


class ConfigError(AirdropError):
    """Invalid configuration value (hash mode, method name, pool, ...)."""


class MalformedInputError(AirdropError, ValueError):
    """Input that cannot be converted without silently coercing it."""


class EmptyLeaderboardError(AirdropError):
    """The leaderboard has no weight, so no range table can be built."""


class NoValidDrawsError(AirdropError):
    """No draw numbers were left to resolve against the leaderboard."""


class UnknownMethodError(ConfigError):
    """A distribution method name that is not in the registry."""


class NodeError(AirdropError):
    """The blockchain node returned an error or an empty result."""


class VerificationError(AirdropError):
    """A published airdrop artifact does not match its recomputation."""
