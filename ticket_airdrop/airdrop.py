"""
Airdrop pipeline: signature + leaderboard -> published result
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .config import AirdropConfig
from .digest import digitize
from .distributions import generate_draws
from .errors import VerificationError
from .models import AirdropResult, LeaderboardEntry
from .resolver import resolve_winners

logger = logging.getLogger(__name__)


class AirdropEngine:
    """
    Runs the lottery for one configuration.

    Example:
        >>> engine = AirdropEngine(AirdropConfig(methods=('forward', 'cubed')))
        >>> result = engine.run(signature, leaderboard, block_number=123)
        >>> print(result.to_dict()['result'])
    """

    def __init__(self, config: Optional[AirdropConfig] = None):
        self.config = (config or AirdropConfig()).validate()

    def draws(self, signature: str) -> List[int]:
        """
        Draw numbers a signature yields under this configuration.

        Args:
            signature: Raw witness signature

        Returns:
            Pooled draw numbers, in method order, duplicates kept
        """
        stream = digitize(signature, self.config.hash_mode)
        return generate_draws(stream, self.config.methods, self.config.draw_options)

    def run(
        self,
        signature: str,
        leaderboard: Sequence[LeaderboardEntry],
        block_number: Optional[int] = None,
    ) -> AirdropResult:
        """
        Select the reward recipients for a block.

        Args:
            signature: Witness signature of the block
            leaderboard: Range table from build_leaderboard
            block_number: Block the signature was taken from

        Returns:
            AirdropResult ready to publish
        """
        draws = self.draws(signature)
        winners = resolve_winners(
            draws, leaderboard, self.config.mode, self.config.reward_pool,
        )
        total_draws = len(set(draws))
        logger.info("Block %s: %d unique draws, %d winners",
                    block_number, total_draws, len(winners))
        return AirdropResult(
            result=winners,
            block_number=block_number,
            generation_methods=list(self.config.methods),
            total_distributed=self.config.reward_pool,
            hash_mode=self.config.hash_mode,
            mode=self.config.mode,
            total_draws=total_draws,
            fish_splinter=self.config.fish_splinter,
            fish_depth=self.config.fish_depth,
        )


def verify_airdrop(
    artifact: Union[AirdropResult, Mapping[str, Any]],
    signature: str,
    leaderboard: Sequence[LeaderboardEntry],
    config: Optional[AirdropConfig] = None,
) -> Dict[str, Any]:
    """
    Recompute a published airdrop and compare it with the artifact.

    Every draw setting recorded in the artifact (methods, hash mode,
    normalization mode, reward pool, fish options) takes precedence over
    the ones in `config`.

    Args:
        artifact: AirdropResult or its dict form
        signature: Witness signature of the artifact's block
        leaderboard: Leaderboard the airdrop was drawn against
        config: Base configuration (node settings)

    Returns:
        dict summary of the verified run

    Raises:
        VerificationError: On the first field that differs
    """
    published = artifact if isinstance(artifact, AirdropResult) else AirdropResult.from_dict(dict(artifact))
    base = config or AirdropConfig()
    rerun_config = base.override(
        hash_mode=published.hash_mode,
        methods=tuple(published.generation_methods),
        mode=published.mode,
        reward_pool=published.total_distributed,
        fish_splinter=published.fish_splinter,
        fish_depth=published.fish_depth,
    )
    recomputed = AirdropEngine(rerun_config).run(signature, leaderboard, published.block_number)

    if recomputed.total_draws != published.total_draws:
        raise VerificationError(
            f"Draw count mismatch: artifact={published.total_draws} recomputed={recomputed.total_draws}"
        )
    expected = {record.id: record for record in published.result}
    actual = {record.id: record for record in recomputed.result}
    if set(expected) != set(actual):
        raise VerificationError(
            f"Winner mismatch: artifact={sorted(expected)} recomputed={sorted(actual)}"
        )
    for winner_id, record in actual.items():
        if record != expected[winner_id]:
            raise VerificationError(f"Winner {winner_id} differs from recomputation")

    return {
        'ok': True,
        'block_number': published.block_number,
        'winners': len(actual),
        'total_draws': recomputed.total_draws,
    }
