
from typing import Optional
from denserank.config import RankingConfig
from denserank.ranker.dense import DenseRanker

def get_ranker(config: Optional[RankingConfig] = None) -> DenseRanker:
    """
    Factory function to build a DenseRanker from a RankingConfig.

    Args:
        config (Optional[RankingConfig]): Options fetched via ConfigManager.
            Defaults (no limit, no checks, no result logging) when None.

    Returns:
        DenseRanker: A ranker configured with the given options.
    """
    if config is None:
        config = RankingConfig()

    return DenseRanker(
        max_items=config.max_items,
        check_consistency=config.check_consistency,
        log_results=config.log_results,
    )
