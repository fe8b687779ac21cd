
import json
import logging
from typing import Any, List
from denserank.context import RankedItem

logger = logging.getLogger("denserank")
logger.setLevel(logging.INFO)
# Handler設定は実行環境に依存するため、ここでは標準出力への出力のみを想定
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter('%(message)s'))
logger.addHandler(handler)

def _loggable(item: Any) -> Any:
    # dict keys and circular references are not covered by json.dumps(default=str)
    try:
        json.dumps(item)
    except (TypeError, ValueError):
        return str(item)
    return item

def log_ranking_result(ranking_id: str, ranked_items: List[RankedItem]):
    """
    順位付け結果を構造化ログ(JSON)として出力する。
    JSON化できない要素は str() で文字列化する。
    """

    log_data = {
        "event": "ranking_generated",
        "ranking_id": ranking_id,
        "item_count": len(ranked_items),
        "distinct_ranks": len({ranked.rank for ranked in ranked_items}),
        "items": [
            {
                "position": i + 1,
                "rank": int(ranked.rank),
                "item": _loggable(ranked.item),
            }
            for i, ranked in enumerate(ranked_items)
        ]
    }

    logger.info(json.dumps(log_data))
