
from typing import Any

class RankingError(Exception):
    pass

class SourceTooLargeError(RankingError):
    def __init__(self, max_items: int):
        self.max_items = max_items
        super().__init__(f"source yielded more than max_items={max_items} items")

class InconsistentKeyError(RankingError):
    """
    隣接するキーで == と < の判定が食い違った場合に送出される。
    (check_consistency=True の時のみ)
    """
    def __init__(self, position: int, previous_key: Any, key: Any):
        self.position = position
        self.previous_key = previous_key
        self.key = key
        super().__init__(
            f"key ordering and equality disagree at position {position}: "
            f"{previous_key!r} vs {key!r}"
        )
