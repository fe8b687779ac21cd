
import itertools
import logging
import uuid
from typing import Any, Iterable, Iterator, List, Optional, Tuple
from denserank.context import Rank, RankedItem
from denserank.errors import InconsistentKeyError, SourceTooLargeError
from denserank.ranker.base import KeyFunc
from denserank.observability.logging import log_ranking_result

logger = logging.getLogger("denserank.ranker")

class RankedBy:
    """
    ソート済みの (key, item) 列を前から走査し、Dense Rankを付与するイテレータ。
    キーが直前と異なる場合のみ順位を1つ進める。
    """
    def __init__(self, keyed_items: List[Tuple[Any, Any]], check_consistency: bool = False):
        self._iter = iter(keyed_items)
        self._check_consistency = check_consistency
        self._rank: Optional[Rank] = None
        self._prev_key: Any = None
        self._position = 0

    def __iter__(self) -> "RankedBy":
        return self

    def __next__(self) -> RankedItem:
        key, item = next(self._iter)

        if self._rank is None:
            self._rank = Rank.first()
        else:
            if self._check_consistency:
                _check_adjacent_keys(self._position, self._prev_key, key)
            if not key == self._prev_key:
                self._rank = self._rank.next()

        self._prev_key = key
        self._position += 1
        return RankedItem(self._rank, item)

def _check_adjacent_keys(position: int, prev_key: Any, key: Any) -> None:
    equal = key == prev_key
    ordered = prev_key < key or key < prev_key
    if equal == ordered:
        raise InconsistentKeyError(position, prev_key, key)

class DenseRanker:
    def __init__(
        self,
        max_items: Optional[int] = None,
        check_consistency: bool = False,
        log_results: bool = False,
    ):
        if max_items is not None and max_items < 0:
            raise ValueError(f"max_items must be >= 0, got {max_items}")
        self.max_items = max_items
        self.check_consistency = check_consistency
        self.log_results = log_results

    def rank_by(self, source: Iterable[Any], key_fn: KeyFunc) -> RankedBy:
        """
        sourceを全件読み込み、key_fnのキーで安定ソートした上で
        Dense Rankを付与するイテレータを返す。

        読み込みとソートはこの呼び出しの中で完了する。順位付けは
        返されたイテレータを進めた分だけ行われる。

        Args:
            source: 有限の要素列 (一度だけ消費される)
            key_fn: 要素からキーを取り出す関数。キーは < と == をサポートすること

        Raises:
            SourceTooLargeError: max_items を超える要素が来た場合
        """
        items = self._materialize(source)

        # key_fn is called exactly once per item
        keys = [key_fn(item) for item in items]
        order = sorted(range(len(items)), key=keys.__getitem__)

        logger.debug("materialized %d items for ranking", len(items))
        return RankedBy(
            [(keys[i], items[i]) for i in order],
            check_consistency=self.check_consistency,
        )

    def rank(self, source: Iterable[Any], key_fn: KeyFunc) -> List[RankedItem]:
        ranked = list(self.rank_by(source, key_fn))

        distinct = int(ranked[-1].rank) if ranked else 0
        logger.debug("ranked %d items into %d distinct ranks", len(ranked), distinct)

        if self.log_results:
            log_ranking_result(str(uuid.uuid4()), ranked)
        return ranked

    def _materialize(self, source: Iterable[Any]) -> List[Any]:
        if self.max_items is None:
            return list(source)

        # Read one past the limit so an oversized (or infinite) source is detected
        items = list(itertools.islice(source, self.max_items + 1))
        if len(items) > self.max_items:
            raise SourceTooLargeError(self.max_items)
        return items

_default_ranker = DenseRanker()

def rank_by(source: Iterable[Any], key_fn: KeyFunc) -> RankedBy:
    return _default_ranker.rank_by(source, key_fn)
