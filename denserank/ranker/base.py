
from typing import Any, Iterable, Iterator, Protocol, runtime_checkable
from denserank.context import RankedItem

class KeyFunc(Protocol):
    def __call__(self, item: Any) -> Any:
        ...

@runtime_checkable
class Ranker(Protocol):
    def rank_by(self, source: Iterable[Any], key_fn: KeyFunc) -> Iterator[RankedItem]:
        """
        sourceをkey_fnのキーで並べ替え、(Rank, item) を順に返す
        """
        ...
