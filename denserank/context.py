
from dataclasses import dataclass
from typing import Any, NamedTuple

@dataclass(frozen=True, order=True)
class Rank:
    """
    1始まりの順位。値で比較・ソートできる。
    """
    value: int

    def __post_init__(self):
        if self.value < 1:
            raise ValueError(f"Rank must be >= 1, got {self.value}")

    @classmethod
    def first(cls) -> "Rank":
        return cls(1)

    def next(self) -> "Rank":
        return Rank(self.value + 1)

    def __int__(self) -> int:
        return self.value

class RankedItem(NamedTuple):
    rank: Rank
    item: Any
