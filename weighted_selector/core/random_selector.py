import random
from typing import Any, List, Optional, Tuple
from loguru import logger

from .types import SelectorKind, SelectorStats, WeightedEntry

class RandomSelector:
    kind = SelectorKind.RANDOM

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.entries: List[WeightedEntry] = []
        self.sum_of_weights = 0
        self.seed = seed
        self._external_rng = rng
        self.rng = self._new_source()

    def _new_source(self) -> random.Random:
        if self._external_rng is not None:
            return self._external_rng
        return random.Random(self.seed)

    def add(self, item: Any, weight: int) -> None:
        entry = WeightedEntry(item=item, weight=weight)
        self.entries.append(entry)
        self.sum_of_weights += entry.weight

    def next(self) -> Optional[Any]:
        if len(self.entries) <= 1:
            return self.entries[0].item if self.entries else None

        if self.sum_of_weights <= 0:
            return None

        index = self.rng.randrange(self.sum_of_weights)
        for entry in self.entries:
            if entry.weight <= 0:
                continue
            index -= entry.weight
            if index < 0:
                return entry.item

        return self.entries[-1].item

    def all(self) -> List[Tuple[Any, int]]:
        return [(e.item, e.weight) for e in self.entries]

    def remove_all(self) -> None:
        logger.debug(f"[RandomSelector] Removing {len(self.entries)} entries")
        self.entries.clear()
        self.sum_of_weights = 0
        self.rng = self._new_source()

    def reset(self) -> None:
        logger.debug("[RandomSelector] Reinitializing random source")
        self.rng = self._new_source()

    def stats(self) -> SelectorStats:
        eligible = [e.weight for e in self.entries if e.weight > 0]
        return SelectorStats(kind=self.kind, total=len(self.entries), eligible=len(eligible), total_weight=sum(eligible))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return self

    def __next__(self) -> Any:
        item = self.next()
        if item is None:
            raise StopIteration
        return item
