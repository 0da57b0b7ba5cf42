from math import gcd
from typing import Any, List, Optional, Tuple
from loguru import logger

from .types import SelectorKind, SelectorStats, WeightedEntry

class RoundRobinSelector:
    # http://kb.linuxvirtualserver.org/wiki/Weighted_Round-Robin_Scheduling
    kind = SelectorKind.ROUNDROBIN

    def __init__(self):
        self.entries: List[WeightedEntry] = []
        self.gcd = 0
        self.max_weight = 0
        self.i = -1
        self.cw = 0

    def add(self, item: Any, weight: int) -> None:
        entry = WeightedEntry(item=item, weight=weight)

        if entry.weight > 0:
            if self.gcd == 0:
                # first positive weight restarts the cycle
                self.gcd = entry.weight
                self.max_weight = entry.weight
                self.i = -1
                self.cw = 0
                logger.debug(f"[RoundRobinSelector] Cycle seeded with weight {entry.weight}")
            else:
                self.gcd = gcd(self.gcd, entry.weight)
                self.max_weight = max(self.max_weight, entry.weight)

        self.entries.append(entry)

    def next(self) -> Optional[Any]:
        if len(self.entries) <= 1:
            return self.entries[0].item if self.entries else None

        n = len(self.entries)
        while True:
            self.i = (self.i + 1) % n
            if self.i == 0:
                self.cw -= self.gcd
                if self.cw <= 0:
                    self.cw = self.max_weight
                    if self.cw == 0:
                        return None

            entry = self.entries[self.i]
            if entry.weight >= self.cw:
                return entry.item

    def all(self) -> List[Tuple[Any, int]]:
        return [(e.item, e.weight) for e in self.entries]

    def remove_all(self) -> None:
        logger.debug(f"[RoundRobinSelector] Removing {len(self.entries)} entries")
        self.entries.clear()
        self.gcd = 0
        self.max_weight = 0
        self.i = -1
        self.cw = 0

    def reset(self) -> None:
        logger.debug("[RoundRobinSelector] Restarting cycle")
        self.i = -1
        self.cw = 0

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
