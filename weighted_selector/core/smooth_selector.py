from typing import Any, List, Optional, Tuple
from loguru import logger

from .types import SelectorKind, SelectorStats, SmoothEntry

class SmoothSelector:
    """Nginx smooth weighted round-robin: weights {5, 1, 1} give a a b a c a a."""
    kind = SelectorKind.SMOOTH

    def __init__(self):
        self.entries: List[SmoothEntry] = []

    def add(self, item: Any, weight: int) -> None:
        self.entries.append(SmoothEntry(item=item, weight=weight))

    def _next_smooth_weighted(self) -> Optional[SmoothEntry]:
        total = 0
        best: Optional[SmoothEntry] = None

        for entry in self.entries:
            if entry.weight <= 0:
                continue
            entry.current_weight += entry.effective_weight
            total += entry.effective_weight
            if entry.effective_weight < entry.weight:
                entry.effective_weight += 1

            if best is None or entry.current_weight > best.current_weight:
                best = entry

        if best is None:
            return None

        best.current_weight -= total
        return best

    def next(self) -> Optional[Any]:
        if len(self.entries) <= 1:
            return self.entries[0].item if self.entries else None

        best = self._next_smooth_weighted()
        return best.item if best else None

    def all(self) -> List[Tuple[Any, int]]:
        return [(e.item, e.weight) for e in self.entries]

    def remove_all(self) -> None:
        logger.debug(f"[SmoothSelector] Removing {len(self.entries)} entries")
        self.entries.clear()

    def reset(self) -> None:
        logger.debug("[SmoothSelector] Resetting current and effective weights")
        for entry in self.entries:
            entry.current_weight = 0
            entry.effective_weight = entry.weight

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
