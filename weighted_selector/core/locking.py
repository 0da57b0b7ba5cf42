import asyncio
import threading
from typing import Any, List, Optional, Tuple

from .base import WeightedSelector
from .types import SelectorStats

class ThreadSafeSelector:
    """Serializes every call on the wrapped selector behind one thread lock."""
    def __init__(self, selector: WeightedSelector):
        self.selector = selector
        self._lock = threading.Lock()

    def add(self, item: Any, weight: int) -> None:
        with self._lock:
            self.selector.add(item, weight)

    def next(self) -> Optional[Any]:
        with self._lock:
            return self.selector.next()

    def all(self) -> List[Tuple[Any, int]]:
        with self._lock:
            return self.selector.all()

    def remove_all(self) -> None:
        with self._lock:
            self.selector.remove_all()

    def reset(self) -> None:
        with self._lock:
            self.selector.reset()

    def stats(self) -> SelectorStats:
        with self._lock:
            return self.selector.stats()

    def __len__(self) -> int:
        with self._lock:
            return len(self.selector)

    def __iter__(self):
        return self

    def __next__(self) -> Any:
        item = self.next()
        if item is None:
            raise StopIteration
        return item

class AsyncSelector:
    """
    Coroutine-facing wrapper

    The wrapped selector never suspends, so the lock only matters when
    callers interleave ``add``/``reset`` with picks across tasks.
    """
    def __init__(self, selector: WeightedSelector):
        self.selector = selector
        self._lock = asyncio.Lock()

    async def add(self, item: Any, weight: int) -> None:
        async with self._lock:
            self.selector.add(item, weight)

    async def next(self) -> Optional[Any]:
        async with self._lock:
            return self.selector.next()

    async def all(self) -> List[Tuple[Any, int]]:
        async with self._lock:
            return self.selector.all()

    async def remove_all(self) -> None:
        async with self._lock:
            self.selector.remove_all()

    async def reset(self) -> None:
        async with self._lock:
            self.selector.reset()

    async def stats(self) -> SelectorStats:
        async with self._lock:
            return self.selector.stats()

    def __len__(self) -> int:
        return len(self.selector)

    def __aiter__(self):
        return self

    async def __anext__(self) -> Any:
        item = await self.next()
        if item is None:
            raise StopAsyncIteration
        return item
