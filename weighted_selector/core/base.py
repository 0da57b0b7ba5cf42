from typing import Any, Iterator, List, Optional, Protocol, Tuple, runtime_checkable

from .types import SelectorStats

@runtime_checkable
class WeightedSelector(Protocol):
    def add(self, item: Any, weight: int) -> None:
        ...

    def next(self) -> Optional[Any]:
        ...

    def all(self) -> List[Tuple[Any, int]]:
        ...

    def remove_all(self) -> None:
        ...

    def reset(self) -> None:
        ...

    def stats(self) -> SelectorStats:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[Any]:
        ...
