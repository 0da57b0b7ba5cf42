from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from .base import WeightedSelector
from .random_selector import RandomSelector
from .roundrobin_selector import RoundRobinSelector
from .smooth_selector import SmoothSelector
from .types import SelectorKind

class UnknownSelectorError(ValueError):
    def __init__(self, kind: Any):
        choices = ', '.join(k.value for k in SelectorKind)
        super().__init__(f"Unknown selector kind '{kind}' (expected one of: {choices})")

def create_selector(kind: Union[SelectorKind, str] = SelectorKind.SMOOTH, seed: Optional[int] = None) -> WeightedSelector:
    try:
        kind = SelectorKind(kind)
    except ValueError:
        raise UnknownSelectorError(kind) from None

    if kind == SelectorKind.RANDOM:
        return RandomSelector(seed=seed)
    if kind == SelectorKind.ROUNDROBIN:
        return RoundRobinSelector()
    return SmoothSelector()

def build_selector(
        items: Union[Mapping[Any, int], Iterable[Tuple[Any, int]]],
        kind: Union[SelectorKind, str] = SelectorKind.SMOOTH,
        seed: Optional[int] = None
) -> WeightedSelector:
    selector = create_selector(kind, seed=seed)
    pairs = items.items() if isinstance(items, Mapping) else items
    for item, weight in pairs:
        selector.add(item, weight)
    return selector
