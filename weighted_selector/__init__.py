from .core.base import WeightedSelector
from .core.types import WeightedEntry, SmoothEntry, SelectorKind, SelectorStats
from .core.random_selector import RandomSelector
from .core.roundrobin_selector import RoundRobinSelector
from .core.smooth_selector import SmoothSelector
from .core.locking import ThreadSafeSelector, AsyncSelector
from .core.factory import create_selector, build_selector, UnknownSelectorError

__all__ = [
    'WeightedSelector',
    'WeightedEntry',
    'SmoothEntry',
    'SelectorKind',
    'SelectorStats',
    'RandomSelector',
    'RoundRobinSelector',
    'SmoothSelector',
    'ThreadSafeSelector',
    'AsyncSelector',
    'create_selector',
    'build_selector',
    'UnknownSelectorError'
]
