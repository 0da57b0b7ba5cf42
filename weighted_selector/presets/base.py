import os
import json
from typing import Dict, List, Optional, Tuple, TypeVar, Type, Any
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from ..core.base import WeightedSelector
from ..core.factory import create_selector
from ..core.types import SelectorKind

T = TypeVar('T', bound='BasePreset')

class InvalidWeightError(ValueError):
    def __init__(self, spec: str):
        super().__init__(f"Invalid weight in item spec '{spec}' (expected 'item=<int>')")

class PresetOptions:
    def __init__(
        self,
        env_keys: List[str],
        name: str = 'default',
        kind: SelectorKind = SelectorKind.SMOOTH,
        seed: Optional[int] = None,
        default_weight: int = 1
    ):
        self.env_keys = env_keys
        self.name = name
        self.kind = SelectorKind(kind)
        self.seed = seed
        self.default_weight = default_weight

class Result(BaseModel):
    success: bool
    data: Optional[Any] = Field(default=None)
    error: Optional[Exception] = Field(default=None)

    model_config = ConfigDict(arbitrary_types_allowed=True)

def _to_weight(raw: Any, spec: str) -> int:
    if isinstance(raw, bool):
        raise InvalidWeightError(spec)
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        raise InvalidWeightError(spec) from None

def parse_weighted_items(value: str, default_weight: int = 1) -> List[Tuple[str, int]]:
    """
    Parse an item spec string into ``(item, weight)`` pairs.

    Accepts ``a=5,b=2,c`` (a missing weight means ``default_weight``) or
    JSON: a list of names, a list of ``{"item": ..., "weight": ...}``
    objects, or an object mapping names to weights. Duplicates are kept as
    separate entries.
    """
    value = value.strip()
    if not value:
        return []

    if value.startswith(('[', '{')):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict):
            return [(str(k), _to_weight(v, f"{k}={v}")) for k, v in parsed.items()]
        if isinstance(parsed, list):
            items = []
            for entry in parsed:
                if isinstance(entry, dict):
                    name = str(entry.get('item', '')).strip()
                    weight = entry.get('weight', default_weight)
                    if name:
                        items.append((name, _to_weight(weight, f"{name}={weight}")))
                elif str(entry).strip():
                    items.append((str(entry).strip(), default_weight))
            return items

    items = []
    for spec in value.split(','):
        spec = spec.strip()
        if not spec:
            continue
        name, sep, weight = spec.partition('=')
        name = name.strip()
        if not name:
            continue
        items.append((name, _to_weight(weight, spec) if sep else default_weight))
    return items

class BasePreset:
    _instances: Dict[str, 'BasePreset'] = {}

    def __init__(self, items: List[Tuple[str, int]], options: PresetOptions):
        self.options = options
        self.selector: WeightedSelector = create_selector(options.kind, seed=options.seed)
        for item, weight in items:
            self.selector.add(item, weight)

        logger.info(f"[{options.name}] {options.kind.value} selector initialized with {len(items)} entries")

    @classmethod
    def _parse_items_from_env(cls, env_keys: List[str], default_weight: int = 1) -> List[Tuple[str, int]]:
        for env_name in env_keys:
            val = os.environ.get(env_name, "").strip()
            if val:
                return parse_weighted_items(val, default_weight)
        return []

    @classmethod
    def create_instance(cls: Type[T], preset_class: Type[T], default_options: PresetOptions, overrides: Optional[Dict[str, Any]] = None) -> Result:
        overrides = overrides or {}
        name = overrides.get('name', default_options.name)

        if name in cls._instances:
            return Result(success=True, data=cls._instances[name])

        try:
            opts = PresetOptions(
                env_keys=overrides.get('env_keys', default_options.env_keys),
                name=name,
                kind=overrides.get('kind', default_options.kind),
                seed=overrides.get('seed', default_options.seed),
                default_weight=overrides.get('default_weight', default_options.default_weight)
            )
            items = cls._parse_items_from_env(opts.env_keys, opts.default_weight)
            if not items:
                logger.warning(f"[{name}] No entries found in env vars: {', '.join(opts.env_keys)}. Selector is empty.")

            instance = preset_class(items, opts)
            cls._instances[name] = instance
            return Result(success=True, data=instance)
        except Exception as e:
            return Result(success=False, error=e)

    @classmethod
    def reset_instance(cls, name: str):
        if name in cls._instances:
            del cls._instances[name]

    @classmethod
    def reset_all(cls):
        cls._instances.clear()

    def reload(self) -> int:
        items = self._parse_items_from_env(self.options.env_keys, self.options.default_weight)
        self.selector.remove_all()
        for item, weight in items:
            self.selector.add(item, weight)
        logger.info(f"[{self.options.name}] Reloaded {len(items)} entries")
        return len(items)

    def next(self) -> Optional[str]:
        return self.selector.next()

    def all(self) -> List[Tuple[str, int]]:
        return self.selector.all()

    def reset_selector(self) -> None:
        self.selector.reset()
