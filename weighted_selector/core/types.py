from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field, model_validator

class SelectorKind(str, Enum):
    RANDOM = 'random'
    ROUNDROBIN = 'roundrobin'
    SMOOTH = 'smooth'

class WeightedEntry(BaseModel):
    item: Any
    weight: int

class SmoothEntry(WeightedEntry):
    current_weight: int = Field(default=0)
    effective_weight: Optional[int] = Field(default=None)

    @model_validator(mode='after')
    def _start_at_nominal(self) -> 'SmoothEntry':
        if self.effective_weight is None:
            self.effective_weight = self.weight
        return self

class SelectorStats(BaseModel):
    kind: SelectorKind
    total: int
    eligible: int
    total_weight: int
