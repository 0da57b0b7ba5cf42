from typing import Dict, Optional, Any
from .base import BasePreset, PresetOptions, Result
from ..core.types import SelectorKind

class LvsRealServers(BasePreset):
    NAME = 'lvs'

    @staticmethod
    def _get_default_options() -> PresetOptions:
        return PresetOptions(
            env_keys=['LVS_REAL_SERVERS', 'UPSTREAM_SERVERS'],
            name=LvsRealServers.NAME,
            kind=SelectorKind.ROUNDROBIN
        )

    @classmethod
    def get_instance(cls, overrides: Optional[Dict[str, Any]] = None) -> Result:
        return cls.create_instance(cls, cls._get_default_options(), overrides)

    @classmethod
    def reset(cls):
        cls.reset_instance(cls.NAME)
