from typing import Dict, Optional, Any
from .base import BasePreset, PresetOptions, Result
from ..core.types import SelectorKind

class NginxUpstream(BasePreset):
    NAME = 'nginx'

    @staticmethod
    def _get_default_options() -> PresetOptions:
        return PresetOptions(
            env_keys=['NGINX_UPSTREAM', 'UPSTREAM_SERVERS'],
            name=NginxUpstream.NAME,
            kind=SelectorKind.SMOOTH
        )

    @classmethod
    def get_instance(cls, overrides: Optional[Dict[str, Any]] = None) -> Result:
        return cls.create_instance(cls, cls._get_default_options(), overrides)

    @classmethod
    def reset(cls):
        cls.reset_instance(cls.NAME)
