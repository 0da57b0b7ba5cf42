from .base import BasePreset, PresetOptions, Result, InvalidWeightError, parse_weighted_items
from .nginx import NginxUpstream
from .lvs import LvsRealServers

__all__ = [
    'BasePreset',
    'PresetOptions',
    'Result',
    'InvalidWeightError',
    'parse_weighted_items',
    'NginxUpstream',
    'LvsRealServers'
]
