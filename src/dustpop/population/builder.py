from __future__ import annotations

from typing import Any, Dict

from .base import DustMix
from .factory.registry import discover_dust_mix_types


class DustMixBuilder:
    """Build a DustMix from a config dict dispatched on its 'type' key."""

    def __init__(self, config: Dict[str, Any]):
        self.config = dict(config)

    def build(self) -> DustMix:
        type_name = self.config.get("type")
        if not type_name:
            raise ValueError("Config must include a 'type' key.")
        types = discover_dust_mix_types()
        if type_name not in types:
            raise ValueError(
                f"Unknown dust mix type: {type_name}. Available: {sorted(types)}"
            )
        return types[type_name](self.config)


def build_dust_mix(config: Dict[str, Any]) -> DustMix:
    return DustMixBuilder(config).build()
