"""
Dust mix of graphite, silicate and PAH grains following the size
distributions of Weingartner & Draine (2001) and Li & Draine (2001), for
either the Milky Way (R_V = 3.1) or the LMC.

Config keys:
  - environment: "MilkyWay" (default) or "LMC"
  - N_graphite_sizes, N_silicate_sizes, N_PAH_sizes: number of size bins per
    material (default 5); N_PAH_sizes applies to both neutral and ionized PAHs
  - composition_modifications: {composition name: {field: value}}
"""
from __future__ import annotations

import warnings
from typing import Any, Dict, Mapping, Optional

from .registry import register
from ..base import DustMix
from ...composition.registry import get_composition
from ...size_distribution.environment import (
    Environment,
    MaterialKind,
    make_size_distribution,
    size_range,
)
from ...utilities import get_number

DEFAULT_NUM_SIZES = 5

# order in which the materials are added to the mix
MATERIAL_ORDER = (
    MaterialKind.GRAPHITE,
    MaterialKind.SILICATE,
    MaterialKind.NEUTRAL_PAH,
    MaterialKind.IONIZED_PAH,
)

COMPOSITION_NAMES = {
    MaterialKind.GRAPHITE: "Draine_Graphite",
    MaterialKind.SILICATE: "Draine_Silicate",
    MaterialKind.NEUTRAL_PAH: "Draine_Neutral_PAH",
    MaterialKind.IONIZED_PAH: "Draine_Ionized_PAH",
}

_CONFIG_KEYS = {
    "type",
    "environment",
    "N_graphite_sizes",
    "N_silicate_sizes",
    "N_PAH_sizes",
    "composition_modifications",
}


def _normalize_modifications(composition_modifications):
    """Key composition overrides by upper-cased name, rejecting unknown names."""
    known = {name.upper() for name in COMPOSITION_NAMES.values()}
    mods = {}
    for key, overrides in dict(composition_modifications or {}).items():
        upper = str(key).upper()
        if upper not in known:
            raise ValueError(
                f"composition_modifications refers to unknown composition {key!r}. "
                f"Expected one of {list(COMPOSITION_NAMES.values())}"
            )
        mods[upper] = dict(overrides)
    return mods


def add_weingartner_draine_populations(
    dust_mix,
    environment,
    n_graphite: int,
    n_silicate: int,
    n_pah: int,
    composition_modifications: Optional[Mapping[str, Mapping[str, Any]]] = None,
):
    """
    Register the graphite, silicate, neutral PAH and ionized PAH populations
    (in that order) with `dust_mix` through its add_populations() method.

    Each material gets a freshly constructed composition; the dust mix takes
    ownership of it. Calling this twice on the same mix adds the populations
    twice.
    """
    environment = Environment.from_name(environment)
    mods = _normalize_modifications(composition_modifications)
    counts = {
        MaterialKind.GRAPHITE: n_graphite,
        MaterialKind.SILICATE: n_silicate,
        MaterialKind.NEUTRAL_PAH: n_pah,
        MaterialKind.IONIZED_PAH: n_pah,
    }

    for material in MATERIAL_ORDER:
        name = COMPOSITION_NAMES[material]
        composition = get_composition(name, **mods.get(name.upper(), {}))
        a_min, a_max = size_range(material)
        dnda = make_size_distribution(material, environment)
        dust_mix.add_populations(composition, a_min, a_max, dnda, counts[material])


def _get_count(config: Dict[str, Any], key: str) -> int:
    value = get_number(config.get(key, DEFAULT_NUM_SIZES))
    if value != int(value):
        raise ValueError(f"{key} must be a whole number, got {config[key]!r}")
    return int(value)


@register("weingartner_draine")
def build(config: Dict[str, Any]) -> DustMix:
    unknown = sorted(set(config) - _CONFIG_KEYS)
    if unknown:
        warnings.warn(
            f"weingartner_draine ignores unrecognized config keys: {unknown}", UserWarning
        )

    dust_mix = DustMix()
    add_weingartner_draine_populations(
        dust_mix,
        config.get("environment", Environment.MILKY_WAY),
        n_graphite=_get_count(config, "N_graphite_sizes"),
        n_silicate=_get_count(config, "N_silicate_sizes"),
        n_pah=_get_count(config, "N_PAH_sizes"),
        composition_modifications=config.get("composition_modifications"),
    )
    return dust_mix
