from __future__ import annotations

from dataclasses import fields, replace
from typing import Dict, List

from ..data import open_dataset
from .base import GrainComposition

_DATA_FILE = "grain_compositions.dat"

_registry: Dict[str, GrainComposition] = {}
_defaults_loaded = False


def _parse_float(token: str) -> float:
    # data files use Fortran exponents ("2.24d3")
    return float(token.replace("d", "e").replace("D", "e"))


def _load_defaults():
    global _defaults_loaded
    if _defaults_loaded:
        return
    with open_dataset(_DATA_FILE) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            name, density, optical, enthalpy = line.split()[:4]
            _registry.setdefault(
                name.upper(),
                GrainComposition(
                    name=name,
                    bulk_density=_parse_float(density),
                    optical_resource=optical,
                    enthalpy_resource=enthalpy,
                ),
            )
    _defaults_loaded = True


def register_composition(composition: GrainComposition):
    """Add or replace a composition in the registry."""
    _load_defaults()
    _registry[composition.name.upper()] = composition


def list_compositions() -> List[str]:
    _load_defaults()
    return [comp.name for comp in _registry.values()]


def get_composition(name: str, **modifications) -> GrainComposition:
    """
    Return a new GrainComposition instance for `name` (case-insensitive).

    Keyword arguments override fields of the registered record, e.g.
    get_composition("Draine_Silicate", bulk_density=3.5e3).
    """
    _load_defaults()
    key = str(name).upper()
    if key not in _registry:
        raise ValueError(
            f"Unknown grain composition: {name!r}. Available: {list_compositions()}"
        )
    allowed = {f.name for f in fields(GrainComposition)} - {"name"}
    unknown = sorted(set(modifications) - allowed)
    if unknown:
        raise ValueError(f"Unknown composition fields for {name}: {unknown}")
    return replace(_registry[key], **modifications)
