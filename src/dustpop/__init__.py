"""
dustpop: interstellar dust grain-size distributions and grain populations.
"""

from .composition import GrainComposition, get_composition, list_compositions, register_composition
from .size_distribution import Environment, MaterialKind, make_size_distribution, size_range
from .population import GrainPopulation, DustMix, DustMixBuilder, build_dust_mix
from .population.factory.weingartner_draine import add_weingartner_draine_populations

__all__ = [
    "GrainComposition",
    "get_composition",
    "list_compositions",
    "register_composition",
    "Environment",
    "MaterialKind",
    "make_size_distribution",
    "size_range",
    "GrainPopulation",
    "DustMix",
    "DustMixBuilder",
    "build_dust_mix",
    "add_weingartner_draine_populations",
]
