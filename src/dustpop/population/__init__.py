"""
Grain populations and the builders that assemble them into dust mixes.
"""

from .base import GrainPopulation, DustMix
from .builder import DustMixBuilder, build_dust_mix

__all__ = ["GrainPopulation", "DustMix", "DustMixBuilder", "build_dust_mix"]
