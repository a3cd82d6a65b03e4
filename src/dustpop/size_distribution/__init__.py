"""
Grain-size distribution kernels and their environment-specific coefficients.
"""

from .kernels import dnda_grasil, dnda_pah, pah_normalization
from .environment import (
    Environment,
    MaterialKind,
    GraphiteSilicateParams,
    PAHParams,
    graphite_params,
    silicate_params,
    neutral_pah_params,
    ionized_pah_params,
    size_range,
    make_size_distribution,
)

__all__ = [
    "dnda_grasil",
    "dnda_pah",
    "pah_normalization",
    "Environment",
    "MaterialKind",
    "GraphiteSilicateParams",
    "PAHParams",
    "graphite_params",
    "silicate_params",
    "neutral_pah_params",
    "ionized_pah_params",
    "size_range",
    "make_size_distribution",
]
