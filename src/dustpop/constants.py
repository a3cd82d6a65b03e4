"""
Physical constants used by the grain-size distribution kernels (SI units).
"""

MASS_CARBON_ATOM = 1.9944e-26     # kg
DENSITY_GRAPHITE = 2.24e3         # kg/m^3
RADIUS_MIN_PAH = 3.5e-10          # m, lower PAH radius in the lognormal normalization

# fraction of PAH grains in each charge state (neutral / ionized)
PAH_CHARGE_FRACTION = 0.5

__all__ = [
    "MASS_CARBON_ATOM",
    "DENSITY_GRAPHITE",
    "RADIUS_MIN_PAH",
    "PAH_CHARGE_FRACTION",
]
