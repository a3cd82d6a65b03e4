"""
Coefficient tables selecting the grain-size distributions for each dust
material in a given interstellar environment.

Milky Way, R_V = 3.1:
    Weingartner & Draine 2001, ApJ 548, 296, Table 1
    Li & Draine 2001, ApJ 554, 778, Table 3
LMC:
    Weingartner & Draine 2001, ApJ 548, 296, Table 3 (line 2); the PAH modes
    keep the Milky Way shape with 1/6 of its carbon abundance
    (b_C = 1.0e-5 versus 6.0e-5).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Tuple, Union

from ..constants import PAH_CHARGE_FRACTION
from .kernels import dnda_grasil, dnda_pah

__all__ = [
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


class Environment(Enum):
    MILKY_WAY = "MilkyWay"
    LMC = "LMC"

    @classmethod
    def from_name(cls, name: Union[str, "Environment"]) -> "Environment":
        """Resolve an environment from its name ("MilkyWay", "milky_way", "MWY", "LMC")."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("_", "").replace(" ", "")
        if key in ("milkyway", "mwy", "mw"):
            return cls.MILKY_WAY
        if key == "lmc":
            return cls.LMC
        raise ValueError(
            f"Unknown environment: {name!r}. Expected one of {[e.value for e in cls]}"
        )


class MaterialKind(Enum):
    GRAPHITE = "graphite"
    SILICATE = "silicate"
    NEUTRAL_PAH = "neutral_pah"
    IONIZED_PAH = "ionized_pah"

    @classmethod
    def from_name(cls, name: Union[str, "MaterialKind"]) -> "MaterialKind":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown material kind: {name!r}. Expected one of {[m.value for m in cls]}"
            ) from None

    @property
    def is_pah(self) -> bool:
        return self in (MaterialKind.NEUTRAL_PAH, MaterialKind.IONIZED_PAH)


@dataclass(frozen=True)
class GraphiteSilicateParams:
    C: float
    a_t: float      # m
    a_c: float      # m
    alpha: float
    beta: float

    def dnda(self, a):
        return dnda_grasil(a, self.C, self.a_t, self.a_c, self.alpha, self.beta)


@dataclass(frozen=True)
class PAHParams:
    sigma: float
    a0: Tuple[float, float]     # m
    bc: Tuple[float, float]

    def dnda(self, a):
        return dnda_pah(a, self.sigma, self.a0, self.bc)


_GRAPHITE = {
    Environment.MILKY_WAY: GraphiteSilicateParams(
        C=9.99e-12, a_t=0.0107e-6, a_c=0.428e-6, alpha=-1.54, beta=-0.165
    ),
    Environment.LMC: GraphiteSilicateParams(
        C=3.51e-15, a_t=0.0980e-6, a_c=0.641e-6, alpha=-2.99, beta=2.46
    ),
}

_SILICATE = {
    Environment.MILKY_WAY: GraphiteSilicateParams(
        C=1.00e-13, a_t=0.164e-6, a_c=0.1e-6, alpha=-2.21, beta=0.300
    ),
    Environment.LMC: GraphiteSilicateParams(
        C=1.78e-14, a_t=0.184e-6, a_c=0.1e-6, alpha=-2.49, beta=0.345
    ),
}

_PAH = {
    Environment.MILKY_WAY: PAHParams(
        sigma=0.4, a0=(3.5e-10, 30e-10), bc=(4.5e-5, 1.5e-5)
    ),
    Environment.LMC: PAHParams(
        sigma=0.4, a0=(3.5e-10, 30e-10), bc=(0.75e-5, 0.25e-5)
    ),
}

# grain radius ranges in m, independent of environment
_SIZE_RANGES = {
    MaterialKind.GRAPHITE: (0.001e-6, 10.0e-6),
    MaterialKind.SILICATE: (0.001e-6, 10.0e-6),
    MaterialKind.NEUTRAL_PAH: (0.0003548e-6, 0.01e-6),
    MaterialKind.IONIZED_PAH: (0.0003548e-6, 0.01e-6),
}


def graphite_params(environment) -> GraphiteSilicateParams:
    return _GRAPHITE[Environment.from_name(environment)]


def silicate_params(environment) -> GraphiteSilicateParams:
    return _SILICATE[Environment.from_name(environment)]


def neutral_pah_params(environment) -> PAHParams:
    return _PAH[Environment.from_name(environment)]


def ionized_pah_params(environment) -> PAHParams:
    # charge states share one table; the 50/50 split is applied to the density
    return _PAH[Environment.from_name(environment)]


_PARAM_SELECTORS = {
    MaterialKind.GRAPHITE: graphite_params,
    MaterialKind.SILICATE: silicate_params,
    MaterialKind.NEUTRAL_PAH: neutral_pah_params,
    MaterialKind.IONIZED_PAH: ionized_pah_params,
}


def size_range(material) -> Tuple[float, float]:
    """Return (a_min, a_max) in m for a material kind."""
    return _SIZE_RANGES[MaterialKind.from_name(material)]


def make_size_distribution(material, environment) -> Callable:
    """
    Bind the size distribution dn/da(a) of a material in an environment.

    PAH distributions carry the factor PAH_CHARGE_FRACTION, so that the
    neutral and ionized populations together hold the full PAH abundance.
    """
    material = MaterialKind.from_name(material)
    params = _PARAM_SELECTORS[material](environment)

    if material.is_pah:
        def dnda(a):
            return PAH_CHARGE_FRACTION * params.dnda(a)
    else:
        dnda = params.dnda
    return dnda
