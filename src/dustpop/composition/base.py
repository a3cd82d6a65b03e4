from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class GrainComposition:
    """Material of a dust grain population.

    Attributes
    ----------
    name : str
        Composition identifier, e.g. "Draine_Graphite".
    bulk_density : float
        Mass density of the grain material [kg/m^3].
    optical_resource : str
        Name of the tabulated optical properties (absorption/scattering
        efficiencies) for this material.
    enthalpy_resource : str
        Name of the tabulated specific enthalpies for this material.
    """
    name: str
    bulk_density: Optional[float] = None
    optical_resource: Optional[str] = None
    enthalpy_resource: Optional[str] = None

    def __post_init__(self):
        if self.bulk_density is not None:
            self.bulk_density = float(self.bulk_density)
            if not self.bulk_density > 0.0:
                raise ValueError(
                    f"bulk_density of {self.name} must be > 0, got {self.bulk_density}"
                )

    def get_grain_mass(self, a):
        """Mass [kg] of a spherical grain of radius a [m]."""
        if self.bulk_density is None:
            raise ValueError(f"{self.name} has no bulk_density")
        return 4.0 / 3.0 * np.pi * np.power(a, 3) * self.bulk_density
