from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

import numpy as np

from ..composition.base import GrainComposition
from ..utilities import integrate_in_ln, log_edges


@dataclass
class GrainPopulation:
    """One size bin of a dust material.

    Attributes
    ----------
    composition : GrainComposition
        Material of every grain in the bin.
    a_min, a_max : float
        Radius range of the bin [m]; a grain belongs to the bin when
        a_min <= a < a_max.
    dnda : callable
        Size distribution dn/da(a) [m^-1 per H nucleus].
    """
    composition: GrainComposition
    a_min: float
    a_max: float
    dnda: Callable

    def contains(self, a):
        a = np.asarray(a, dtype=float)
        return (a >= self.a_min) & (a < self.a_max)

    def get_number_per_H(self) -> float:
        """Number of grains per H nucleus in the bin."""
        return integrate_in_ln(self.dnda, self.a_min, self.a_max)

    def get_mass_per_H(self) -> float:
        """Dust mass per H nucleus in the bin [kg]."""
        return integrate_in_ln(
            lambda a: self.composition.get_grain_mass(a) * self.dnda(a),
            self.a_min,
            self.a_max,
        )

    def get_mean_radius(self) -> float:
        """Number-weighted mean grain radius [m]; NaN for an empty bin."""
        N = self.get_number_per_H()
        if N <= 0.0:
            return np.nan
        return integrate_in_ln(lambda a: a * self.dnda(a), self.a_min, self.a_max) / N


@dataclass
class DustMix:
    """Ordered collection of grain populations making up a dust model."""
    populations: List[GrainPopulation] = field(default_factory=list)

    def add_population(self, population: GrainPopulation):
        self.populations.append(population)

    def add_populations(self, composition, a_min, a_max, dnda, n_sizes):
        """
        Discretize the size distribution `dnda` over [a_min, a_max] into
        `n_sizes` logarithmically equal bins, each added as a GrainPopulation
        sharing `composition`.

        Every bin is added, including bins where `dnda` evaluates to 0.0
        throughout (e.g. where the exponential cutoff of the graphite and
        silicate distributions underflows). Such populations hold zero grains
        and zero mass, and their get_mean_radius() is NaN.
        """
        if isinstance(n_sizes, bool) or not isinstance(n_sizes, (int, np.integer)):
            raise ValueError(f"n_sizes must be an integer, got {n_sizes!r}")
        if n_sizes < 1:
            raise ValueError(f"n_sizes must be >= 1, got {n_sizes}")
        a_min = float(a_min)
        a_max = float(a_max)
        if not (a_min > 0.0 and a_max > a_min):
            raise ValueError(
                f"Invalid size range [{a_min}, {a_max}]: need 0 < a_min < a_max"
            )

        edges = log_edges(a_min, a_max, int(n_sizes))

        values = np.array([dnda(float(a)) for a in edges], dtype=float)
        if not np.all(np.isfinite(values)):
            bad = edges[~np.isfinite(values)]
            raise ValueError(
                f"Size distribution for {composition.name} is not finite at a = {bad.tolist()}"
            )

        for lo, hi in zip(edges[:-1], edges[1:]):
            self.add_population(GrainPopulation(composition, float(lo), float(hi), dnda))

    def get_num_populations(self) -> int:
        return len(self.populations)

    def get_composition_names(self) -> List[str]:
        """Composition names in order of first appearance."""
        names = []
        for pop in self.populations:
            if pop.composition.name not in names:
                names.append(pop.composition.name)
        return names

    def get_populations(self, composition_name: str) -> List[GrainPopulation]:
        key = composition_name.upper()
        return [pop for pop in self.populations if pop.composition.name.upper() == key]

    def get_tot_number_per_H(self) -> float:
        return float(np.sum([pop.get_number_per_H() for pop in self.populations]))

    def get_tot_mass_per_H(self) -> float:
        return float(np.sum([pop.get_mass_per_H() for pop in self.populations]))

    def get_mass_per_H(self, composition_name: str) -> float:
        pops = self.get_populations(composition_name)
        if not pops:
            raise ValueError(f"No populations with composition {composition_name!r}")
        return float(np.sum([pop.get_mass_per_H() for pop in pops]))

    def get_dnda(self, a):
        """Total dn/da [m^-1 per H] of all populations containing radius a."""
        a_arr = np.asarray(a, dtype=float)
        total = np.zeros_like(a_arr)
        for pop in self.populations:
            mask = pop.contains(a_arr)
            if np.any(mask):
                total = total + np.where(mask, pop.dnda(np.where(mask, a_arr, pop.a_min)), 0.0)
        if np.ndim(a) == 0:
            return float(total)
        return total
