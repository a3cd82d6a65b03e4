"""
Parameterized grain-size distributions dn/da (grains per unit radius per H
nucleus) from Weingartner & Draine (2001, ApJ 548, 296) and
Li & Draine (2001, ApJ 554, 778).

Radii are in meters; the returned densities are in m^-1 per H. Scalar input
returns a float, array input returns an ndarray of the same shape.
"""
from __future__ import annotations

import numpy as np
from scipy.special import erf

from ..constants import DENSITY_GRAPHITE, MASS_CARBON_ATOM, RADIUS_MIN_PAH

__all__ = ["dnda_grasil", "dnda_pah", "pah_normalization"]


def _as_output(a, value):
    if np.ndim(a) == 0:
        return float(value)
    return value


def dnda_grasil(a, C, a_t, a_c, alpha, beta):
    """
    Graphite/silicate size distribution:

        dn/da = (C/a) (a/a_t)^alpha * F(a; beta, a_t) * G(a; a_t, a_c)

    with F = 1 + beta a/a_t for beta > 0, F = 1/(1 - beta a/a_t) otherwise,
    and G = 1 for a < a_t, G = exp(-((a - a_t)/a_c)^3) for a >= a_t.

    Parameters
    ----------
    a : float or array_like
        Grain radius [m].
    C : float
        Abundance scale.
    a_t, a_c : float
        Transition and cutoff radii [m].
    alpha : float
        Power-law index.
    beta : float
        Curvature parameter; its sign selects the form of F.
    """
    x = np.asarray(a, dtype=float)

    f0 = C / x * np.power(x / a_t, alpha)
    if beta > 0:
        f1 = 1.0 + beta * x / a_t
    else:
        f1 = 1.0 / (1.0 - beta * x / a_t)
    # the clip keeps the unused branch of np.where from overflowing below a_t
    f2 = np.where(
        x < a_t,
        1.0,
        np.exp(-np.power(np.clip(x - a_t, 0.0, None) / a_c, 3)),
    )
    return _as_output(a, f0 * f1 * f2)


def pah_normalization(sigma, a0, bc):
    """
    Per-mode normalization B_i of the PAH lognormal modes, fixed by the
    carbon abundance bc_i locked up in each mode (Li & Draine 2001, eq. 3).
    """
    a0 = np.asarray(a0, dtype=float)
    bc = np.asarray(bc, dtype=float)

    t0 = 3.0 / np.power(2.0 * np.pi, 1.5)
    t1 = np.exp(-4.5 * sigma * sigma)
    t2 = 1.0 / DENSITY_GRAPHITE / np.power(a0, 3) / sigma
    erffac = 3.0 * sigma / np.sqrt(2.0) + np.log(a0 / RADIUS_MIN_PAH) / np.sqrt(2.0) / sigma
    t3 = bc * MASS_CARBON_ATOM / (1.0 + erf(erffac))
    return t0 * t1 * t2 * t3


def dnda_pah(a, sigma, a0, bc):
    """
    Sum of two lognormal modes in grain radius:

        dn/da = sum_i B_i / a * exp(-0.5 (ln(a/a0_i) / sigma)^2)

    Parameters
    ----------
    a : float or array_like
        Grain radius [m].
    sigma : float
        Lognormal width shared by both modes.
    a0 : sequence of 2 floats
        Mode centers [m].
    bc : sequence of 2 floats
        Carbon abundance per H in each mode.
    """
    x = np.asarray(a, dtype=float)
    B = pah_normalization(sigma, a0, bc)

    total = np.zeros_like(x)
    for B_i, a0_i in zip(B, np.asarray(a0, dtype=float)):
        u = np.log(x / a0_i) / sigma
        total = total + B_i / x * np.exp(-0.5 * u * u)
    return _as_output(a, total)
