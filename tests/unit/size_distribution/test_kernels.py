# tests/unit/size_distribution/test_kernels.py

import math

import numpy as np
import pytest

from dustpop.constants import DENSITY_GRAPHITE, MASS_CARBON_ATOM, RADIUS_MIN_PAH
from dustpop.size_distribution.kernels import dnda_grasil, dnda_pah, pah_normalization

# Milky Way graphite, Weingartner & Draine 2001 Table 1
MWY_GRA = dict(C=9.99e-12, a_t=0.0107e-6, a_c=0.428e-6, alpha=-1.54, beta=-0.165)
MWY_SIL = dict(C=1.00e-13, a_t=0.164e-6, a_c=0.1e-6, alpha=-2.21, beta=0.300)


def test_dnda_grasil_reference_value_below_transition():
    """
    At a = 0.01 micron (< a_t) the cutoff term is 1 and beta < 0 selects
    F = 1/(1 - beta a/a_t).
    """
    a = 0.01e-6
    p = MWY_GRA
    expected = p["C"] / a * (a / p["a_t"]) ** p["alpha"] / (1.0 - p["beta"] * a / p["a_t"])

    value = dnda_grasil(a, **p)

    assert value == pytest.approx(expected, rel=1e-9)
    # 9.99e-4 * 1.07**1.54 * 214/247
    assert value == pytest.approx(9.60579526433e-4, rel=1e-9)


def test_dnda_grasil_cutoff_branch_above_transition():
    a = 0.5e-6
    p = MWY_SIL
    expected = (
        p["C"] / a * (a / p["a_t"]) ** p["alpha"]
        * (1.0 + p["beta"] * a / p["a_t"])
        * math.exp(-(((a - p["a_t"]) / p["a_c"]) ** 3))
    )
    assert dnda_grasil(a, **p) == pytest.approx(expected, rel=1e-9)


def test_dnda_grasil_continuous_at_transition():
    p = MWY_SIL
    below = dnda_grasil(p["a_t"] * (1.0 - 1e-9), **p)
    at = dnda_grasil(p["a_t"], **p)
    assert below == pytest.approx(at, rel=1e-6)


@pytest.mark.parametrize("params", [MWY_GRA, MWY_SIL])
def test_dnda_grasil_cutoff_suppresses_tail(params):
    a_t, a_c = params["a_t"], params["a_c"]
    tail = dnda_grasil(a_t + 4.0 * a_c, **params)
    assert tail < 1e-3 * dnda_grasil(a_t, **params)


def test_dnda_grasil_array_input_matches_scalar_calls():
    a = np.geomspace(0.001e-6, 1.0e-6, 7)
    values = dnda_grasil(a, **MWY_GRA)

    assert isinstance(values, np.ndarray)
    assert values.shape == a.shape
    expected = [dnda_grasil(float(x), **MWY_GRA) for x in a]
    assert np.allclose(values, expected, rtol=1e-12, atol=0.0)


def test_dnda_grasil_scalar_returns_float():
    assert isinstance(dnda_grasil(0.05e-6, **MWY_SIL), float)


def test_pah_normalization_matches_closed_form():
    sigma = 0.4
    a0 = (3.5e-10, 30e-10)
    bc = (4.5e-5, 1.5e-5)

    B = pah_normalization(sigma, a0, bc)

    for i in range(2):
        expected = (
            3.0 / (2.0 * math.pi) ** 1.5
            * math.exp(-4.5 * sigma ** 2)
            / (DENSITY_GRAPHITE * a0[i] ** 3 * sigma)
            * bc[i] * MASS_CARBON_ATOM
            / (1.0 + math.erf(3.0 * sigma / math.sqrt(2.0)
                              + math.log(a0[i] / RADIUS_MIN_PAH) / (math.sqrt(2.0) * sigma)))
        )
        assert B[i] == pytest.approx(expected, rel=1e-12)


def test_dnda_pah_is_sum_of_two_lognormal_modes():
    sigma = 0.4
    a0 = (3.5e-10, 30e-10)
    bc = (4.5e-5, 1.5e-5)
    B = pah_normalization(sigma, a0, bc)

    a = 10e-10
    expected = sum(
        B[i] / a * math.exp(-0.5 * (math.log(a / a0[i]) / sigma) ** 2) for i in range(2)
    )
    assert dnda_pah(a, sigma, a0, bc) == pytest.approx(expected, rel=1e-12)


def test_dnda_pah_each_mode_dominates_at_its_center():
    sigma = 0.4
    a0 = (3.5e-10, 30e-10)

    def mode(i, a):
        bc = [0.0, 0.0]
        bc[i] = (4.5e-5, 1.5e-5)[i]
        return dnda_pah(a, sigma, a0, bc)

    for i, center in enumerate(a0):
        own = mode(i, center)
        other = mode(1 - i, center)
        assert np.isfinite(own) and own > 0.0
        assert own > 100.0 * other


def test_dnda_pah_scales_linearly_with_abundance():
    a = np.geomspace(3.548e-10, 1e-8, 5)
    full = dnda_pah(a, 0.4, (3.5e-10, 30e-10), (4.5e-5, 1.5e-5))
    sixth = dnda_pah(a, 0.4, (3.5e-10, 30e-10), (0.75e-5, 0.25e-5))
    assert np.allclose(sixth, full / 6.0, rtol=1e-12, atol=0.0)
