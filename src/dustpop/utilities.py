from __future__ import annotations

import re

import numpy as np
from scipy.integrate import quad

__all__ = ["get_number", "log_edges", "integrate_in_ln"]

# "1.2x10^3", "2×10^3", "1.2Ã—10-3" (mis-decoded multiplication sign)
_SCI_NOTATION = re.compile(
    r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(?:x|X|×|Ã—|\*)\s*10\s*\^?\s*([+-]?\d+)\s*$"
)


def get_number(value) -> float:
    """Coerce a config value (number or numeric string) to float."""
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    s = str(value).strip()
    try:
        return float(s)
    except ValueError:
        pass
    match = _SCI_NOTATION.match(s)
    if match is None:
        raise ValueError(f"Could not interpret {value!r} as a number")
    mantissa, exponent = match.groups()
    return float(mantissa) * 10.0 ** int(exponent)


def log_edges(xmin: float, xmax: float, n_bins: int):
    """Return n_bins + 1 logarithmically spaced edges with exact end points."""
    if xmin <= 0 or xmax <= 0:
        raise ValueError("log-scaled edges require xmin and xmax > 0")
    edges = np.geomspace(xmin, xmax, n_bins + 1)
    # geomspace may round the end points
    edges[0] = xmin
    edges[-1] = xmax
    return edges


def integrate_in_ln(fn, a_min: float, a_max: float) -> float:
    """
    Integrate fn(a) da over [a_min, a_max] using u = ln(a) as the
    integration coordinate, i.e. the integral of fn(e^u) e^u du.
    """
    if a_max <= a_min:
        return 0.0

    def integrand(u):
        a = np.exp(u)
        return fn(a) * a

    # epsabs=0: densities per H are tiny, only the relative tolerance is meaningful
    value, _ = quad(integrand, np.log(a_min), np.log(a_max), epsabs=0.0, limit=200)
    return float(value)
