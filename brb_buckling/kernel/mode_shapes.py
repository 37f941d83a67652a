# brb_buckling/kernel/mode_shapes.py
"""Elastic buckling mode shapes of the stick-and-spring model.

Each ratio c relates the moment demand at a hinge location to the lateral
displacement yr of the restrainer end:

    M_Pδ = c · N · yr

evaluated in closed form at the effective length factor ke of the mode.
"""

import math
from enum import Enum
from typing import Optional

import numpy as np

from .characteristic import Topology


class Location(Enum):
    """Hinge locations along the brace."""
    GUSSET = "gusset"
    RESTRAINER = "restrainer"


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0 or not np.isfinite(denominator):
        return math.nan
    return float(numerator / denominator)


def restrainer_ratio_symmetric(ke: float, kappa_g: float) -> float:
    """Symmetric mode: restrainer end rotation / restrainer end displacement."""
    p = np.pi / ke
    base = p * np.sin(p) - kappa_g * np.cos(p)
    return _ratio(base, base + kappa_g)


def gusset_ratio_symmetric(ke: float, kappa_g: float) -> float:
    """Symmetric mode: gusset rotation / restrainer end displacement."""
    p = np.pi / ke
    return _ratio(-kappa_g, p * np.sin(p) - kappa_g * np.cos(p) + kappa_g)


def _side_terms(ke: float, kappa_g: float, xi_eff: float):
    # Shared numerator and denominator of the antisymmetric / one-sided forms
    p = np.pi / ke
    base = (p**2 + xi_eff * kappa_g) * np.sin(p) - kappa_g * p * np.cos(p)
    return p, base, base + kappa_g * p * (1 - xi_eff)


def restrainer_ratio_antisymmetric(ke: float, kappa_g: float, xi: float) -> float:
    """Antisymmetric mode: restrainer end rotation / restrainer end displacement."""
    _, base, denom = _side_terms(ke, kappa_g, 2 * xi)
    return _ratio(base, denom)


def gusset_ratio_antisymmetric(ke: float, kappa_g: float, xi: float) -> float:
    """Antisymmetric mode: gusset rotation / restrainer end displacement."""
    p, _, denom = _side_terms(ke, kappa_g, 2 * xi)
    return _ratio(-kappa_g * p, denom)


def restrainer_ratio_one_sided(ke: float, kappa_g: float, xi: float) -> float:
    """One-sided mode: restrainer end rotation / restrainer end displacement."""
    _, base, denom = _side_terms(ke, kappa_g, xi)
    return _ratio(base, denom)


def gusset_ratio_one_sided(ke: float, kappa_g: float, xi: float) -> float:
    """One-sided mode: gusset rotation / restrainer end displacement."""
    p, _, denom = _side_terms(ke, kappa_g, xi)
    return _ratio(-kappa_g * p, denom)


def mode_shape_ratio(
    topology: Topology,
    location: Location,
    ke: float,
    kappa_g: float,
    xi: Optional[float] = None,
    absolute: bool = False,
) -> float:
    """
    Rotation/displacement ratio of a buckling mode at a hinge location.

    Args:
        topology: SYMMETRIC, ANTISYMMETRIC or ONE_SIDED
        location: GUSSET or RESTRAINER
        ke: Effective length factor from find_mode_root
        kappa_g: Normalized gusset stiffness
        xi: Connection length ratio (required except for SYMMETRIC)
        absolute: Return |c| instead of the signed ratio

    Returns:
        Mode shape ratio c, or nan when ke is a scan sentinel (0, inf, nan)
        or the closed form is singular at this ke

    Raises:
        ValueError: For unsupported topologies or a missing xi
    """
    if topology is Topology.SYMMETRIC:
        funcs = {
            Location.RESTRAINER: restrainer_ratio_symmetric,
            Location.GUSSET: gusset_ratio_symmetric,
        }
        args = (kappa_g,)
    elif topology in (Topology.ANTISYMMETRIC, Topology.ONE_SIDED):
        if xi is None:
            raise ValueError(f"xi is required for the {topology.value} mode shape")
        if topology is Topology.ANTISYMMETRIC:
            funcs = {
                Location.RESTRAINER: restrainer_ratio_antisymmetric,
                Location.GUSSET: gusset_ratio_antisymmetric,
            }
        else:
            funcs = {
                Location.RESTRAINER: restrainer_ratio_one_sided,
                Location.GUSSET: gusset_ratio_one_sided,
            }
        args = (kappa_g, xi)
    else:
        raise ValueError(f"No closed-form mode shape for the {topology.value} topology")

    # ke = 0 (no mode in range), inf (degenerate) and nan are not mode shapes
    if not math.isfinite(ke) or ke == 0:
        return math.nan

    c = funcs[location](ke, *args)
    return abs(c) if absolute else c
