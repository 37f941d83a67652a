# Critical buckling mode crossover (symmetric vs antisymmetric)
"""
CROSSOVER: WHERE DOES THE GOVERNING MODE SHAPE SWITCH?
======================================================

PURPOSE:
--------
For a given brace, either the symmetric or the antisymmetric mode governs the
reduced critical load. Which one depends on the connection stiffnesses. This
module finds the gusset stiffness κg (or restrainer end stiffness κr) at which
the two capacities are equal:

    ratio(κ) = Ncr_sym(κ) / Ncr_asym(κ) = 1

HOW IT WORKS:
-------------
ratio(κ) runs the whole pipeline for a trial stiffness (two eigenvalue scans,
four mode-shape ratios, four reduced critical loads, the governing minimum per
topology). The outer search is the same fixed-increment scanner used for the
eigenvalues, run over [κ_min, κ_max) with the tolerance as its step. The
answer is the grid point just before the ratio crosses the target.

A nan result means the same topology governs across the whole range.
"""

import logging
from dataclasses import replace
from enum import Enum
from typing import Tuple

from .capacity import EndCapacity, evaluate_capacity
from .config import DEFAULT_CROSSOVER, DEFAULT_SCAN, CrossoverSettings, ScanSettings
from .kernel.characteristic import StabilityParams
from .kernel.scanner import solve_scalar

logger = logging.getLogger(__name__)


class SearchParameter(Enum):
    """Stiffness varied by the crossover search."""
    GUSSET = "kappa_g"
    RESTRAINER = "kappa_r"


def with_stiffness(params: StabilityParams, search: SearchParameter, value: float) -> StabilityParams:
    """Copy of params with the searched stiffness replaced."""
    return replace(params, **{search.value: value})


def mode_ratio(
    value: float,
    search: SearchParameter,
    fixed: StabilityParams,
    delta_r: float,
    gusset: EndCapacity,
    restrainer: EndCapacity,
    scan: ScanSettings = DEFAULT_SCAN,
) -> float:
    """
    Symmetric / antisymmetric governing capacity at one trial stiffness.

    Args:
        value: Trial value of the searched stiffness
        search: Which stiffness is being varied
        fixed: Remaining stiffness and geometry (the searched field is overridden)
        delta_r: Normalized imperfection at the restrainer end
        gusset, restrainer: Hinge capacities
        scan: Settings of the inner eigenvalue scans

    Returns:
        Ncr_sym / Ncr_asym (nan or inf for sentinel capacities)
    """
    params = with_stiffness(fixed, search, value)
    return evaluate_capacity(params, delta_r, gusset, restrainer, scan).ratio


def critical_mode_crossover(
    fixed: StabilityParams,
    search_range: Tuple[float, float],
    tolerance: float = DEFAULT_CROSSOVER.tolerance,
    search: SearchParameter = SearchParameter.GUSSET,
    delta_r: float = 1.0,
    gusset: EndCapacity = EndCapacity(theta_p=0.0),
    restrainer: EndCapacity = EndCapacity(theta_p=0.0),
    scan: ScanSettings = DEFAULT_SCAN,
    settings: CrossoverSettings = DEFAULT_CROSSOVER,
) -> float:
    """
    Stiffness at which the governing buckling mode switches.

    Args:
        fixed: Stiffness and geometry held constant
        search_range: (min, max) of the searched stiffness
        tolerance: Step of the outer scan (precision of the answer)
        search: GUSSET varies κg, RESTRAINER varies κr
        delta_r: Normalized imperfection at the restrainer end
        gusset, restrainer: Hinge capacities (θp = 0 removes a hinge)
        scan: Settings of the inner eigenvalue scans
        settings: Target ratio of the crossover

    Returns:
        Critical stiffness, or nan if no crossing is found in the range
    """
    lo, hi = search_range

    def ratio(value: float) -> float:
        return mode_ratio(value, search, fixed, delta_r, gusset, restrainer, scan)

    result = solve_scalar(ratio, settings.target, lo, hi, tolerance)
    logger.debug("Mode crossover over %s in [%.4g, %.4g]: %.6g", search.value, lo, hi, result)
    return result
