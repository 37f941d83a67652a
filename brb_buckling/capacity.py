# Inelastic buckling capacity of a BRB with plastic hinges at its ends
"""
CAPACITY: ELASTIC BUCKLING + PLASTIC HINGE INTERACTION
======================================================

PURPOSE:
--------
The elastic effective length factor ke says when the stick-and-spring system
buckles if every spring stays elastic. Real connections yield. This module
folds the hinge moment capacity, the out-of-plane drift demand and the initial
imperfection into one reduced critical load (modified Takeuchi method):

    X   = max(0, θp - θ0) · κ / (π² · c · Δr)
    Ncr = X / (X · ke² + 1)                       (normalized by Ncr0)

ENGINEERING CONTEXT:
--------------------
- θp  : plastic rotation capacity of the hinge, Mp/K (reduced for axial load)
- θ0  : rotation already consumed by out-of-plane drift, M0/K
- κ   : normalized rotational stiffness of the hinge location
- c   : mode-shape moment factor (M_Pδ = c·N·yr), see kernel/mode_shapes.py
- Δr  : imperfection at the restrainer end, ar/ξL0

As X grows the result approaches the elastic limit 1/ke². As the available
moment capacity θp - θ0 goes to zero, the result goes to zero.

Δr = 0 is an input-domain violation: X becomes infinite and the result is nan.
It is not guarded; callers check their sentinels.

GOVERNING LIMIT STATE:
----------------------
Each topology (symmetric, antisymmetric) has two hinge locations (gusset,
restrainer end). A location whose plastic capacity θp is exactly zero is not a
limit state. The design value is the minimum over the active locations, and
across topologies, the minimum of the per-topology minima.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .config import DEFAULT_SCAN, ScanSettings
from .kernel.characteristic import StabilityParams, Topology, characteristic_function
from .kernel.mode_shapes import Location, mode_shape_ratio
from .kernel.scanner import find_mode_root

logger = logging.getLogger(__name__)


def reduced_critical_load(
    ke: float,
    c: float,
    kappa: float,
    theta_p: float,
    theta_0: float,
    delta_r: float,
) -> float:
    """
    Reduced (inelastic) critical load N/Ncr0 for one hinge location.

    Args:
        ke: Elastic effective length factor
        c: Mode-shape moment factor at the hinge
        kappa: Normalized rotational stiffness at the hinge
        theta_p: Normalized plastic rotation capacity Mp/K
        theta_0: Normalized rotation due to out-of-plane drift M0/K
        delta_r: Normalized imperfection at the restrainer end

    Returns:
        X / (X·ke² + 1); inf/nan propagate for out-of-domain input
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        # np.maximum keeps nan; Python's max(0.0, nan) would return 0.0
        available = np.float64(np.maximum(0.0, theta_p - theta_0))
        X = available * kappa / np.pi**2 / c / np.float64(delta_r)
        return float(X / (X * np.float64(ke)**2 + 1))


@dataclass(frozen=True)
class EndCapacity:
    """Plastic capacity and drift demand at one hinge location."""
    theta_p: float          # Mp/K, reduced for axial load
    theta_0: float = 0.0    # M0/K, due to out-of-plane drift

    @property
    def is_active(self) -> bool:
        """Zero plastic capacity removes the location from the governing minimum."""
        return self.theta_p != 0


def governing_load(
    gusset_load: float,
    restrainer_load: float,
    gusset: EndCapacity,
    restrainer: EndCapacity,
) -> float:
    """
    Governing load of one topology from its two hinge locations.

    Restrainer end inactive -> gusset governs; gusset inactive -> restrainer
    end governs; otherwise the smaller of the two.
    """
    if not restrainer.is_active:
        return gusset_load
    if not gusset.is_active:
        return restrainer_load
    return float(np.minimum(gusset_load, restrainer_load))


@dataclass(frozen=True)
class CapacityBreakdown:
    """Candidate reduced critical loads for both topologies and both hinges."""
    ke_sym: float
    ke_asym: float
    gusset_sym: float
    restrainer_sym: float
    gusset_asym: float
    restrainer_asym: float
    gusset: EndCapacity
    restrainer: EndCapacity

    @property
    def symmetric(self) -> float:
        return governing_load(self.gusset_sym, self.restrainer_sym, self.gusset, self.restrainer)

    @property
    def antisymmetric(self) -> float:
        return governing_load(self.gusset_asym, self.restrainer_asym, self.gusset, self.restrainer)

    @property
    def ratio(self) -> float:
        """Symmetric over antisymmetric governing capacity."""
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(self.symmetric) / np.float64(self.antisymmetric))

    @property
    def governing(self) -> float:
        return float(np.minimum(self.symmetric, self.antisymmetric))

    @property
    def governing_topology(self) -> Optional[Topology]:
        """Topology with the lower capacity (None if either is nan)."""
        sym, asym = self.symmetric, self.antisymmetric
        if math.isnan(sym) or math.isnan(asym):
            return None
        return Topology.SYMMETRIC if sym <= asym else Topology.ANTISYMMETRIC


def evaluate_capacity(
    params: StabilityParams,
    delta_r: float,
    gusset: EndCapacity,
    restrainer: EndCapacity,
    settings: ScanSettings = DEFAULT_SCAN,
) -> CapacityBreakdown:
    """
    Full pipeline for one brace: eigenvalue scan -> mode shapes -> capacities.

    Solves the symmetric and antisymmetric characteristic equations, evaluates
    the absolute mode-shape ratio at each hinge, and the reduced critical load
    at each of the four (topology, hinge) combinations. The gusset hinge uses
    κg, the restrainer end hinge uses κr.

    Args:
        params: Normalized stiffness and geometry
        delta_r: Normalized imperfection at the restrainer end
        gusset: Capacity at the gusset hinge
        restrainer: Capacity at the restrainer end hinge
        settings: Scan settings for both eigenvalue searches

    Returns:
        CapacityBreakdown with the four candidate loads
    """
    ke = {}
    for topology in (Topology.SYMMETRIC, Topology.ANTISYMMETRIC):
        ke[topology] = find_mode_root(
            characteristic_function(topology, params),
            mode_index=settings.mode_index,
            step=settings.step,
            max_search=settings.max_search,
            max_iterations=settings.max_iterations,
        )

    loads = {}
    for topology in (Topology.SYMMETRIC, Topology.ANTISYMMETRIC):
        for location, kappa, end in (
            (Location.GUSSET, params.kappa_g, gusset),
            (Location.RESTRAINER, params.kappa_r, restrainer),
        ):
            c = mode_shape_ratio(topology, location, ke[topology], params.kappa_g,
                                 xi=params.xi, absolute=True)
            loads[topology, location] = reduced_critical_load(
                ke[topology], c, kappa, end.theta_p, end.theta_0, delta_r
            )

    breakdown = CapacityBreakdown(
        ke_sym=ke[Topology.SYMMETRIC],
        ke_asym=ke[Topology.ANTISYMMETRIC],
        gusset_sym=loads[Topology.SYMMETRIC, Location.GUSSET],
        restrainer_sym=loads[Topology.SYMMETRIC, Location.RESTRAINER],
        gusset_asym=loads[Topology.ANTISYMMETRIC, Location.GUSSET],
        restrainer_asym=loads[Topology.ANTISYMMETRIC, Location.RESTRAINER],
        gusset=gusset,
        restrainer=restrainer,
    )
    logger.debug(
        "kappa_g=%.4g kappa_r=%.4g: ke_sym=%.4g ke_asym=%.4g Ncr_sym=%.4g Ncr_asym=%.4g",
        params.kappa_g, params.kappa_r, breakdown.ke_sym, breakdown.ke_asym,
        breakdown.symmetric, breakdown.antisymmetric,
    )
    return breakdown


def governing_critical_load(
    params: StabilityParams,
    delta_r: float,
    gusset: EndCapacity,
    restrainer: EndCapacity,
    settings: ScanSettings = DEFAULT_SCAN,
) -> float:
    """Design (governing) reduced critical load over both topologies and hinges."""
    return evaluate_capacity(params, delta_r, gusset, restrainer, settings).governing


# =============================================================================
# Takeuchi et al. (2014) limits, normalized by Ncr0
# =============================================================================

def takeuchi_nlim1(
    ke_b: float,
    ke_r: float,
    kappa_r: float,
    theta_pr: float,
    theta_0r: float,
    delta_r: float,
) -> float:
    """
    Limit 1: restrainer end hinge, with the pinned-end inelastic load added.

    Nlim1 = (Xr + 1/ke_r²) / (Xr·ke_b² + 1),  Xr = max(0, θpr-θ0r)·κr / (π²Δr)

    Args:
        ke_b: Elastic effective length factor of the brace
        ke_r: Effective length factor with pinned restrainer ends
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        Xr = np.float64(np.maximum(0.0, theta_pr - theta_0r) * kappa_r) / np.pi**2 / np.float64(delta_r)
        return float((Xr + 1 / np.float64(ke_r)**2) / (Xr * ke_b**2 + 1))


def takeuchi_nlim2(
    ke_b: float,
    kappa_g: float,
    kappa_r: float,
    theta_pr: float,
    theta_0r: float,
    theta_pg: float,
    theta_0g: float,
    delta_r: float,
) -> float:
    """Limit 2: hinges at both the restrainer end and the gusset."""
    with np.errstate(divide='ignore', invalid='ignore'):
        X = np.float64(
            np.maximum(0.0, theta_pr - theta_0r) * kappa_r + np.maximum(0.0, theta_pg - theta_0g) * kappa_g
        ) / np.pi**2 / np.float64(delta_r)
        return float(X / (X * ke_b**2 + 1))


def takeuchi_limit(
    ke_b: float,
    ke_r: float,
    kappa_g: float,
    kappa_r: float,
    theta_pr: float,
    theta_0r: float,
    theta_pg: float,
    theta_0g: float,
    delta_r: float,
) -> float:
    """Takeuchi stability limit: min(Nlim1, Nlim2)."""
    return float(np.minimum(
        takeuchi_nlim1(ke_b, ke_r, kappa_r, theta_pr, theta_0r, delta_r),
        takeuchi_nlim2(ke_b, kappa_g, kappa_r, theta_pr, theta_0r, theta_pg, theta_0g, delta_r),
    ))
