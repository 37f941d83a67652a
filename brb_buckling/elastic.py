# Elastic buckling loads in force units
"""
ELASTIC: FROM PHYSICAL STIFFNESSES TO BUCKLING LOADS
====================================================

The kernel works in normalized quantities. This module converts physical
inputs (rotational springs in force·length/rad, lengths, flexural rigidities)
into the normalized ones, runs the eigenvalue scan, and returns the elastic
buckling load in force units:

    κ     = K · ξL0 / γEIr                 normalized rotational stiffness
    Ncr0  = π² · γEIr / (ξL0)²             reference (index) load
    NcrB  = Ncr0 / ke²                     elastic buckling load

By default the scan advances in steps of 1e-4·Ncr0, whatever the unit system.
An absolute force tolerance (DimensionalSettings.tolerance) is converted to
N/Ncr0; with large-unit inputs it can exceed the iteration cap and raise
ScanLimitError. The scan ceiling defaults to N = Ncr0.

Sentinels:
- ke = inf (no rotational restraint) -> load 0.0
- ke = 0   (no mode below the ceiling) -> load inf
"""

import math

import numpy as np

from .config import DEFAULT_DIMENSIONAL, DimensionalSettings
from .kernel.characteristic import (
    ChevronParams,
    StabilityParams,
    Topology,
    characteristic_function,
)
from .kernel.scanner import find_mode_root


def normalized_stiffness(K: float, xi_L0: float, gamma_EI: float) -> float:
    """
    Normalized rotational stiffness κ = K·ξL0/γEIr.

    Args:
        K: Rotational spring stiffness (force·length/rad)
        xi_L0: Connection zone length ξL0
        gamma_EI: Connection zone flexural rigidity γEIr
    """
    return K * xi_L0 / gamma_EI


def reference_load(xi_L0: float, gamma_EI: float) -> float:
    """Index buckling load Ncr0 = π²γEIr/(ξL0)²."""
    return np.pi**2 * gamma_EI / xi_L0**2


def _load_from_ke(Ncr0: float, ke: float) -> float:
    if math.isinf(ke):
        return 0.0
    if ke == 0:
        return math.inf
    return Ncr0 / ke**2


def elastic_critical_load(
    topology: Topology,
    Kg: float,
    Kr: float,
    xi_L0: float,
    gamma_EI: float,
    L0: float,
    EI: float,
    mode_index: int = 1,
    settings: DimensionalSettings = DEFAULT_DIMENSIONAL,
) -> float:
    """
    Elastic buckling load of a single brace.

    Args:
        topology: Any single-span topology (not CHEVRON)
        Kg: Gusset rotational stiffness
        Kr: Restrainer end rotational stiffness
        xi_L0: Connection zone length
        gamma_EI: Connection zone flexural rigidity
        L0: Full brace buckling length
        EI: Restrainer flexural rigidity
        mode_index: Mode number
        settings: Scan increment (relative or force tolerance), ceiling and cap

    Returns:
        Elastic critical load in force units (0.0 if degenerate, inf if no
        mode below the ceiling)
    """
    if topology is Topology.CHEVRON:
        raise ValueError("Use elastic_critical_load_chevron for the chevron topology")

    Ncr0 = reference_load(xi_L0, gamma_EI)
    params = StabilityParams(
        kappa_g=normalized_stiffness(Kg, xi_L0, gamma_EI),
        kappa_r=normalized_stiffness(Kr, xi_L0, gamma_EI),
        xi=xi_L0 / L0,
        gamma=gamma_EI / EI,
    )
    ke = find_mode_root(
        characteristic_function(topology, params),
        mode_index=mode_index,
        step=settings.step_for(Ncr0),
        max_search=settings.max_search,
        max_iterations=settings.max_iterations,
    )
    return _load_from_ke(Ncr0, ke)


def elastic_critical_load_chevron(
    mode_index: int,
    Kg1: float, Kg2: float,
    Kr1: float, Kr2: float,
    xi1_L0: float, xi2_L0: float,
    gamma1_EI: float, gamma2_EI: float,
    L0: float,
    EI: float,
    settings: DimensionalSettings = DEFAULT_DIMENSIONAL,
) -> float:
    """
    Elastic buckling load of a chevron pair; the load is referenced to span 1.

    Returns:
        Elastic critical load in force units
    """
    Ncr0 = reference_load(xi1_L0, gamma1_EI)
    params = ChevronParams(
        kappa_g1=normalized_stiffness(Kg1, xi1_L0, gamma1_EI),
        kappa_g2=normalized_stiffness(Kg2, xi2_L0, gamma2_EI),
        kappa_r1=normalized_stiffness(Kr1, xi1_L0, gamma1_EI),
        kappa_r2=normalized_stiffness(Kr2, xi2_L0, gamma2_EI),
        xi1=xi1_L0 / L0,
        xi2=xi2_L0 / L0,
        gamma1=gamma1_EI / EI,
        gamma2=gamma2_EI / EI,
    )
    ke = find_mode_root(
        characteristic_function(Topology.CHEVRON, params),
        mode_index=mode_index,
        step=settings.step_for(Ncr0),
        max_search=settings.max_search,
        max_iterations=settings.max_iterations,
    )
    return _load_from_ke(Ncr0, ke)
