# File: tests/test_effective_length.py
"""
Effective length factors of known brace configurations.

ke is normalized to the connection zone length ξL0: a brace fixed at both
gussets has ke = 0.5/ξ and a pinned-pinned brace ke = 1/ξ. Real connections
fall in between.
"""

import numpy as np
import pytest

from brb_buckling.kernel import (
    ChevronParams,
    StabilityParams,
    Topology,
    characteristic_function,
    find_mode_root,
)


def _ke(topology, params, step=1e-4):
    return find_mode_root(characteristic_function(topology, params), step=step)


def test_typical_brace_between_fixed_and_pinned():
    """κg = κr = 2, ξ = 0.1, γ = 1: symmetric ke lies between 0.5/ξ and 1/ξ."""
    params = StabilityParams(kappa_g=2.0, kappa_r=2.0, xi=0.1, gamma=1.0)
    ke = _ke(Topology.SYMMETRIC, params)
    assert 5.0 < ke < 10.0
    print(f"✓ ke_sym = {ke:.4f}")


def test_near_rigid_connections_approach_fixed_fixed():
    """
    κ -> ∞ with uniform stiffness: det ≈ -κ²·sin(5·π√N), first root at
    √N = 0.2, so ke = 0.5/ξ = 5.
    """
    params = StabilityParams(kappa_g=1e8, kappa_r=1e8, xi=0.1, gamma=1.0)
    assert _ke(Topology.SYMMETRIC, params) == pytest.approx(5.0, abs=0.01)


def test_stiffer_gusset_shortens_effective_length():
    """ke decreases as the gusset gets stiffer."""
    values = [0.5, 2.0, 8.0, 32.0]
    ke = [_ke(Topology.SYMMETRIC, StabilityParams(k, 2.0, 0.1, 1.0), step=1e-3) for k in values]
    assert np.all(np.diff(ke) <= 0)


def test_rigid_restrainer_pinned_end():
    """
    Simplified model with κr = 0: n·tan(n) = κg, n = π/ke.

    κg = 2 -> n = 1.0769 -> ke = 2.917
    """
    params = StabilityParams(kappa_g=2.0, kappa_r=0.0, xi=0.1, gamma=1.0)
    ke = _ke(Topology.SYMMETRIC_RIGID_RESTRAINER, params)
    assert ke == pytest.approx(np.pi / 1.0769, abs=3e-3)


def test_degenerate_brace_is_infinite():
    """No rotational restraint anywhere: ke = inf for every topology."""
    params = StabilityParams(kappa_g=0.0, kappa_r=0.0, xi=0.1, gamma=1.0)
    for topology in (Topology.SYMMETRIC, Topology.ANTISYMMETRIC, Topology.ONE_SIDED):
        assert _ke(topology, params) == float('inf')


def test_antisymmetric_and_one_sided_modes_exist():
    """Both topologies buckle below the default ceiling N = 2 for a typical brace."""
    params = StabilityParams(kappa_g=2.0, kappa_r=2.0, xi=0.1, gamma=1.0)
    for topology in (Topology.ANTISYMMETRIC, Topology.ONE_SIDED):
        ke = _ke(topology, params, step=1e-3)
        assert np.isfinite(ke) and ke > 0


# =============================================================================
# Chevron pair
# =============================================================================

def test_chevron_rigid_uniform_pair_is_fixed_fixed():
    """
    κ -> ∞, ξ1 = ξ2 = 0.1, γ = 1: the pair reduces to a fixed-fixed member of
    length L0 with det ∝ θ·sinθ + 2cosθ - 2, θ = π√N/ξ.

    Mode 1 is θ = 2π (ke = 0.5/ξ = 5); mode 2 is tan(θ/2) = θ/2, θ = 8.9868
    (ke = π/(θξ) = 3.4958), a higher load than mode 1.
    """
    params = ChevronParams(1e6, 1e6, 1e6, 1e6, 0.1, 0.1, 1.0, 1.0)
    f = characteristic_function(Topology.CHEVRON, params)

    first = find_mode_root(f, mode_index=1, step=2e-5)
    second = find_mode_root(f, mode_index=2, step=2e-5)

    assert first == pytest.approx(5.0, abs=0.01)
    assert second == pytest.approx(3.4958, abs=0.01)
    assert second < first
    print(f"✓ Chevron ke: mode 1 = {first:.4f}, mode 2 = {second:.4f}")


def test_chevron_pinned_gussets_is_pinned_pinned():
    """
    κg1 = κg2 = 0 with near-rigid restrainer ends: det ∝ -N·sinθ, so the
    pair buckles as a pinned-pinned member, ke = 1/ξ = 10 then 0.5/ξ = 5.
    """
    params = ChevronParams(0.0, 0.0, 1e6, 1e6, 0.1, 0.1, 1.0, 1.0)
    f = characteristic_function(Topology.CHEVRON, params)

    first = find_mode_root(f, mode_index=1, step=1e-5)
    second = find_mode_root(f, mode_index=2, step=1e-5)

    assert first == pytest.approx(10.0, abs=0.01)
    assert second == pytest.approx(5.0, abs=0.01)
