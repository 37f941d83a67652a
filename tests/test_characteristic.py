# File: tests/test_characteristic.py
"""
Test the characteristic equations of the stick-and-spring model.

WHY THESE TESTS?
---------------
1. The domain clamp (exact 0.0) is what the scanner uses to detect a
   degenerate system, so it must hold for every topology
2. Spot values at N = 1 where the trig terms collapse to 0 and ±1
3. Dispatch through the Topology enum must reject mismatched parameters
"""

import numpy as np
import pytest

from brb_buckling.kernel.characteristic import (
    ChevronParams,
    StabilityParams,
    Topology,
    characteristic_function,
    characteristic_value,
    chevron_matrix,
    det_antisymmetric,
    det_one_sided,
    det_symmetric,
    det_symmetric_rigid_restrainer,
)

SINGLE_SPAN = [
    Topology.SYMMETRIC,
    Topology.ANTISYMMETRIC,
    Topology.ONE_SIDED,
    Topology.SYMMETRIC_RIGID_RESTRAINER,
    Topology.ANTISYMMETRIC_RIGID_RESTRAINER,
]

BRACE = StabilityParams(kappa_g=2.0, kappa_r=2.0, xi=0.1, gamma=1.0)
CHEVRON = ChevronParams(
    kappa_g1=2.0, kappa_g2=2.0, kappa_r1=5.0, kappa_r2=5.0,
    xi1=0.1, xi2=0.1, gamma1=0.5, gamma2=0.5,
)


@pytest.mark.parametrize("topology", SINGLE_SPAN)
def test_negative_load_is_exactly_zero(topology):
    """A negative trial load is outside the domain: the result is exactly 0.0."""
    for N in (-1e-9, -0.5, -10.0):
        assert characteristic_value(topology, N, BRACE) == 0.0
    assert characteristic_value(Topology.CHEVRON, -0.5, CHEVRON) == 0.0


@pytest.mark.parametrize("topology", SINGLE_SPAN)
def test_no_stiffness_is_degenerate(topology):
    """κg = κr = 0: the equation is identically zero for every N."""
    params = StabilityParams(kappa_g=0.0, kappa_r=0.0, xi=0.1, gamma=1.0)
    assert params.is_degenerate
    for N in np.linspace(0.0, 2.0, 21):
        assert characteristic_value(topology, N, params) == 0.0


def test_chevron_degenerate_span():
    """One chevron span without any rotational restraint is degenerate."""
    params = ChevronParams(
        kappa_g1=2.0, kappa_g2=0.0, kappa_r1=5.0, kappa_r2=0.0,
        xi1=0.1, xi2=0.1, gamma1=0.5, gamma2=0.5,
    )
    assert params.is_degenerate
    for N in (0.01, 0.3, 1.5):
        assert characteristic_value(Topology.CHEVRON, N, params) == 0.0


@pytest.mark.parametrize("xi, gamma", [(0.0, 1.0), (-0.1, 1.0), (0.1, 0.0), (0.1, -2.0)])
def test_invalid_geometry_is_zero(xi, gamma):
    """Non-positive ξ or γ is outside the domain."""
    params = StabilityParams(kappa_g=2.0, kappa_r=2.0, xi=xi, gamma=gamma)
    for topology in SINGLE_SPAN:
        assert characteristic_value(topology, 0.5, params) == 0.0


def test_symmetric_spot_value():
    """
    N = 1, ξ = 0.25, γ = 1: both phases equal π, so S = 0 and C = -1.

    det = π(κr(0 - 1) - κg) = -π(κg + κr)
    """
    det = det_symmetric(1.0, 1.0, 1.0, 0.25, 1.0)
    assert det == pytest.approx(-2 * np.pi, abs=1e-9)

    det = det_symmetric(1.0, 3.0, 0.5, 0.25, 1.0)
    assert det == pytest.approx(-3.5 * np.pi, abs=1e-9)
    print("✓ Symmetric determinant matches the collapsed closed form")


def test_antisymmetric_spot_value():
    """N = 1, ξ = 0.25, γ = 1: only the κg·κr·C1·C2 term survives, det = π·κg·κr."""
    det = det_antisymmetric(1.0, 1.0, 1.0, 0.25, 1.0)
    assert det == pytest.approx(np.pi, abs=1e-9)

    det = det_antisymmetric(1.0, 2.0, 3.0, 0.25, 1.0)
    assert det == pytest.approx(6 * np.pi, abs=1e-9)


def test_one_sided_spot_value():
    """N = 1, ξ = 0.5, γ = 1: phase of the far segment is -π, det = -π·κg·κr."""
    det = det_one_sided(1.0, 1.0, 1.0, 0.5, 1.0)
    assert det == pytest.approx(-np.pi, abs=1e-9)

    det = det_one_sided(1.0, 2.0, 4.0, 0.5, 1.0)
    assert det == pytest.approx(-8 * np.pi, abs=1e-9)


def test_rigid_restrainer_pinned_restrainer_end():
    """
    κr = 0 in the simplified symmetric model leaves the gusset spring only:

    det = n(κg·cos n - n·sin n), n = π√N
    """
    kappa_g = 2.0
    for N in (0.05, 0.3, 0.9):
        n = np.pi * np.sqrt(N)
        expected = n * (kappa_g * np.cos(n) - n * np.sin(n))
        det = det_symmetric_rigid_restrainer(N, kappa_g, 0.0, 0.1, 1.0)
        assert det == pytest.approx(expected, rel=1e-12, abs=1e-12)


def test_rigid_restrainer_series_spring():
    """An infinitely stiff restrainer end reduces to the connection zone flexibility."""
    kappa_g, xi, gamma, N = 2.0, 0.1, 0.5, 0.4
    kr = 1.0 / (gamma * (1 - 2 * xi) / 2 / xi)
    n = np.pi * np.sqrt(N)
    expected = kappa_g * (n * np.cos(n) + kr * np.sin(n)) - n * (n * np.sin(n) - kr * np.cos(n))

    det = det_symmetric_rigid_restrainer(N, kappa_g, float('inf'), xi, gamma)
    assert det == pytest.approx(expected, rel=1e-12)


def test_chevron_matrix_shape_and_pinned_gussets():
    """The chevron matrix is 6x6; pinned gussets swap in the continuity row."""
    M = chevron_matrix(0.3, 2.0, 2.0, 5.0, 5.0, 0.1, 0.1, 0.5, 0.5)
    assert M.shape == (6, 6)
    assert np.all(np.isfinite(M))

    pinned = chevron_matrix(0.3, 0.0, 0.0, 5.0, 5.0, 0.1, 0.2, 0.5, 0.25)
    assert pinned[5, 0] == 0.0
    assert pinned[5, 1] == pytest.approx(0.25 / 0.5)
    assert pinned[5, 2] == 0.0 and pinned[5, 3] == 0.0


def test_chevron_determinant_matches_numpy():
    """det_chevron is the determinant of chevron_matrix."""
    N = 0.3
    M = chevron_matrix(N, 2.0, 2.0, 5.0, 5.0, 0.1, 0.1, 0.5, 0.5)
    det = characteristic_value(Topology.CHEVRON, N, CHEVRON)
    assert det == pytest.approx(np.linalg.det(M), rel=1e-9, abs=1e-12)


def test_params_type_must_match_topology():
    """Chevron needs ChevronParams, every other topology StabilityParams."""
    with pytest.raises(TypeError):
        characteristic_value(Topology.CHEVRON, 0.5, BRACE)
    with pytest.raises(TypeError):
        characteristic_value(Topology.SYMMETRIC, 0.5, CHEVRON)
    with pytest.raises(TypeError):
        characteristic_function(Topology.ANTISYMMETRIC, CHEVRON)
    with pytest.raises(TypeError):
        characteristic_function(Topology.CHEVRON, BRACE)


def test_characteristic_function_binds_params():
    """characteristic_function(...)(N) == characteristic_value(..., N, ...)."""
    f = characteristic_function(Topology.ANTISYMMETRIC, BRACE)
    for N in (0.01, 0.2, 1.3):
        assert f(N) == characteristic_value(Topology.ANTISYMMETRIC, N, BRACE)


def test_params_are_frozen():
    """Parameter sets are immutable value types."""
    with pytest.raises(Exception):  # dataclass.FrozenInstanceError
        BRACE.kappa_g = 3.0
