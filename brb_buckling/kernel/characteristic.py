# brb_buckling/kernel/characteristic.py
"""Characteristic (determinant) equations of the stick-and-spring buckling model.

Each function returns the signed determinant of the stability eigenproblem at a
trial load N = P/Ncr0, where Ncr0 = π²γEIr/(ξL0)². Zero crossings in N are the
buckling eigenvalues.

Model (half brace shown for the symmetric case):

    κg      κr @----------------@ κr      κg
    @---------/                  \\---------@

    connection zone: length ξL0, stiffness γEIr
    restrainer:      length (1-2ξ)L0, stiffness EIr

A return value of exactly 0.0 is the "no stability problem" sentinel: negative
load, non-positive ξ or γ, or a span with no rotational restraint at all.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Union

import numpy as np
import scipy.linalg


class Topology(Enum):
    """Spring/boundary arrangements of the stick-and-spring model."""
    SYMMETRIC = "symmetric"
    ANTISYMMETRIC = "antisymmetric"
    ONE_SIDED = "one_sided"
    CHEVRON = "chevron"
    SYMMETRIC_RIGID_RESTRAINER = "symmetric_rigid_restrainer"
    ANTISYMMETRIC_RIGID_RESTRAINER = "antisymmetric_rigid_restrainer"


@dataclass(frozen=True)
class StabilityParams:
    """Normalized stiffness and geometry of a single brace."""
    kappa_g: float  # Gusset rotational stiffness, Kg·ξL0/γEIr
    kappa_r: float  # Restrainer end rotational stiffness, Kr·ξL0/γEIr
    xi: float       # Connection to full buckling length, ξL0/L0
    gamma: float    # Connection to restrainer flexural stiffness, γEIr/EIr

    @property
    def is_degenerate(self) -> bool:
        """True when neither end carries rotational stiffness."""
        return self.kappa_g <= 0 and self.kappa_r <= 0


@dataclass(frozen=True)
class ChevronParams:
    """Normalized stiffness and geometry of the two spans of a chevron pair.

    All stiffnesses of span 2 are normalized by its own ξ2L0 and γ2EIr; the
    trial load is normalized against span 1 (Ncr0 = π²γ1EIr/(ξ1L0)²).
    """
    kappa_g1: float
    kappa_g2: float
    kappa_r1: float
    kappa_r2: float
    xi1: float
    xi2: float
    gamma1: float
    gamma2: float

    @property
    def is_degenerate(self) -> bool:
        return ((self.kappa_g1 <= 0 and self.kappa_r1 <= 0)
                or (self.kappa_g2 <= 0 and self.kappa_r2 <= 0))


Params = Union[StabilityParams, ChevronParams]


def _outside_domain(N: float, kappa_g: float, kappa_r: float, xi: float, gamma: float) -> bool:
    return N < 0 or gamma <= 0 or xi <= 0 or (kappa_g <= 0 and kappa_r <= 0)


def det_symmetric(N: float, kappa_g: float, kappa_r: float, xi: float, gamma: float) -> float:
    """
    Symmetric mode: restrainer translates without rotating.

    Args:
        N: Trial load N/Ncr0
        kappa_g: Normalized gusset stiffness
        kappa_r: Normalized restrainer end stiffness
        xi: Connection length ratio
        gamma: Connection/restrainer stiffness ratio

    Returns:
        Signed determinant (0.0 outside the domain)
    """
    if _outside_domain(N, kappa_g, kappa_r, xi, gamma):
        return 0.0
    rN = np.sqrt(N)
    rg = np.sqrt(gamma)
    S1 = np.sin(rN * np.pi)
    C1 = np.cos(rN * np.pi)
    S2 = np.sin(rN * np.pi * rg / xi * (0.5 - xi))
    C2 = np.cos(rN * np.pi * rg / xi * (0.5 - xi))

    det = (N * np.pi**2 * S1 * C2
           + rN * np.pi * (kappa_r * (rg * S1 * S2 - C1 * C2) - kappa_g * C1 * C2)
           - kappa_g * kappa_r * (S1 * C2 + rg * C1 * S2))
    return float(det)


def det_antisymmetric(N: float, kappa_g: float, kappa_r: float, xi: float, gamma: float) -> float:
    """Antisymmetric mode: restrainer rotates about midspan."""
    if _outside_domain(N, kappa_g, kappa_r, xi, gamma):
        return 0.0
    rN = np.sqrt(N)
    rg = np.sqrt(gamma)
    S1 = np.sin(rN * np.pi)
    C1 = np.cos(rN * np.pi)
    S2 = np.sin(rN * np.pi * rg / xi * (0.5 - xi))
    C2 = np.cos(rN * np.pi * rg / xi * (0.5 - xi))

    det = (rN * N * np.pi**3 * S1 * S2
           - N * np.pi**2 * (kappa_r * (rg * S1 * C2 + C1 * S2) + kappa_g * C1 * S2)
           + np.pi * rN * kappa_g * (2 * xi * S1 * S2 + kappa_r * (rg * C1 * C2 - S1 * S2))
           - 2 * kappa_r * kappa_g * xi * (rg * S1 * C2 + C1 * S2))
    return float(det)


def det_one_sided(N: float, kappa_g: float, kappa_r: float, xi: float, gamma: float) -> float:
    """One-sided mode: connection at one end only, far end pinned."""
    if _outside_domain(N, kappa_g, kappa_r, xi, gamma):
        return 0.0
    rN = np.sqrt(N)
    rg = np.sqrt(gamma)
    S1 = np.sin(rN * np.pi)
    C1 = np.cos(rN * np.pi)
    S10 = np.sin(rN * np.pi * rg * (1 - 1 / xi))
    C10 = np.cos(rN * np.pi * rg * (1 - 1 / xi))

    det = (rN * N * np.pi**3 * S1 * S10
           + np.pi**2 * N * (kappa_r * (rg * S1 * C10 - C1 * S10) - kappa_g * C1 * S10)
           + np.pi * kappa_g * rN * (xi * S1 * S10 - kappa_r * (rg * C1 * C10 + S1 * S10))
           + kappa_r * kappa_g * xi * (rg * S1 * C10 - C1 * S10))
    return float(det)


def chevron_matrix(
    N: float,
    kappa_g1: float, kappa_g2: float,
    kappa_r1: float, kappa_r2: float,
    xi1: float, xi2: float,
    gamma1: float, gamma2: float,
) -> np.ndarray:
    """
    Build the 6x6 stability matrix of the two-span chevron model.

    Rows are continuity/equilibrium conditions at the gusset of span 1, the two
    restrainer ends and the shared midspan connection. When both gussets are
    pinned the last row is replaced by the pinned-gusset continuity condition.

    Returns:
        6x6 matrix M; det(M) = 0 at an eigenvalue
    """
    rN = np.sqrt(N)
    S1 = np.sin(rN * np.pi)
    C1 = np.cos(rN * np.pi)
    S4 = np.sin(rN * np.sqrt(gamma1) * np.pi)
    C4 = np.cos(rN * np.sqrt(gamma1) * np.pi)
    S6 = np.sin(rN * np.sqrt(gamma1 / gamma2) * np.pi / xi1 * (1 - xi2))
    C6 = np.cos(rN * np.sqrt(gamma1 / gamma2) * np.pi / xi1 * (1 - xi2))
    S7 = np.sin(rN * np.sqrt(gamma1) * np.pi / xi1 * (1 - xi2))
    C7 = np.cos(rN * np.sqrt(gamma1) * np.pi / xi1 * (1 - xi2))
    S8 = np.sin(rN * np.sqrt(gamma1 / gamma2) * np.pi / xi1)
    C8 = np.cos(rN * np.sqrt(gamma1 / gamma2) * np.pi / xi1)

    g12 = np.sqrt(gamma1 / gamma2)
    n2 = rN * np.pi * xi2 / xi1 * g12

    if kappa_g1 == 0 and kappa_g2 == 0:
        last_row = [0.0, gamma2 / gamma1, 0.0, 0.0, xi2 / xi1 * S8, xi2 / xi1 * C8]
    else:
        last_row = [
            np.sqrt(gamma2 / gamma1) * kappa_g1 * kappa_g2,
            rN * np.sqrt(gamma2 / gamma1) * np.pi * kappa_g2,
            0.0, 0.0,
            kappa_g1 * n2 * S8 - kappa_g1 * kappa_g2 * C8,
            kappa_g1 * n2 * C8 + kappa_g1 * kappa_g2 * S8,
        ]

    return np.array([
        [kappa_g1 * np.pi / xi1 * rN, kappa_g1 + N * np.pi**2 / xi1, 0.0, 0.0,
         -kappa_g1 * S8, -kappa_g1 * C8],
        [S1, C1, -S4, -C4, 0.0, 0.0],
        [-kappa_r1 * C1, kappa_r1 * S1,
         rN * np.pi * S4 + np.sqrt(gamma1) * kappa_r1 * C4,
         rN * np.pi * C4 - np.sqrt(gamma1) * kappa_r1 * S4, 0.0, 0.0],
        [0.0, 0.0, S7, C7, -S6, -C6],
        [0.0, 0.0, -np.sqrt(gamma2) * kappa_r2 * C7, np.sqrt(gamma2) * kappa_r2 * S7,
         n2 * S6 + kappa_r2 * C6, n2 * C6 - kappa_r2 * S6],
        last_row,
    ], dtype=float)


def det_chevron(
    N: float,
    kappa_g1: float, kappa_g2: float,
    kappa_r1: float, kappa_r2: float,
    xi1: float, xi2: float,
    gamma1: float, gamma2: float,
) -> float:
    """Chevron (two-span) configuration: determinant of the 6x6 stability matrix."""
    if (N < 0 or gamma1 <= 0 or gamma2 <= 0 or xi1 <= 0 or xi2 <= 0
            or (kappa_g1 <= 0 and kappa_r1 <= 0) or (kappa_g2 <= 0 and kappa_r2 <= 0)):
        return 0.0
    M = chevron_matrix(N, kappa_g1, kappa_g2, kappa_r1, kappa_r2, xi1, xi2, gamma1, gamma2)
    return float(scipy.linalg.det(M, check_finite=False))


def _series_spring(kappa_r: float, flexibility: float) -> float:
    # Restrainer end spring in series with the connection zone flexibility
    if kappa_r <= 0:
        return 0.0
    return 1.0 / (1.0 / kappa_r + flexibility)


def det_symmetric_rigid_restrainer(
    N: float, kappa_g: float, kappa_r: float, xi: float, gamma: float
) -> float:
    """
    Simplified symmetric mode excluding the restrainer Pδ contribution.

        @----------@@
        κg         κr'

    κr' = 1 / (1/κr + γ(1-2ξ)/(2ξ))
    """
    if _outside_domain(N, kappa_g, kappa_r, xi, gamma):
        return 0.0
    S1 = np.sin(np.sqrt(N) * np.pi)
    C1 = np.cos(np.sqrt(N) * np.pi)
    n = np.pi * np.sqrt(N)
    kr = _series_spring(kappa_r, gamma * (1 - 2 * xi) / 2 / xi)

    return float(kappa_g * (n * C1 + kr * S1) - n * (n * S1 - kr * C1))


def det_antisymmetric_rigid_restrainer(
    N: float, kappa_g: float, kappa_r: float, xi: float, gamma: float
) -> float:
    """
    Simplified antisymmetric mode excluding the restrainer Pδ contribution.

                -----@@
        @----/     κr'
        κg

    κr' = 1 / (1/κr + γ(1-2ξ)/(6ξ))
    """
    if _outside_domain(N, kappa_g, kappa_r, xi, gamma):
        return 0.0
    S1 = np.sin(np.sqrt(N) * np.pi)
    C1 = np.cos(np.sqrt(N) * np.pi)
    n = np.pi * np.sqrt(N)
    kr = _series_spring(kappa_r, gamma * (1 - 2 * xi) / 6 / xi)

    with np.errstate(divide='ignore', invalid='ignore'):
        M = np.array([
            [0.0, 1.0, 0.0, 1.0, 0.0, 0.0],
            [kappa_g, n, kappa_g / n, 0.0, 0.0, 0.0],
            [S1, C1, 1.0, 1.0, -1.0, -1.0],
            [0.0, 0.0, 1.0, 0.0, -1.0, 0.0],
            [n * S1 - kr * C1, n * C1 + kr * S1, -kr / n, 0.0, kr / n, 0.0],
            [0.0, 0.0, 0.0, 0.0, 1.0 / 2 / xi, 1.0],
        ], dtype=float)
        return float(scipy.linalg.det(M, check_finite=False))


_SINGLE_SPAN: Dict[Topology, Callable[..., float]] = {
    Topology.SYMMETRIC: det_symmetric,
    Topology.ANTISYMMETRIC: det_antisymmetric,
    Topology.ONE_SIDED: det_one_sided,
    Topology.SYMMETRIC_RIGID_RESTRAINER: det_symmetric_rigid_restrainer,
    Topology.ANTISYMMETRIC_RIGID_RESTRAINER: det_antisymmetric_rigid_restrainer,
}


def _check_params(topology: Topology, params: Params) -> None:
    expected = ChevronParams if topology is Topology.CHEVRON else StabilityParams
    if not isinstance(params, expected):
        raise TypeError(
            f"{topology.value} topology needs {expected.__name__}, got {type(params).__name__}"
        )


def characteristic_value(topology: Topology, N: float, params: Params) -> float:
    """
    Evaluate the characteristic equation of a topology at trial load N.

    Args:
        topology: Spring/boundary arrangement
        N: Trial load N/Ncr0
        params: ChevronParams for Topology.CHEVRON, StabilityParams otherwise

    Returns:
        Signed determinant; exactly 0.0 for out-of-domain or degenerate input

    Raises:
        TypeError: If the params type does not match the topology
    """
    _check_params(topology, params)
    if topology is Topology.CHEVRON:
        return det_chevron(
            N,
            params.kappa_g1, params.kappa_g2,
            params.kappa_r1, params.kappa_r2,
            params.xi1, params.xi2,
            params.gamma1, params.gamma2,
        )

    det_func = _SINGLE_SPAN[topology]
    return det_func(N, params.kappa_g, params.kappa_r, params.xi, params.gamma)


def characteristic_function(topology: Topology, params: Params) -> Callable[[float], float]:
    """Bind a topology and its parameters into f(N) for the mode scanner."""
    _check_params(topology, params)
    return lambda N: characteristic_value(topology, N, params)
