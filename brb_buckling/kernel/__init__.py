# brb_buckling/kernel - Eigenvalue core of the stick-and-spring model
"""
KERNEL: CHARACTERISTIC EQUATIONS, MODE SCANNER, MODE SHAPES
===========================================================

Everything here is a pure function of scalar inputs:

- characteristic.py   Determinant f(N) of each spring/boundary topology
- scanner.py          Sign-change scan for the m-th eigenvalue (ke) or the
                      m-th solution of g(x) = target
- mode_shapes.py      Rotation/displacement ratios at the solved ke

Failures never raise for bad numbers: they come back as sentinels
(ke = 0 no mode in range, ke = inf degenerate system, nan unsolved).
"""

from .characteristic import (
    Topology,
    StabilityParams,
    ChevronParams,
    characteristic_value,
    characteristic_function,
)
from .scanner import find_mode_root, solve_scalar, ScanLimitError
from .mode_shapes import Location, mode_shape_ratio

__all__ = [
    'Topology',
    'StabilityParams',
    'ChevronParams',
    'characteristic_value',
    'characteristic_function',
    'find_mode_root',
    'solve_scalar',
    'ScanLimitError',
    'Location',
    'mode_shape_ratio',
]
