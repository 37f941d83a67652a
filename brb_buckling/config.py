# brb_buckling/config.py
"""
Solver configuration and defaults.

Every scan in the package takes its increment, mode number and ceiling from a
ScanSettings instance instead of loosely-typed optional arguments. The module
level DEFAULT_* instances carry the values used when a caller passes nothing.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class ScanSettings:
    """Settings for the eigenvalue (effective length factor) scan."""

    # Load increment, as a fraction of the reference load Ncr0
    step: float = 1e-4
    # Ordinal of the eigenvalue to return (1 = lowest)
    mode_index: int = 1
    # Ceiling of the scan, as N/Ncr0
    max_search: float = 2.0
    # Upper bound on grid points; a scan needing more raises ScanLimitError
    max_iterations: int = 10_000_000

    def with_overrides(self, **changes) -> "ScanSettings":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class CrossoverSettings:
    """Settings for the symmetric/antisymmetric crossover search."""

    # Step of the outer stiffness scan
    tolerance: float = 1e-3
    # Capacity ratio (symmetric / antisymmetric) being located
    target: float = 1.0


@dataclass(frozen=True)
class DimensionalSettings:
    """Settings for the force-unit elastic load wrappers.

    The scan increment is either an absolute force tolerance (in the units of
    the inputs) or, when tolerance is None, a fraction of Ncr0. The relative
    default keeps the number of grid points independent of the unit system:
    an N·mm brace has Ncr0 ~ 1e11 and a 1.0 force increment would need
    ~1e11 grid points.
    """

    # Load increment in force units; None scans in relative_step·Ncr0 increments
    tolerance: Optional[float] = None
    # Load increment as N/Ncr0, used when tolerance is None
    relative_step: float = 1e-4
    # Ceiling of the scan, as N/Ncr0
    max_search: float = 1.0
    # Upper bound on grid points; a scan needing more raises ScanLimitError
    max_iterations: int = 10_000_000

    def step_for(self, Ncr0: float) -> float:
        """Scan increment as N/Ncr0 for a brace with reference load Ncr0."""
        if self.tolerance is None:
            return self.relative_step
        return self.tolerance / Ncr0


# Global default instances
DEFAULT_SCAN = ScanSettings()
DEFAULT_CROSSOVER = CrossoverSettings()
DEFAULT_DIMENSIONAL = DimensionalSettings()
