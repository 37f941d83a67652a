# brb_buckling - Stick-and-spring buckling solver for buckling-restrained braces
"""
BRB_BUCKLING: ELASTIC AND INELASTIC BUCKLING OF RESTRAINED BRACES
=================================================================

This package provides:
- Characteristic equations of the stick-and-spring model (symmetric,
  antisymmetric, one-sided, chevron and simplified rigid-restrainer topologies)
- A sign-change scanner for the m-th eigenvalue (effective length factor)
- Closed-form mode shapes at the solved eigenvalue
- The reduced (inelastic) critical load with plastic hinges at the ends
- The stiffness at which the governing mode switches (sym vs asym)

ARCHITECTURE:
-------------
    kernel/         Characteristic equations, scanner, mode shapes
    config.py       Scan and crossover defaults
    capacity.py     Reduced critical load and governing limit state
    crossover.py    Symmetric/antisymmetric crossover search
    elastic.py      Elastic loads in force units
    explore.py      Stiffness sweeps into DataFrames
    viz.py          Sweep plots
"""

from .kernel import (
    Topology,
    StabilityParams,
    ChevronParams,
    Location,
    ScanLimitError,
    characteristic_value,
    characteristic_function,
    find_mode_root,
    solve_scalar,
    mode_shape_ratio,
)
from .config import ScanSettings, CrossoverSettings, DimensionalSettings
from .capacity import (
    EndCapacity,
    CapacityBreakdown,
    reduced_critical_load,
    evaluate_capacity,
    governing_critical_load,
)
from .crossover import SearchParameter, critical_mode_crossover, mode_ratio

__version__ = "0.1.0"
