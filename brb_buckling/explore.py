# Stiffness sweeps of the stick-and-spring model
"""
EXPLORE: HOW DO CONNECTION STIFFNESSES DRIVE BUCKLING?
======================================================

PURPOSE:
--------
A single call answers one question ("what is ke for κg = 2?"). Design work
usually needs the whole curve: how ke and the reduced critical load change as
the gusset or restrainer end gets stiffer, and where the governing mode
switches. This module evaluates the solver over a grid of stiffness values and
returns a pandas DataFrame, one row per grid point, ready for plotting or CSV
export.

Evaluation is sequential; each row is an independent single-query solve.
"""

import logging
from typing import Iterable, List, Sequence

import numpy as np
import pandas as pd

from .capacity import EndCapacity, evaluate_capacity
from .config import DEFAULT_SCAN, ScanSettings
from .crossover import SearchParameter, with_stiffness
from .kernel.characteristic import StabilityParams, Topology, characteristic_function
from .kernel.scanner import find_mode_root

logger = logging.getLogger(__name__)


def stiffness_grid(kappa_min: float, kappa_max: float, n: int, log: bool = True) -> np.ndarray:
    """
    Grid of stiffness values for a sweep.

    Args:
        kappa_min, kappa_max: Range of the grid (both > 0 for a log grid)
        n: Number of points
        log: Logarithmic spacing (stiffnesses span decades)
    """
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")
    if log:
        if kappa_min <= 0:
            raise ValueError("kappa_min must be positive for a logarithmic grid")
        return np.geomspace(kappa_min, kappa_max, n)
    return np.linspace(kappa_min, kappa_max, n)


def sweep_effective_length(
    base: StabilityParams,
    values: Iterable[float],
    search: SearchParameter = SearchParameter.GUSSET,
    topologies: Sequence[Topology] = (Topology.SYMMETRIC, Topology.ANTISYMMETRIC),
    settings: ScanSettings = DEFAULT_SCAN,
) -> pd.DataFrame:
    """
    Elastic effective length factor of several topologies over a stiffness grid.

    Returns:
        DataFrame with columns kappa_g, kappa_r, xi, gamma and one
        ke_<topology> column per topology
    """
    rows: List[dict] = []
    for value in values:
        params = with_stiffness(base, search, float(value))
        row = {
            'kappa_g': params.kappa_g,
            'kappa_r': params.kappa_r,
            'xi': params.xi,
            'gamma': params.gamma,
        }
        for topology in topologies:
            row[f'ke_{topology.value}'] = find_mode_root(
                characteristic_function(topology, params),
                mode_index=settings.mode_index,
                step=settings.step,
                max_search=settings.max_search,
                max_iterations=settings.max_iterations,
            )
        rows.append(row)

    return pd.DataFrame(rows)


def sweep_capacity(
    base: StabilityParams,
    values: Iterable[float],
    delta_r: float,
    gusset: EndCapacity,
    restrainer: EndCapacity,
    search: SearchParameter = SearchParameter.GUSSET,
    settings: ScanSettings = DEFAULT_SCAN,
) -> pd.DataFrame:
    """
    Reduced critical loads of both topologies over a stiffness grid.

    Returns:
        DataFrame with one row per stiffness value, columns:
        - kappa_g, kappa_r: stiffnesses of the row
        - ke_sym, ke_asym: elastic effective length factors
        - gusset_sym, restrainer_sym, gusset_asym, restrainer_asym: candidates
        - ncr_sym, ncr_asym: governing load per topology
        - ratio: ncr_sym / ncr_asym
        - governing: min(ncr_sym, ncr_asym)
        - mode: 'symmetric', 'antisymmetric' or '' when unresolved
    """
    values = list(values)
    logger.info("Sweeping %s over %d values", search.value, len(values))

    rows: List[dict] = []
    for value in values:
        params = with_stiffness(base, search, float(value))
        result = evaluate_capacity(params, delta_r, gusset, restrainer, settings)
        topology = result.governing_topology
        rows.append({
            'kappa_g': params.kappa_g,
            'kappa_r': params.kappa_r,
            'ke_sym': result.ke_sym,
            'ke_asym': result.ke_asym,
            'gusset_sym': result.gusset_sym,
            'restrainer_sym': result.restrainer_sym,
            'gusset_asym': result.gusset_asym,
            'restrainer_asym': result.restrainer_asym,
            'ncr_sym': result.symmetric,
            'ncr_asym': result.antisymmetric,
            'ratio': result.ratio,
            'governing': result.governing,
            'mode': topology.value if topology is not None else '',
        })

    df = pd.DataFrame(rows)
    n_switch = int((df['mode'] != df['mode'].shift()).iloc[1:].sum()) if len(df) > 1 else 0
    logger.info("Sweep complete: governing mode changes %d time(s)", n_switch)
    return df
