"""
VISUALIZATION: STIFFNESS SWEEP PLOTS
====================================

PURPOSE:
--------
Plots of the DataFrames produced by explore.py:

- plot_ke_sweep: elastic effective length factor vs connection stiffness,
  one curve per topology. Higher ke = lower elastic buckling load.

- plot_capacity_sweep: reduced critical load of the symmetric and
  antisymmetric modes vs stiffness, with the governing envelope and the
  crossover stiffness where the governing mode switches.

Stiffness axes are logarithmic; connection stiffnesses span decades.
"""

import math
import os
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

COLORS = {
    'symmetric': '#2C3E50',       # Dark blue-gray
    'antisymmetric': '#E74C3C',   # Coral red
    'one_sided': '#3498DB',       # Sky blue
    'chevron': '#9B59B6',         # Purple
    'governing': '#F39C12',       # Golden yellow
    'crossover': '#27AE60',       # Green
    'grid': '#E0E0E0',
}

FONT_TITLE = {'family': 'sans-serif', 'weight': 'bold', 'size': 14}
FONT_LABEL = {'family': 'sans-serif', 'weight': 'normal', 'size': 11}


def _finalize(fig, ax, outpath: str) -> None:
    ax.grid(True, which='both', color=COLORS['grid'], linewidth=0.6)
    ax.legend(frameon=False)
    fig.tight_layout()
    directory = os.path.dirname(outpath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(outpath, dpi=150)
    plt.close(fig)


def plot_ke_sweep(
    df: pd.DataFrame,
    outpath: str,
    x: str = "kappa_g",
    title: str = "Effective length factor vs connection stiffness",
) -> None:
    """
    Plot every ke_<topology> column of a sweep_effective_length DataFrame.

    Sentinel values (0 = no mode in range, inf = degenerate) are not drawn.
    """
    fig, ax = plt.subplots(figsize=(8, 5))

    for column in [c for c in df.columns if c.startswith('ke_')]:
        name = column[len('ke_'):]
        ke = df[column].to_numpy(dtype=float)
        valid = np.isfinite(ke) & (ke > 0)
        ax.plot(df[x][valid], ke[valid], marker='o', markersize=3,
                color=COLORS.get(name, None), label=name.replace('_', ' '))

    ax.set_xscale('log')
    ax.set_xlabel(x.replace('kappa_', 'κ'), fontdict=FONT_LABEL)
    ax.set_ylabel('ke', fontdict=FONT_LABEL)
    ax.set_title(title, fontdict=FONT_TITLE)
    _finalize(fig, ax, outpath)


def plot_capacity_sweep(
    df: pd.DataFrame,
    outpath: str,
    x: str = "kappa_g",
    crossover: Optional[float] = None,
    title: str = "Reduced critical load vs connection stiffness",
) -> None:
    """
    Plot ncr_sym, ncr_asym and the governing envelope of a sweep_capacity DataFrame.

    Args:
        df: Output of explore.sweep_capacity
        outpath: Image file to write
        x: Stiffness column for the horizontal axis
        crossover: Crossover stiffness to mark (skipped if None or nan)
    """
    fig, ax = plt.subplots(figsize=(8, 5))

    ax.plot(df[x], df['ncr_sym'], color=COLORS['symmetric'], label='symmetric')
    ax.plot(df[x], df['ncr_asym'], color=COLORS['antisymmetric'], label='antisymmetric')
    ax.plot(df[x], df['governing'], color=COLORS['governing'], linewidth=3,
            alpha=0.5, label='governing')

    if crossover is not None and not math.isnan(crossover):
        ax.axvline(crossover, color=COLORS['crossover'], linestyle='--',
                   label=f'crossover = {crossover:.3g}')

    ax.set_xscale('log')
    ax.set_xlabel(x.replace('kappa_', 'κ'), fontdict=FONT_LABEL)
    ax.set_ylabel('Ncr / Ncr0', fontdict=FONT_LABEL)
    ax.set_title(title, fontdict=FONT_TITLE)
    _finalize(fig, ax, outpath)
