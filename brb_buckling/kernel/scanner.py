# brb_buckling/kernel/scanner.py
"""Fixed-increment sign-change scanner for eigenvalues and scalar equations.

Both entry points march forward along an ascending grid and stop at the m-th
sign change. There is no bisection inside a step: the reported location is the
last grid point BEFORE the sign flip, so it is stale by up to one step. Two
sign changes that fall inside a single step cancel out and are not seen; use a
smaller step if roots are closely spaced.
"""

import logging
import math
from typing import Callable

from ..config import DEFAULT_SCAN

logger = logging.getLogger(__name__)


class ScanLimitError(RuntimeError):
    """Raised when a scan would need more grid points than allowed."""
    pass


def _grid_size(start: float, stop: float, step: float, max_iterations: int) -> int:
    if not math.isfinite(step) or step <= 0:
        raise ValueError(f"step must be a positive finite number, got {step}")
    if not math.isfinite(start) or not math.isfinite(stop):
        raise ValueError(f"scan range must be finite, got [{start}, {stop}]")
    n_points = max(0, math.ceil((stop - start) / step))
    if n_points > max_iterations:
        raise ScanLimitError(
            f"Scan of [{start}, {stop}] with step {step} needs {n_points} points "
            f"(limit {max_iterations}). Use a larger step."
        )
    return n_points


def find_mode_root(
    equation: Callable[[float], float],
    mode_index: int = DEFAULT_SCAN.mode_index,
    step: float = DEFAULT_SCAN.step,
    max_search: float = DEFAULT_SCAN.max_search,
    max_iterations: int = DEFAULT_SCAN.max_iterations,
) -> float:
    """
    Effective length factor of the m-th buckling mode of a characteristic equation.

    Scans N = step, 2·step, ... < max_search and returns ke = 1/√N at the grid
    point preceding the mode_index-th sign change.

    Args:
        equation: Characteristic equation f(N)
        mode_index: Mode number (1 = lowest eigenvalue)
        step: Load increment dN (as N/Ncr0)
        max_search: Scan ceiling (as N/Ncr0)
        max_iterations: Upper bound on the number of grid points

    Returns:
        ke > 0 for a located mode,
        0.0 if no sign change occurs below max_search (no buckling in range),
        inf if the equation is identically zero (degenerate system),
        nan if the equation is nan at the first grid point

    Raises:
        ValueError: If step is not positive or mode_index < 1
        ScanLimitError: If the grid would exceed max_iterations points
    """
    if mode_index < 1:
        raise ValueError(f"mode_index must be >= 1, got {mode_index}")
    n_points = _grid_size(step, max_search, step, max_iterations)

    det = equation(step)
    if math.isnan(det):
        return math.nan
    if det == 0:
        logger.debug("Characteristic equation is identically zero: ke = inf")
        return math.inf

    sign = 1.0 if det > 0 else -1.0
    remaining = mode_index

    for i in range(1, n_points + 1):
        N = i * step
        if N >= max_search:
            break
        det = equation(N)
        # nan samples carry no sign and never count as a crossing
        if det * sign < 0:
            remaining -= 1
            sign = -sign
            if remaining < 1:
                ke = 1.0 / math.sqrt((i - 1) * step)
                logger.debug("Mode %d located at N=%.6g (ke=%.6g)", mode_index, (i - 1) * step, ke)
                return ke

    logger.debug("No mode %d below N=%.6g: ke = 0", mode_index, max_search)
    return 0.0


def solve_scalar(
    equation: Callable[[float], float],
    target: float,
    x_min: float,
    x_max: float,
    step: float,
    occurrence: int = 1,
    max_iterations: int = DEFAULT_SCAN.max_iterations,
) -> float:
    """
    Location of the m-th crossing of equation(x) = target on [x_min, x_max).

    Args:
        equation: Scalar function g(x)
        target: Value being located
        x_min, x_max: Scan range
        step: Grid increment
        occurrence: Which crossing to return (1 = first)
        max_iterations: Upper bound on the number of grid points

    Returns:
        x of the grid point preceding the crossing, or nan if the scan finds
        no crossing, the function is nan at x_min, or g(x_min) == g(x_max)

    Raises:
        ValueError: If step is not positive or occurrence < 1
        ScanLimitError: If the grid would exceed max_iterations points
    """
    if occurrence < 1:
        raise ValueError(f"occurrence must be >= 1, got {occurrence}")
    n_points = _grid_size(x_min, x_max, step, max_iterations)

    val = equation(x_min)
    if math.isnan(val):
        return math.nan
    if val == equation(x_max):
        logger.debug("g(x_min) == g(x_max): no distinguishable crossing")
        return math.nan

    sign = 1.0 if val - target > 0 else -1.0
    remaining = occurrence

    for i in range(n_points):
        x = x_min + i * step
        if x >= x_max:
            break
        val = equation(x)
        if (val - target) * sign < 0:
            remaining -= 1
            sign = -sign
            if remaining < 1:
                return x_min + (i - 1) * step

    logger.debug("No crossing %d of target %.6g on [%.6g, %.6g]", occurrence, target, x_min, x_max)
    return math.nan
