"""
CRITICAL MODE CROSSOVER DEMO
============================

Finds the connection stiffness at which the governing buckling mode of a BRB
switches between symmetric and antisymmetric, and plots both reduced critical
loads over the search range.

EXAMPLE USAGE:
--------------
    python demos/run_mode_crossover.py
    python demos/run_mode_crossover.py --search gusset --kappa-r 10 --theta-pr 0.02
"""

import argparse
import logging
import math
import os

from brb_buckling.capacity import EndCapacity
from brb_buckling.config import ScanSettings
from brb_buckling.crossover import SearchParameter, critical_mode_crossover
from brb_buckling.explore import stiffness_grid, sweep_capacity
from brb_buckling.kernel import StabilityParams
from brb_buckling.viz import plot_capacity_sweep


def main():
    parser = argparse.ArgumentParser(description="Locate the sym/asym crossover stiffness")
    parser.add_argument("--search", choices=["gusset", "restrainer"], default="restrainer")
    parser.add_argument("--kappa-g", type=float, default=2.0)
    parser.add_argument("--kappa-r", type=float, default=5.0)
    parser.add_argument("--xi", type=float, default=0.1)
    parser.add_argument("--gamma", type=float, default=1e-6)
    parser.add_argument("--delta-r", type=float, default=1.0, help="Normalized imperfection ar/ξL0")
    parser.add_argument("--theta-pg", type=float, default=1e6, help="Gusset plastic rotation Mp/Kg")
    parser.add_argument("--theta-0g", type=float, default=0.0)
    parser.add_argument("--theta-pr", type=float, default=0.0, help="Restrainer end plastic rotation Mp/Kr")
    parser.add_argument("--theta-0r", type=float, default=0.0)
    parser.add_argument("--min", type=float, default=0.01)
    parser.add_argument("--max", type=float, default=100.0)
    parser.add_argument("--tol", type=float, default=0.05, help="Step of the crossover search")
    parser.add_argument("--step", type=float, default=1e-3, help="Load increment N/Ncr0")
    parser.add_argument("--out", default="artifacts")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    search = SearchParameter.GUSSET if args.search == "gusset" else SearchParameter.RESTRAINER
    base = StabilityParams(kappa_g=args.kappa_g, kappa_r=args.kappa_r, xi=args.xi, gamma=args.gamma)
    gusset = EndCapacity(theta_p=args.theta_pg, theta_0=args.theta_0g)
    restrainer = EndCapacity(theta_p=args.theta_pr, theta_0=args.theta_0r)
    scan = ScanSettings(step=args.step)

    critical = critical_mode_crossover(
        base, (args.min, args.max), args.tol,
        search=search, delta_r=args.delta_r,
        gusset=gusset, restrainer=restrainer, scan=scan,
    )

    df = sweep_capacity(base, stiffness_grid(args.min, args.max, 40), args.delta_r,
                        gusset, restrainer, search=search, settings=scan)

    os.makedirs(args.out, exist_ok=True)
    png_path = os.path.join(args.out, "mode_crossover.png")
    plot_capacity_sweep(df, png_path, x=search.value, crossover=critical)

    if math.isnan(critical):
        print(f"No crossover in [{args.min}, {args.max}]: "
              f"'{df['mode'].iloc[0]}' governs throughout")
    else:
        print(f"Critical {search.value} = {critical:.4f} (±{args.tol})")
        print(f"  below: {df['mode'].iloc[0]} governs")
        print(f"  above: {df['mode'].iloc[-1]} governs")
    print(f"Saved: {png_path}")


if __name__ == "__main__":
    main()
