"""
EFFECTIVE LENGTH SWEEP DEMO
===========================

Sweeps the gusset (or restrainer end) stiffness of a brace and plots the
elastic effective length factor of each topology.

EXAMPLE USAGE:
--------------
    python demos/run_ke_sweep.py --kappa-r 5 --xi 0.1 --gamma 0.2
    python demos/run_ke_sweep.py --search restrainer --kappa-g 2 --n 60
"""

import argparse
import logging
import os

from brb_buckling.config import ScanSettings
from brb_buckling.crossover import SearchParameter
from brb_buckling.explore import stiffness_grid, sweep_effective_length
from brb_buckling.kernel import StabilityParams, Topology
from brb_buckling.viz import plot_ke_sweep


def main():
    parser = argparse.ArgumentParser(description="Sweep ke over a connection stiffness range")
    parser.add_argument("--search", choices=["gusset", "restrainer"], default="gusset")
    parser.add_argument("--kappa-g", type=float, default=1.0, help="Fixed κg (restrainer search)")
    parser.add_argument("--kappa-r", type=float, default=5.0, help="Fixed κr (gusset search)")
    parser.add_argument("--xi", type=float, default=0.1)
    parser.add_argument("--gamma", type=float, default=0.2)
    parser.add_argument("--min", type=float, default=0.01)
    parser.add_argument("--max", type=float, default=100.0)
    parser.add_argument("--n", type=int, default=40)
    parser.add_argument("--step", type=float, default=1e-3, help="Load increment N/Ncr0")
    parser.add_argument("--out", default="artifacts")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    search = SearchParameter.GUSSET if args.search == "gusset" else SearchParameter.RESTRAINER
    base = StabilityParams(kappa_g=args.kappa_g, kappa_r=args.kappa_r, xi=args.xi, gamma=args.gamma)
    values = stiffness_grid(args.min, args.max, args.n)

    df = sweep_effective_length(
        base, values, search=search,
        topologies=(Topology.SYMMETRIC, Topology.ANTISYMMETRIC, Topology.ONE_SIDED),
        settings=ScanSettings(step=args.step),
    )

    os.makedirs(args.out, exist_ok=True)
    csv_path = os.path.join(args.out, "ke_sweep.csv")
    png_path = os.path.join(args.out, "ke_sweep.png")
    df.to_csv(csv_path, index=False)
    plot_ke_sweep(df, png_path, x=search.value)

    print(df.to_string(index=False, float_format=lambda v: f"{v:.4f}"))
    print(f"\nSaved: {csv_path}")
    print(f"Saved: {png_path}")


if __name__ == "__main__":
    main()
