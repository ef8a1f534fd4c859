from __future__ import annotations

import argparse
import glob
import sys
from pprint import pprint

import numpy as np
import pandas as pd

from tenpin.eval.metrics import open_rate, score_summary, spare_rate, strike_rate


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--sims", default="")
    args = ap.parse_args()

    sim_path = args.sims or (
        sorted(glob.glob("runs/sim_*.csv"))[-1] if glob.glob("runs/sim_*.csv") else ""
    )
    if not sim_path:
        print("No sim csv found in runs/ (expected runs/sim_*.csv)")
        sys.exit(1)

    print(f"\n== Quick Eval ==\nSIMS: {sim_path}\n")
    sys.stdout.flush()

    sims = pd.read_csv(sim_path)

    print("-- Marks per frame --")
    print(f"strikes={strike_rate(sims):.3f}  spares={spare_rate(sims):.3f}  opens={open_rate(sims):.3f}\n")

    print("-- Final scores --")
    pprint(
        {
            k: (round(v, 2) if isinstance(v, int | float | np.floating) else v)
            for k, v in score_summary(sims["score"].to_numpy()).items()
        }
    )
    clean = (sims["opens"] == 0).mean() if len(sims) else np.nan
    print(f"clean games: {clean:.3f}\n")
    sys.stdout.flush()


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        import traceback

        print("quick_eval error:", e)
        traceback.print_exc()
        sys.exit(1)
