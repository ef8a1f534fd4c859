from __future__ import annotations
import argparse
import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from pathlib import Path
from tenpin.constants import PERFECT_GAME
from tenpin.eval.metrics import open_rate, score_summary, spare_rate, strike_rate

def plot_score_hist(scores, out_png):
    plt.figure(figsize=(6,4))
    plt.hist(scores, bins=np.arange(0, PERFECT_GAME + 11, 10), alpha=0.7, density=True)
    plt.xlabel("score"); plt.ylabel("density"); plt.title("Final score distribution")
    plt.tight_layout(); plt.savefig(out_png); plt.close()

def write_report(sims: pd.DataFrame, sims_path: str, out: str) -> Path:
    out_path = Path(out)
    out_dir = out_path.parent; out_dir.mkdir(parents=True, exist_ok=True)

    rates = pd.DataFrame({
        "per_frame": ["strikes", "spares", "opens"],
        "rate": [strike_rate(sims), spare_rate(sims), open_rate(sims)],
    }).round(3)
    summary = pd.DataFrame({"score": score_summary(sims["score"].to_numpy())}).round(2)

    hist_png = out_dir / "score_hist.png"
    if len(sims) > 0:
        plot_score_hist(sims["score"], hist_png)

    with open(out_path, "w") as f:
        f.write("# Simulation Score Report\n\n")
        f.write(f"- Sims: **{len(sims):,}** games from `{sims_path}`\n\n")

        f.write("## Marks per frame\n\n")
        f.write(rates.to_string(index=False) + "\n\n")

        f.write("## Final scores\n\n")
        f.write(summary.to_string() + "\n\n")
        if len(sims) > 0:
            f.write(f"![Score histogram]({hist_png.name})\n\n")

        if len(sims) > 0:
            best = sims.loc[sims["score"].idxmax()]
            f.write("## Best game\n\n")
            f.write(f"`{best['card']}` = {int(best['score'])}\n")
    return out_path

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--sims', required=True)
    ap.add_argument('--out', default='runs/report.md')
    args = ap.parse_args()

    sims = pd.read_csv(args.sims)
    write_report(sims, args.sims, args.out)
    print("Wrote", args.out)

if __name__ == "__main__":
    main()
