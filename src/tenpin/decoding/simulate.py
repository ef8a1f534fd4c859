from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np
import pandas as pd

from tenpin.config import BowlerCfg, FullConfig, SimCfg, load_config
from tenpin.decoding.constrained import sample_pins
from tenpin.decoding.knobs import pin_weights
from tenpin.features.notation import SPARE_SYM, STRIKE_SYM, to_notation
from tenpin.game import Game, is_complete, legal_pins, roll, score, start
from tenpin.rules.fsm import fresh_rack, standing_pins
from tenpin.state import FrameKind


def simulate_game(rng: np.random.Generator, bowler: BowlerCfg) -> Game:
    g = start()
    while not is_complete(g):
        w = pin_weights(standing_pins(g), fresh_rack(g), bowler)
        g = roll(g, sample_pins(rng, w, legal_pins(g)))
    return g


def game_row(idx: int, g: Game) -> dict:
    card = to_notation(g)
    return {
        "game": idx,
        "score": score(g),
        "strikes": card.count(STRIKE_SYM),
        "spares": card.count(SPARE_SYM),
        "opens": sum(f.kind in (FrameKind.OPEN, FrameKind.FINAL_OPEN) for f in g.frames),
        "card": card,
    }


def simulate_games(n_games: int, cfg: FullConfig) -> pd.DataFrame:
    rng = np.random.default_rng(cfg.seed)
    rows = [game_row(i, simulate_game(rng, cfg.bowler)) for i in range(n_games)]
    return pd.DataFrame(rows, columns=["game", "score", "strikes", "spares", "opens", "card"])


def main(argv=None):
    ap = argparse.ArgumentParser(description="Simulate single-bowler ten-pin games.")
    ap.add_argument("--config", type=str, default="")
    ap.add_argument("--n_games", type=int, default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--out", type=str, default=None)
    args = ap.parse_args(argv)

    cfg = load_config(args.config) if args.config else FullConfig()
    if args.seed is not None:
        cfg = cfg.model_copy(update={"seed": args.seed})
    # command-line overrides go back through SimCfg so they are range checked
    sim = SimCfg(
        n_games=args.n_games if args.n_games is not None else cfg.sim.n_games,
        out=args.out if args.out is not None else cfg.sim.out,
    )
    out = Path(sim.out)

    df = simulate_games(sim.n_games, cfg)
    out.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out, index=False)
    print(f"Simulated {len(df)} games, mean score {df['score'].mean():.1f}")
    print("Saved", out)


if __name__ == "__main__":
    main()
