from __future__ import annotations
from pydantic import BaseModel, Field
import yaml

class BowlerCfg(BaseModel):
    strike_rate: float = Field(0.2, ge=0.0, le=1.0)   # P(strike) on a full rack
    spare_rate: float = Field(0.35, ge=0.0, le=1.0)   # P(clean-up) on the second ball
    skill: float = Field(0.7, ge=0.0, le=1.0)         # mean share of standing pins otherwise

class SimCfg(BaseModel):
    n_games: int = Field(200, ge=1)
    out: str = "runs/sim_games.csv"

class FullConfig(BaseModel):
    seed: int = 42
    bowler: BowlerCfg = BowlerCfg()
    sim: SimCfg = SimCfg()

def load_config(path: str) -> FullConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    return FullConfig.model_validate(raw)
