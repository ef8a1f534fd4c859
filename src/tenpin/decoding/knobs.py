from __future__ import annotations
from math import comb
import numpy as np
from tenpin.config import BowlerCfg
from tenpin.constants import PINS

def pin_weights(standing: int, fresh_rack: bool, bowler: BowlerCfg) -> np.ndarray:
    """Distribution over 0..10 pins for the next ball with `standing` pins up.

    Clearing the deck happens with strike_rate on a fresh rack and spare_rate
    otherwise; the remaining mass is binomial(standing, skill) over leaves.
    """
    w = np.zeros(PINS + 1, dtype=np.float64)
    if standing <= 0:
        w[0] = 1.0
        return w
    clear = bowler.strike_rate if fresh_rack else bowler.spare_rate
    k = np.arange(standing)
    leave = np.array([comb(standing, int(i)) for i in k], dtype=np.float64)
    leave *= bowler.skill ** k * (1.0 - bowler.skill) ** (standing - k)
    if leave.sum() > 0:
        w[:standing] = (1.0 - clear) * leave / leave.sum()
        w[standing] = clear
    else:
        # skill == 1.0: every ball clears the deck
        w[standing] = 1.0
    return w
