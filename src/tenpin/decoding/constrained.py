import numpy as np


def apply_mask(weights: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """
    Zero the weight of illegal pin counts and renormalize.
    """
    w = np.where(mask, weights, 0.0).astype(np.float64)
    total = w.sum()
    if total <= 0:
        raise ValueError("No legal pin count carries weight")
    return w / total


def sample_pins(rng: np.random.Generator, weights: np.ndarray, mask: np.ndarray) -> int:
    p = apply_mask(weights, mask)
    return int(rng.choice(len(p), p=p))
