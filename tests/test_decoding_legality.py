import numpy as np
import pytest

from tenpin.config import BowlerCfg
from tenpin.decoding.constrained import apply_mask, sample_pins
from tenpin.decoding.knobs import pin_weights


def test_mask_zeroes_illegal_pins():
    w = np.full(11, 1.0)
    mask = np.arange(11) <= 3
    p = apply_mask(w, mask)
    assert p[4:].sum() == 0
    assert np.isclose(p.sum(), 1.0)


def test_mask_without_weight_raises():
    w = np.zeros(11)
    w[10] = 1.0
    with pytest.raises(ValueError):
        apply_mask(w, np.arange(11) <= 3)


def test_sample_stays_legal():
    rng = np.random.default_rng(0)
    mask = np.arange(11) <= 4
    w = pin_weights(10, True, BowlerCfg())
    for _ in range(200):
        assert sample_pins(rng, w, mask) <= 4


def test_pin_weights_shape():
    b = BowlerCfg(strike_rate=0.3, spare_rate=0.5, skill=0.6)
    w = pin_weights(10, True, b)
    assert np.isclose(w.sum(), 1.0)
    assert np.isclose(w[10], 0.3)
    w = pin_weights(4, False, b)
    assert np.isclose(w.sum(), 1.0)
    assert np.isclose(w[4], 0.5)
    assert w[5:].sum() == 0


def test_pin_weights_full_skill():
    w = pin_weights(6, False, BowlerCfg(skill=1.0, spare_rate=0.0))
    assert w[6] == 1.0
