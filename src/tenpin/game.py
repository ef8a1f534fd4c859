"""
Public entry points for a single bowling game.

    g = start()
    for pins in (10, 7, 3, 9, 0):
        g = roll(g, pins)
    frame_totals(g)   # [20, 39, 48]

A Game is an immutable value: keep the last one ``roll`` returned and keep
using it after a rejected roll.
"""
from __future__ import annotations

from tenpin.features.notation import parse_notation, to_notation
from tenpin.rules.fsm import is_complete, legal_pins, phase, roll
from tenpin.rules.scoring import frame_totals, score
from tenpin.state import Game

__all__ = [
    "Game",
    "start",
    "roll",
    "score",
    "frame_totals",
    "legal_pins",
    "phase",
    "is_complete",
    "to_notation",
    "parse_notation",
]


def start() -> Game:
    return Game()
