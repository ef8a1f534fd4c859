"""
Scorecard symbols, kept in one place so the renderer and parser agree.
X strike, / spare, - gutter, F foul (scored as a gutter), digits otherwise.
"""
from __future__ import annotations

from tenpin.constants import PINS, STRIKE
from tenpin.errors import GameOver, NotationError
from tenpin.rules.fsm import fresh_rack, is_complete, roll, standing_pins
from tenpin.state import Frame, FrameKind, Game

STRIKE_SYM = "X"
SPARE_SYM = "/"
GUTTER_SYM = "-"
FOUL_SYM = "F"


def _pin_sym(pins: int) -> str:
    return GUTTER_SYM if pins == 0 else str(pins)


def frame_notation(f: Frame) -> str:
    if f.kind is FrameKind.STRIKE:
        return STRIKE_SYM
    if f.kind is FrameKind.SPARE:
        return _pin_sym(f.rolls[0]) + SPARE_SYM
    if not f.kind.is_final:
        return "".join(_pin_sym(r) for r in f.rolls)

    # tenth frame: the rack can reset mid-frame
    out = []
    fresh, prev = True, 0
    for r in f.rolls:
        if fresh:
            out.append(STRIKE_SYM if r == STRIKE else _pin_sym(r))
            fresh, prev = r == STRIKE, r
        else:
            out.append(SPARE_SYM if prev + r == PINS else _pin_sym(r))
            fresh = True
    return "".join(out)


def to_notation(g: Game) -> str:
    return " ".join(frame_notation(f) for f in g.frames)


def parse_notation(text: str) -> Game:
    """Build a Game from scorecard text such as ``"X 7/ 9- X X X X X X XXX"``.

    Each symbol goes through ``roll`` so illegal sequences raise the usual
    rule errors; unreadable text raises ``NotationError``.
    """
    g = Game()
    for ch in "".join(text.split()):
        if is_complete(g):
            raise GameOver()
        if ch in (STRIKE_SYM, STRIKE_SYM.lower()):
            if not fresh_rack(g):
                raise NotationError("Strike mark on a rack that already has a first ball")
            pins = STRIKE
        elif ch in (GUTTER_SYM, FOUL_SYM):
            pins = 0
        elif ch in "0123456789":
            pins = int(ch)
        elif ch == SPARE_SYM:
            if fresh_rack(g):
                raise NotationError("Spare mark needs a first ball on the same rack")
            pins = standing_pins(g)
        else:
            raise NotationError(f"Unknown scorecard symbol {ch!r}")
        g = roll(g, pins)
    return g
