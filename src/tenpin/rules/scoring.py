from __future__ import annotations
from typing import List, Optional
from tenpin.constants import FRAME_COUNT, STRIKE
from tenpin.errors import GameNotComplete
from tenpin.rules.fsm import frame_complete, is_complete
from tenpin.state import Frame, FrameKind, Game


def _bonus_rolls(frames: tuple[Frame, ...], i: int, n: int) -> Optional[List[int]]:
    """Next ``n`` rolls after frame ``i``, or None if they haven't been bowled."""
    out: List[int] = []
    for f in frames[i + 1:]:
        for r in f.rolls:
            out.append(r)
            if len(out) == n:
                return out
    return None


def frame_value(frames: tuple[Frame, ...], i: int) -> Optional[int]:
    """Points earned in frame ``i`` including bonuses, None while unresolved."""
    f = frames[i]
    if f.kind.is_final:
        return f.pins if frame_complete(f) else None
    if f.kind is FrameKind.STRIKE:
        bonus = _bonus_rolls(frames, i, 2)
        return None if bonus is None else STRIKE + sum(bonus)
    if f.kind is FrameKind.SPARE:
        bonus = _bonus_rolls(frames, i, 1)
        return None if bonus is None else STRIKE + bonus[0]
    return f.pins if frame_complete(f) else None


def score(g: Game) -> int:
    """Final score of a finished game.

    Strikes add the next two rolls, spares the next one; the tenth frame
    already holds its own bonus rolls so it counts at face value.
    """
    if g.frame_number < FRAME_COUNT or not is_complete(g):
        raise GameNotComplete()
    total = 0
    for i in range(FRAME_COUNT):
        total += frame_value(g.frames, i)
    return total


def frame_totals(g: Game) -> List[Optional[int]]:
    """Running scorecard totals; None from the first frame still waiting on rolls."""
    out: List[Optional[int]] = []
    total: Optional[int] = 0
    for i in range(g.frame_number):
        v = frame_value(g.frames, i)
        total = None if (total is None or v is None) else total + v
        out.append(total)
    return out
