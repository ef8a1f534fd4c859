from __future__ import annotations
import numpy as np
from dataclasses import replace
from tenpin.constants import (EXCEEDS_PINS_MSG, FINAL_FRAME_MAX_ROLLS, FRAME_COUNT,
                              FRAME_ROLLS, NEGATIVE_ROLL_MSG, PENULTIMATE_FRAME, PINS, STRIKE)
from tenpin.errors import GameOver, InvalidPinCount
from tenpin.state import Frame, FrameKind, Game, GamePhase


def validate_pins(pins: int) -> int:
    """Range check done before any frame placement."""
    if isinstance(pins, bool) or not isinstance(pins, (int, np.integer)):
        raise TypeError(f"pins must be an int, got {type(pins).__name__}")
    if pins > PINS:
        raise InvalidPinCount(EXCEEDS_PINS_MSG)
    if pins < 0:
        raise InvalidPinCount(NEGATIVE_ROLL_MSG)
    return int(pins)


def frame_complete(f: Frame) -> bool:
    if f.kind in (FrameKind.STRIKE, FrameKind.SPARE):
        return True
    if f.kind in (FrameKind.FINAL_STRIKE, FrameKind.FINAL_SPARE):
        return len(f.rolls) == FINAL_FRAME_MAX_ROLLS
    # OPEN, FINAL_OPEN
    return len(f.rolls) == FRAME_ROLLS


def phase(g: Game) -> GamePhase:
    if not g.frames:
        return GamePhase.EMPTY
    if g.frame_number < FRAME_COUNT:
        return GamePhase.IN_PROGRESS
    if frame_complete(g.frames[-1]):
        return GamePhase.COMPLETE
    return GamePhase.FINAL_FRAME


def is_complete(g: Game) -> bool:
    return phase(g) is GamePhase.COMPLETE


def _push(g: Game, f: Frame) -> Game:
    return replace(g, frames=g.frames + (f,))


def _swap_latest(g: Game, f: Frame) -> Game:
    return replace(g, frames=g.frames[:-1] + (f,))


def _new_frame(pins: int) -> Frame:
    if pins == STRIKE:
        return Frame(FrameKind.STRIKE, (STRIKE,))
    return Frame(FrameKind.OPEN, (pins,))


def _new_final_frame(pins: int) -> Frame:
    if pins == STRIKE:
        return Frame(FrameKind.FINAL_STRIKE, (STRIKE,))
    return Frame(FrameKind.FINAL_OPEN, (pins,))


def _complete_frame(f: Frame, pins: int) -> Frame:
    first = f.rolls[0]
    total = first + pins
    if total > PINS:
        raise InvalidPinCount(EXCEEDS_PINS_MSG)
    if total == PINS:
        return Frame(FrameKind.SPARE, (first, pins))
    return Frame(FrameKind.OPEN, (first, pins))


def _play_final_frame(f: Frame, pins: int) -> Frame:
    if f.kind is FrameKind.FINAL_STRIKE:
        if len(f.rolls) == 2:
            second = f.rolls[1]
            # rack only resets if the second ball was also a strike
            if second < STRIKE and second + pins > PINS:
                raise InvalidPinCount(EXCEEDS_PINS_MSG)
        return Frame(FrameKind.FINAL_STRIKE, f.rolls + (pins,))
    if f.kind is FrameKind.FINAL_SPARE:
        return Frame(FrameKind.FINAL_SPARE, f.rolls + (pins,))
    if f.kind is FrameKind.FINAL_OPEN:
        first = f.rolls[0]
        if first + pins > PINS:
            raise InvalidPinCount(EXCEEDS_PINS_MSG)
        if first + pins == PINS:
            return Frame(FrameKind.FINAL_SPARE, (first, pins))
        return Frame(FrameKind.FINAL_OPEN, (first, pins))
    raise ValueError(f"{f.kind.value} frame cannot be the final frame")


def roll(g: Game, pins: int) -> Game:
    """Return the game after ``pins`` are knocked down.

    Raises ``InvalidPinCount`` or ``GameOver`` for an illegal roll; ``g`` itself
    is never modified, so it remains the current state after a rejection.
    """
    pins = validate_pins(pins)
    latest = g.latest
    if latest is None:
        return _push(g, _new_frame(pins))

    if g.frame_number == FRAME_COUNT:
        if frame_complete(latest):
            raise GameOver()
        return _swap_latest(g, _play_final_frame(latest, pins))

    if frame_complete(latest):
        if g.frame_number == PENULTIMATE_FRAME:
            return _push(g, _new_final_frame(pins))
        return _push(g, _new_frame(pins))
    return _swap_latest(g, _complete_frame(latest, pins))


def fresh_rack(g: Game) -> bool:
    """True when the next ball is the first one at a full rack."""
    latest = g.latest
    if latest is None:
        return True
    if g.frame_number < FRAME_COUNT:
        return frame_complete(latest)
    # tenth frame: a strike or a spare resets the rack
    return latest.kind is FrameKind.FINAL_SPARE or latest.rolls[-1] == STRIKE


def standing_pins(g: Game) -> int:
    """Pins on the deck for the next delivery (0 once the game is over)."""
    if is_complete(g):
        return 0
    if fresh_rack(g):
        return PINS
    return PINS - g.latest.rolls[-1]


def legal_pins(g: Game) -> np.ndarray:
    """Boolean mask over 0..10: entry k is True iff ``roll(g, k)`` succeeds."""
    if is_complete(g):
        return np.zeros(PINS + 1, dtype=bool)
    return np.arange(PINS + 1) <= standing_pins(g)
