from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class FrameKind(str, Enum):
    OPEN = "open"
    STRIKE = "strike"
    SPARE = "spare"
    FINAL_OPEN = "final_open"
    FINAL_STRIKE = "final_strike"
    FINAL_SPARE = "final_spare"

    @property
    def is_final(self) -> bool:
        return self in (FrameKind.FINAL_OPEN, FrameKind.FINAL_STRIKE, FrameKind.FINAL_SPARE)


class GamePhase(str, Enum):
    EMPTY = "empty"
    IN_PROGRESS = "in_progress"
    FINAL_FRAME = "final_frame"
    COMPLETE = "complete"


@dataclass(frozen=True, slots=True)
class Frame:
    kind: FrameKind
    rolls: tuple[int, ...]   # 1..3, chronological

    @property
    def pins(self) -> int:
        return sum(self.rolls)


@dataclass(frozen=True, slots=True)
class Game:
    frames: tuple[Frame, ...] = ()   # frame 1 first, at most 10

    @property
    def rolls(self) -> tuple[int, ...]:
        return tuple(r for f in self.frames for r in f.rolls)

    @property
    def frame_number(self) -> int:
        return len(self.frames)

    @property
    def latest(self) -> Frame | None:
        return self.frames[-1] if self.frames else None
