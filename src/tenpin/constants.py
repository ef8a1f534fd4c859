from __future__ import annotations

# Lane
PINS = 10
STRIKE = PINS
FRAME_COUNT = 10
PENULTIMATE_FRAME = FRAME_COUNT - 1

# Rolls per frame
FRAME_ROLLS = 2
FINAL_FRAME_MAX_ROLLS = 3

# Error messages
EXCEEDS_PINS_MSG = "Pin count exceeds pins on the lane"
NEGATIVE_ROLL_MSG = "Negative roll is invalid"
GAME_OVER_MSG = "Cannot roll after game is over"
GAME_NOT_COMPLETE_MSG = "Score cannot be taken until the end of the game"

PERFECT_GAME = 300
