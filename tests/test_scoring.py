import pytest

from tenpin.errors import ErrorKind, GameNotComplete
from tenpin.game import frame_totals, roll, score, start


def play(rolls):
    g = start()
    for r in rolls:
        g = roll(g, r)
    return g


def test_gutter_game():
    assert score(play([0] * 20)) == 0


def test_all_ones():
    assert score(play([1] * 20)) == 20


def test_perfect_game():
    assert score(play([10] * 12)) == 300


def test_all_fives():
    assert score(play([5] * 21)) == 150


def test_single_strike_then_gutters():
    assert score(play([10] + [0] * 18)) == 10


def test_strike_bonus_counts_next_two_rolls():
    assert score(play([10, 5, 3] + [0] * 16)) == 26


def test_spare_bonus_counts_next_roll():
    assert score(play([6, 4, 3] + [0] * 17)) == 16


def test_consecutive_strikes():
    assert score(play([10, 10, 10, 5, 3] + [0] * 12)) == 81


def test_tenth_frame_strike_bonus_rolls():
    assert score(play([0] * 18 + [10, 7, 1])) == 18
    assert score(play([0] * 18 + [10, 10, 10])) == 30


def test_tenth_frame_spare_bonus_roll():
    assert score(play([0] * 18 + [7, 3, 10])) == 20


def test_strike_before_tenth_uses_tenth_rolls():
    assert score(play([0] * 16 + [10, 10, 10, 10])) == 60
    assert score(play([0] * 16 + [10, 3, 7, 2])) == 32


def test_two_strikes_into_tenth():
    assert score(play([0] * 14 + [10, 10, 4, 2])) == 46


@pytest.mark.parametrize("rolls", [[], [10] * 9, [0] * 18 + [10, 10], [0] * 18 + [4, 6], [0] * 19])
def test_incomplete_game_cannot_be_scored(rolls):
    with pytest.raises(GameNotComplete, match="Score cannot be taken until the end of the game") as exc:
        score(play(rolls))
    assert exc.value.kind is ErrorKind.GAME_NOT_COMPLETE


def test_score_is_deterministic():
    g = play([10, 9, 1, 5, 5, 7, 2, 10, 10, 10, 9, 0, 8, 2, 9, 1, 10])
    assert score(g) == score(g) == 187


def test_frame_totals_running():
    g = play([10, 7, 3, 9, 0])
    assert frame_totals(g) == [20, 39, 48]


def test_frame_totals_pending_bonus():
    assert frame_totals(play([10, 3])) == [None, None]
    assert frame_totals(play([4, 6])) == [None]
    assert frame_totals(play([4, 5, 2])) == [9, None]


def test_frame_totals_end_with_score():
    g = play([10] * 12)
    totals = frame_totals(g)
    assert totals == [30 * i for i in range(1, 11)]
    assert totals[-1] == score(g)
