import random

import pytest

from minesweeper.game import Minesweeper


class _ScriptedRng:
    """Returns the given integers in order from randint."""

    def __init__(self, values):
        self._values = iter(values)

    def randint(self, low, high):
        value = next(self._values)
        assert low <= value <= high
        return value


def _cells(game):
    return [(x, y) for y in range(game.height) for x in range(game.width)]


def _corner_mine_game():
    # One mine at (0, 0) on a 3x3 board.
    return Minesweeper(3, 3, 1, rng=_ScriptedRng([0, 0]))


@pytest.mark.parametrize("seed", [0, 1, 42, 1234])
def test_mine_count_matches_requested(seed):
    game = Minesweeper(9, 9, 10, rng=random.Random(seed))
    assert sum(game.is_mine(x, y) for x, y in _cells(game)) == 10


@pytest.mark.parametrize("seed", [3, 7, 99])
def test_numbers_match_adjacent_counts(seed):
    game = Minesweeper(9, 9, 10, rng=random.Random(seed))
    for x, y in _cells(game):
        if game.is_mine(x, y):
            assert game.number(x, y) == -1
        else:
            assert game.number(x, y) == game.count_adjacent_mines(x, y)
            assert 0 <= game.number(x, y) <= 8


def test_scripted_mine_placement_and_numbers():
    game = _corner_mine_game()
    assert game.is_mine(0, 0)
    assert game.number(1, 0) == 1
    assert game.number(1, 1) == 1
    assert game.number(0, 1) == 1
    assert game.number(2, 2) == 0


def test_duplicate_position_is_redrawn():
    game = Minesweeper(2, 2, 2, rng=_ScriptedRng([0, 0, 0, 0, 1, 1]))
    assert game.is_mine(0, 0)
    assert game.is_mine(1, 1)
    assert not game.is_mine(1, 0)
    assert not game.is_mine(0, 1)


def test_flood_fill_from_zero_wins():
    game = _corner_mine_game()
    game.reveal(2, 2)
    assert all(game.is_revealed(x, y) for x, y in _cells(game) if (x, y) != (0, 0))
    assert not game.is_revealed(0, 0)
    assert game.game_won
    assert not game.game_over


def test_numbered_cell_does_not_flood():
    game = _corner_mine_game()
    game.reveal(1, 1)
    revealed = [c for c in _cells(game) if game.is_revealed(*c)]
    assert revealed == [(1, 1)]
    assert not game.game_won


def test_flag_blocks_flood_and_reveal():
    game = _corner_mine_game()
    game.toggle_flag(2, 0)
    game.reveal(2, 0)
    assert not game.is_revealed(2, 0)
    game.reveal(2, 2)
    assert not game.is_revealed(2, 0)
    assert game.is_flagged(2, 0)
    assert not game.game_won


def test_revealing_mine_ends_game_and_shows_all_mines():
    game = Minesweeper(5, 5, 6, rng=random.Random(5))
    mines = [c for c in _cells(game) if game.is_mine(*c)]
    game.reveal(*mines[0])
    assert game.game_over
    assert not game.game_won
    assert all(game.is_revealed(*c) for c in mines)
    assert not any(game.is_revealed(*c) for c in _cells(game) if c not in mines)


def test_win_by_revealing_every_safe_cell():
    game = Minesweeper(6, 6, 8, rng=random.Random(11))
    for cell in _cells(game):
        if not game.is_mine(*cell):
            game.reveal(*cell)
    assert game.game_won
    assert not game.game_over


def test_zero_mines_single_reveal_wins():
    game = Minesweeper(4, 3, 0, rng=random.Random(0))
    game.reveal(0, 0)
    assert all(game.is_revealed(x, y) for x, y in _cells(game))
    assert game.game_won


def test_full_board_of_mines():
    game = Minesweeper(3, 2, 6, rng=random.Random(2))
    assert all(game.is_mine(x, y) for x, y in _cells(game))


def test_toggle_flag_twice_restores():
    game = _corner_mine_game()
    game.toggle_flag(1, 1)
    assert game.is_flagged(1, 1)
    game.toggle_flag(1, 1)
    assert not game.is_flagged(1, 1)


def test_cannot_flag_revealed_cell():
    game = _corner_mine_game()
    game.reveal(1, 1)
    game.toggle_flag(1, 1)
    assert not game.is_flagged(1, 1)


def test_out_of_range_queries_and_actions():
    game = _corner_mine_game()
    for x, y in [(-1, 0), (0, -1), (3, 0), (0, 3)]:
        game.reveal(x, y)
        game.toggle_flag(x, y)
        assert not game.is_revealed(x, y)
        assert not game.is_flagged(x, y)
        assert not game.is_mine(x, y)
        assert game.number(x, y) == 0
    assert not any(game.is_revealed(*c) for c in _cells(game))


def test_reset_clears_state():
    game = Minesweeper(5, 5, 4, rng=random.Random(8))
    mine = next(c for c in _cells(game) if game.is_mine(*c))
    safe = next(c for c in _cells(game) if not game.is_mine(*c))
    game.toggle_flag(*safe)
    game.reveal(*mine)
    assert game.game_over
    game.reset()
    assert not game.game_over
    assert not game.game_won
    assert not any(game.is_revealed(*c) or game.is_flagged(*c) for c in _cells(game))
    assert sum(game.is_mine(*c) for c in _cells(game)) == 4


def test_check_win_without_reveals_is_not_won():
    game = _corner_mine_game()
    game.check_win()
    assert not game.game_won


@pytest.mark.parametrize(
    "width, height, mines",
    [(3, 3, 10), (2, 2, -1), (0, 3, 0), (3, 0, 0)],
)
def test_invalid_configuration_raises(width, height, mines):
    with pytest.raises(ValueError):
        Minesweeper(width, height, mines)