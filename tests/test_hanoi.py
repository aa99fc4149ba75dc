import pytest

from dsakit.hanoi import Move, hanoi_moves


def _play(n, moves, pegs):
    state = {peg: [] for peg in pegs}
    state[pegs[0]] = list(range(n, 0, -1))
    for move in moves:
        disk = state[move.source].pop()
        assert disk == move.disk
        assert not state[move.target] or state[move.target][-1] > disk
        state[move.target].append(disk)
    return state


def test_move_text():
    assert str(Move(1, "A", "B")) == "Move disk 1 from A to B"


def test_single_disk():
    assert hanoi_moves(1) == [Move(1, "A", "B")]


@pytest.mark.parametrize("n", range(1, 9))
def test_move_count_is_minimal(n):
    assert len(hanoi_moves(n)) == 2**n - 1


@pytest.mark.parametrize("n", range(1, 8))
def test_moves_are_legal_and_finish_on_target(n):
    state = _play(n, hanoi_moves(n), ("A", "B", "C"))
    assert state["B"] == list(range(n, 0, -1))
    assert state["A"] == []
    assert state["C"] == []


def test_alternative_target_peg():
    state = _play(3, hanoi_moves(3, "A", "C", "B"), ("A", "C", "B"))
    assert state["C"] == [3, 2, 1]


def test_largest_disk_moves_once_in_the_middle():
    moves = hanoi_moves(4)
    largest = [move for move in moves if move.disk == 4]
    assert largest == [Move(4, "A", "B")]
    assert moves.index(largest[0]) == len(moves) // 2


def test_zero_disks_rejected():
    with pytest.raises(ValueError):
        hanoi_moves(0)