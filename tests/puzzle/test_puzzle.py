from lhtlp.puzzle import Puzzle


def test_getters_and_unpacking():
    puzzle = Puzzle(5, 7)
    u, v = puzzle

    assert (u, v) == (5, 7)
    assert puzzle.get_u() == 5
    assert puzzle.get_v() == 7


def test_value_equality():
    assert Puzzle(5, 7) == Puzzle(5, 7)
    assert Puzzle(5, 7) != Puzzle(7, 5)
    assert len({Puzzle(5, 7), Puzzle(5, 7)}) == 1


def test_identity():
    assert Puzzle.identity() == Puzzle(1, 1)


def test_repr():
    assert repr(Puzzle(255, 16)) == "<Puzzle(u=0xff, v=0x10)>"
