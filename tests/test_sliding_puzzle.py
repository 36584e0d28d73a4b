import pytest

from astar_search.domains.sliding_puzzle import InvalidPuzzleState, MoveType, SlidingPuzzle
from astar_search.heuristics.tiles import make_heuristic
from astar_search.search.a_star import a_star_search
from astar_search.search.cost import zero_heuristic
from astar_search.search.ida_star import ida_star_search

unit = lambda a, b: 1

EIGHT_START = (7, 2, 4, 3, 0, 1, 8, 5, 6)
FIFTEEN_START = (12, 5, 7, 8, 1, 3, 11, 15, 9, 13, 6, 14, 2, 0, 4, 10)


@pytest.fixture
def p3():
    return SlidingPuzzle(3)


def assert_one_move_apart(puzzle, path):
    for a, b in zip(path, path[1:]):
        assert puzzle.move_between(a, b) is not None, (a, b)


# ---------- Mechanics ----------

def test_goal_layout():
    assert SlidingPuzzle(3).GOAL == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert SlidingPuzzle(2, 3).GOAL == (1, 2, 3, 4, 5, 0)


def test_bad_dimension():
    with pytest.raises(ValueError):
        SlidingPuzzle(1)


def test_blank_moves(p3):
    s = (1, 2, 3, 4, 0, 5, 6, 7, 8)
    assert p3.move(s, MoveType.UP) == (1, 0, 3, 4, 2, 5, 6, 7, 8)
    assert p3.move(s, MoveType.DOWN) == (1, 2, 3, 4, 7, 5, 6, 0, 8)
    assert p3.move(s, MoveType.LEFT) == (1, 2, 3, 0, 4, 5, 6, 7, 8)
    assert p3.move(s, MoveType.RIGHT) == (1, 2, 3, 4, 5, 0, 6, 7, 8)
    assert len(p3.expand(s)) == 4


def test_corner_blank_has_two_moves(p3):
    assert p3.move(p3.GOAL, MoveType.DOWN) is None
    assert p3.move(p3.GOAL, MoveType.RIGHT) is None
    assert len(p3.expand(p3.GOAL)) == 2


def test_move_between(p3):
    nxt = p3.move(p3.GOAL, MoveType.LEFT)
    assert p3.move_between(p3.GOAL, nxt) is MoveType.LEFT
    assert p3.move_between(nxt, p3.GOAL) is MoveType.RIGHT
    assert p3.move_between(p3.GOAL, p3.GOAL) is None


@pytest.mark.parametrize("state, ok", [
    (EIGHT_START, True),
    ((1, 2, 3, 4, 5, 6, 8, 7, 0), False),
    ((0, 1, 2, 3, 4, 5, 6, 7, 8), True),
])
def test_solvability(p3, state, ok):
    assert p3.is_solvable(state) is ok


def test_validate_rejects_bad_states(p3):
    with pytest.raises(InvalidPuzzleState):
        p3.validate([1, 2, 3])
    with pytest.raises(InvalidPuzzleState):
        p3.validate([1, 1, 2, 3, 4, 5, 6, 7, 0])
    with pytest.raises(InvalidPuzzleState):
        p3.validate([1, 2, 3, 4, 5, 6, 8, 7, 0])
    assert p3.validate(list(EIGHT_START)) == EIGHT_START


@pytest.mark.parametrize("rows, cols", [(3, 3), (4, 4), (2, 3)])
def test_shuffle_is_solvable_and_seeded(rows, cols):
    p = SlidingPuzzle(rows, cols)
    for seed in range(20):
        s = p.shuffle(seed)
        assert p.is_solvable(s)
        assert s != p.GOAL
    assert p.shuffle(7) == p.shuffle(7)


def test_scramble_stays_reachable(p3):
    s = p3.scramble(12, seed=3)
    assert p3.is_solvable(s)
    assert p3.manhattan(s) <= 12
    assert p3.scramble(0, seed=3) == p3.GOAL


def test_heuristics_on_goal_are_zero(p3):
    assert p3.manhattan(p3.GOAL) == 0
    assert p3.misplaced(p3.GOAL) == 0
    assert p3.linear_conflict(p3.GOAL) == 0


def test_heuristic_values(p3):
    # 2 and 1 swapped in the top row
    s = (2, 1, 3, 4, 5, 6, 7, 8, 0)
    assert p3.manhattan(s) == 2
    assert p3.misplaced(s) == 2
    assert p3.linear_conflict(s) == 4


def test_misplaced_ignores_blank(p3):
    s = p3.move(p3.GOAL, MoveType.UP)
    assert p3.misplaced(s) == 1


def test_make_heuristic_aliases(p3):
    assert make_heuristic("m", p3)(EIGHT_START) == p3.manhattan(EIGHT_START)
    assert make_heuristic("lc", p3)(EIGHT_START) == p3.linear_conflict(EIGHT_START)
    assert make_heuristic("zero", p3)(EIGHT_START) == 0
    with pytest.raises(ValueError):
        make_heuristic("euclid", p3)


def test_render(p3):
    assert p3.render(p3.GOAL) == "[ 1 2 3 ]\n[ 4 5 6 ]\n[ 7 8   ]"


# ---------- Solving ----------

@pytest.mark.parametrize("algo", [a_star_search, ida_star_search], ids=["astar", "idastar"])
def test_eight_puzzle_optimal(p3, algo):
    res = algo(EIGHT_START, p3.expand, p3.manhattan, unit, goal=p3.GOAL)

    assert res.found
    assert len(res.path) == 19
    assert res.cost == 18
    assert res.path[0] == EIGHT_START
    assert res.path[-1] == p3.GOAL
    assert_one_move_apart(p3, res.path)


@pytest.mark.parametrize("seed", range(5))
def test_astar_and_idastar_agree(p3, seed):
    start = p3.scramble(16, seed)
    a = a_star_search(start, p3.expand, p3.linear_conflict, unit, p3.is_solved)
    b = ida_star_search(start, p3.expand, p3.linear_conflict, unit, p3.is_solved)
    assert a.cost == b.cost == len(a.path) - 1 == len(b.path) - 1


def test_zero_heuristic_still_optimal():
    p = SlidingPuzzle(2, 3)
    start = p.scramble(9, seed=1)
    informed = a_star_search(start, p.expand, p.manhattan, unit, goal=p.GOAL)
    blind = a_star_search(start, p.expand, zero_heuristic, unit, goal=p.GOAL)
    assert blind.cost == informed.cost
    assert blind.expanded >= informed.expanded


@pytest.mark.parametrize("algo", [a_star_search, ida_star_search], ids=["astar", "idastar"])
def test_max_cost_below_optimum(p3, algo):
    res = algo(EIGHT_START, p3.expand, p3.manhattan, unit, goal=p3.GOAL, max_cost=17)
    assert not res.found
    assert res.termination == "max_cost"


@pytest.mark.slow
def test_fifteen_puzzle_idastar():
    p = SlidingPuzzle(4)
    assert p.is_solvable(FIFTEEN_START)

    res = ida_star_search(FIFTEEN_START, p.expand, p.linear_conflict, unit, goal=p.GOAL)

    assert len(res.path) == 45
    assert res.cost == 44
    assert res.path[-1] == p.GOAL
    assert_one_move_apart(p, res.path)
