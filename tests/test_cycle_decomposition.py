from astar_search.domains.cycle_decomposition import (
    cycle_decomposition,
    is_even_permutation,
    transpositions,
)


def test_odd_cycles():
    cycles = cycle_decomposition([1, 2, 3, 4, 5, 6, 7, 8, 9], [4, 6, 9, 8, 3, 1, 7, 2, 5])
    assert cycles == [[1, 4, 8, 2, 6], [3, 9, 5], [7]]


def test_even_cycles():
    cycles = cycle_decomposition([1, 2, 3, 4, 5, 6], [4, 1, 6, 2, 3, 5])
    assert cycles == [[1, 4, 2], [3, 6, 5]]


def test_identity_is_all_fixed_points():
    seq = list(range(1, 9))
    cycles = cycle_decomposition(seq, seq)
    assert cycles == [[i] for i in seq]


def test_complete_cycle():
    assert cycle_decomposition([1, 2, 3, 4, 5], [4, 5, 1, 2, 3]) == [[1, 4, 2, 5, 3]]


def test_not_a_permutation():
    assert cycle_decomposition([1, 2, 3], [1, 2, 4]) is None
    assert cycle_decomposition([1, 2, 3], [2, 2, 3]) is None
    assert cycle_decomposition([1, 2, 3], [1, 2]) is None


def test_transpositions():
    assert transpositions([[1, 4, 2], [3, 6, 5], [7]]) == [(1, 4), (1, 2), (3, 6), (3, 5)]


def test_parity():
    assert is_even_permutation([1, 2, 3], [2, 3, 1])        # 3-cycle
    assert not is_even_permutation([1, 2, 3], [2, 1, 3])    # transposition
    assert is_even_permutation("abcd", "badc")              # two transpositions
    assert not is_even_permutation([1, 2], [1, 3])
