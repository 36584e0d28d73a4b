from __future__ import annotations
from typing import List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def cycle_decomposition(seq: Sequence[T], image: Sequence[T]) -> Optional[List[List[T]]]:
    """
    Disjoint-cycle decomposition of the permutation taking seq[i] -> image[i].

    Cycles are listed in order of their first element's position in seq and
    include fixed points as 1-cycles. Returns None if image is not a
    permutation of seq.
    """
    if len(seq) != len(image):
        return None
    index = {v: i for i, v in enumerate(seq)}
    if len(index) != len(seq):
        return None   # duplicates in seq

    visited = [False] * len(seq)
    cycles: List[List[T]] = []
    for start in range(len(seq)):
        if visited[start]:
            continue
        cycle: List[T] = []
        i = start
        while True:
            if visited[i]:
                return None   # image maps two positions to the same value
            visited[i] = True
            cycle.append(seq[i])
            j = index.get(image[i])
            if j is None:
                return None
            i = j
            if i == start:
                break
        cycles.append(cycle)
    return cycles


def transpositions(cycles: Sequence[Sequence[T]]) -> List[Tuple[T, T]]:
    """Write each cycle (a b c ...) as the transpositions (a b)(a c)..."""
    out: List[Tuple[T, T]] = []
    for cycle in cycles:
        for other in cycle[1:]:
            out.append((cycle[0], other))
    return out


def is_even_permutation(seq: Sequence[T], image: Sequence[T]) -> bool:
    """True if image is an even permutation of seq (False if not a permutation at all)."""
    cycles = cycle_decomposition(seq, image)
    if cycles is None:
        return False
    return sum(len(c) - 1 for c in cycles) % 2 == 0
