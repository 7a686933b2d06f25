from typing import List, Sequence


class CycleFollowingStrategy:
    """
    CycleFollowingStrategy (the "loop" strategy)

    Prisoner p opens box p first, then always opens the box whose number
    matches the label just found. The boxes it visits are exactly the
    cycle of the permutation that contains p, so:

        prisoner p wins  <=>  len(cycle containing p) <= open_limit
        group wins       <=>  longest_cycle(permutation) <= open_limit

    No randomness is consumed; the outcome depends only on the permutation.
    """

    def __init__(self, open_limit: int):
        if open_limit < 1:
            raise ValueError("open_limit must be >= 1")
        self.open_limit = open_limit

    def evaluate(self, permutation: Sequence[int]) -> bool:
        """
        Return True iff every prisoner reaches its own label within
        open_limit boxes. Stops at the first prisoner that fails.
        """
        n = len(permutation)
        if self.open_limit > n:
            raise ValueError(
                f"open_limit ({self.open_limit}) exceeds number of boxes ({n})"
            )

        for prisoner in range(n):
            if not self.prisoner_succeeds(permutation, prisoner):
                return False
        return True

    def prisoner_succeeds(self, permutation: Sequence[int], prisoner: int) -> bool:
        if prisoner < 0 or prisoner >= len(permutation):
            raise IndexError("prisoner index out of range")

        box = prisoner
        for _ in range(self.open_limit):
            label = permutation[box]
            if label == prisoner:
                return True
            box = label
        return False


def cycle_lengths(permutation: Sequence[int]) -> List[int]:
    """
    Lengths of the disjoint cycles of permutation, in order of each
    cycle's smallest element.
    """
    visited = [False] * len(permutation)
    lengths: List[int] = []

    for start in range(len(permutation)):
        if visited[start]:
            continue
        length = 0
        box = start
        while not visited[box]:
            visited[box] = True
            box = permutation[box]
            length += 1
        lengths.append(length)
    return lengths


def longest_cycle(permutation: Sequence[int]) -> int:
    lengths = cycle_lengths(permutation)
    if not lengths:
        raise ValueError("permutation must be non-empty")
    return max(lengths)
