import random
from typing import List, Sequence


class RandomSearchStrategy:
    """
    RandomSearchStrategy

    Every prisoner opens open_limit boxes chosen uniformly at random, with
    no regard for what the other prisoners (or the boxes) revealed:

        prisoner p wins  <=>  p is among the labels behind its open_limit boxes

    The group wins only if every prisoner wins. For the classic setup
    (100 prisoners, 50 boxes each) that probability is 2^-100, so a
    simulation should essentially never observe a group win.

    Randomness comes from a single random.Random stream per evaluation,
    seeded by the caller. Each prisoner draws a fresh shuffle of the box
    indices from that stream, so the outcome is fully determined by
    (permutation, open_limit, seed).
    """

    def __init__(self, open_limit: int):
        if open_limit < 1:
            raise ValueError("open_limit must be >= 1")
        self.open_limit = open_limit

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def evaluate(self, permutation: Sequence[int], seed: int) -> bool:
        """
        Return True iff every prisoner finds its own label.

        Stops at the first prisoner that fails; the prisoners after it
        would not change the answer.
        """
        n = len(permutation)
        if self.open_limit > n:
            raise ValueError(
                f"open_limit ({self.open_limit}) exceeds number of boxes ({n})"
            )

        # Fast path: opening every box always succeeds
        if self.open_limit == n:
            return True

        rng = random.Random(seed)
        search_order = list(range(n))

        for prisoner in range(n):
            rng.shuffle(search_order)
            if not self._found(permutation, search_order, prisoner):
                return False
        return True

    # ------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------

    def _found(self, permutation: Sequence[int], search_order: List[int], prisoner: int) -> bool:
        for box in search_order[: self.open_limit]:
            if permutation[box] == prisoner:
                return True
        return False
