import random
from typing import Tuple


# Container index -> label found inside.
Permutation = Tuple[int, ...]


def generate_permutation(seed: int, n: int) -> Permutation:
    """
    Return a uniformly random bijection on [0, n) determined by seed.

    The shuffle runs on a random.Random instance owned by this call, so
    concurrent callers with different seeds never share generator state.
    """
    if n <= 0:
        raise ValueError("n must be > 0")

    rng = random.Random(seed)
    boxes = list(range(n))
    rng.shuffle(boxes)
    return tuple(boxes)


class PermutationGenerator:
    """
    Container assignments for a fixed number of prisoners.

    Identical seeds always give identical assignments.
    """

    def __init__(self, num_prisoners: int):
        if num_prisoners <= 0:
            raise ValueError("num_prisoners must be > 0")
        self.num_prisoners = num_prisoners

    def generate(self, seed: int) -> Permutation:
        return generate_permutation(seed, self.num_prisoners)
