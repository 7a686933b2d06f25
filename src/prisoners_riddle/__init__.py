"""
Engine for the 100 prisoners riddle: permutation generation and the two
label-discovery strategies (random search and cycle following).
"""

from .cycle_following_strategy import CycleFollowingStrategy, cycle_lengths, longest_cycle  # noqa: F401
from .permutation_generator import Permutation, PermutationGenerator, generate_permutation  # noqa: F401
from .random_search_strategy import RandomSearchStrategy  # noqa: F401
