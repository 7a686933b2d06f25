"""Tests for box assignment generation."""

from collections import Counter

import pytest

from prisoners_riddle.permutation_generator import PermutationGenerator, generate_permutation


def _is_bijection(values):
    n = len(values)
    seen = [False] * n
    for v in values:
        if v < 0 or v >= n or seen[v]:
            return False
        seen[v] = True
    return True


@pytest.mark.parametrize("n", [1, 2, 3, 10, 100, 257])
def test_generate_is_bijection(n):
    for seed in range(20):
        perm = generate_permutation(seed, n)
        assert len(perm) == n
        assert sorted(perm) == list(range(n))
        assert _is_bijection(perm)


def test_generate_is_deterministic():
    assert generate_permutation(1234, 100) == generate_permutation(1234, 100)
    assert PermutationGenerator(50).generate(7) == generate_permutation(7, 50)


def test_different_seeds_differ():
    perms = {generate_permutation(seed, 100) for seed in range(50)}
    assert len(perms) == 50


def test_generate_is_immutable():
    perm = generate_permutation(0, 10)
    with pytest.raises(TypeError):
        perm[0] = perm[1]  # type: ignore[index]


def test_small_permutations_are_equally_likely():
    seeds = 6000
    freq = Counter(generate_permutation(seed, 3) for seed in range(seeds))
    assert len(freq) == 6
    expected = seeds / 6
    for perm, count in freq.items():
        assert abs(count - expected) < 0.15 * expected, perm


def test_invalid_size():
    with pytest.raises(ValueError):
        generate_permutation(0, 0)
    with pytest.raises(ValueError):
        PermutationGenerator(0)


def test_bijection_check_rejects_non_bijections():
    assert not _is_bijection([0, 0])
    assert not _is_bijection([1, 2])
    assert not _is_bijection([-1, 0])
    assert _is_bijection([])
