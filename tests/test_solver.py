import math

import pytest

from rockprobe.probe import Probe
from rockprobe.rock import Rock
from rockprobe.solver import (
    arrangement,
    best_combination,
    combination_count,
    factorial,
    fill_probe,
    format_result,
)


def test_factorial_small_values():
    assert factorial(0) == 1
    assert factorial(-3) == 1
    assert factorial(5) == 120


def test_arrangement_with_p_one_or_less_is_n():
    assert arrangement(7, 1) == 7
    assert arrangement(7, 0) == 7


@pytest.mark.parametrize("n", range(1, 9))
def test_combination_count_matches_binomial(n):
    for p in range(1, n + 1):
        assert combination_count(n, p) == math.comb(n, p)


def test_arrangement_is_count_times_factorial():
    for n in range(1, 8):
        for p in range(1, n + 1):
            assert arrangement(n, p) == combination_count(n, p) * factorial(p)


def test_best_combination_excludes_heavy_rocks():
    rocks = [Rock(0, 50, 100), Rock(1, 10, 5), Rock(2, 20, 7)]
    assert best_combination(rocks, 1, 40) == (rocks[2],)


def test_best_combination_none_fits():
    rocks = [Rock(0, 30, 1), Rock(1, 30, 1)]
    assert best_combination(rocks, 2, 40) == ()


def test_best_combination_prefers_first_on_tie():
    rocks = [Rock(0, 10, 10), Rock(1, 10, 10)]
    assert best_combination(rocks, 1, 40) == (rocks[0],)


def test_best_combination_respects_limit():
    rocks = [Rock(i, w, v) for i, (w, v) in enumerate([(12, 3), (25, 9), (8, 4), (30, 11), (5, 1)])]
    for size in range(1, len(rocks) + 1):
        combo = best_combination(rocks, size, 40)
        if combo:
            assert len(combo) == size
            assert sum(r.weight for r in combo) <= 40


def test_fill_probe_chooses_and_reorders_remaining():
    rocks = [Rock(0, 30, 1), Rock(1, 10, 10), Rock(2, 10, 10), Rock(3, 50, 100)]
    probe = Probe("1", 40)
    chosen, remaining = fill_probe(rocks, probe, 40)
    assert chosen == (rocks[1], rocks[2])
    assert [r.id for r in remaining] == [0, 3]
    assert list(probe.compartment) == list(chosen)
    assert probe.compartment.weight == rocks[1].weight + rocks[2].weight
    assert len(rocks) == 4


def test_fill_probe_prefers_larger_set_on_tie():
    rocks = [Rock(0, 10, 10), Rock(1, 5, 0)]
    probe = Probe("1", 40)
    chosen, remaining = fill_probe(rocks, probe, 40)
    assert chosen == (rocks[0], rocks[1])
    assert remaining == []


def test_fill_probe_nothing_fits():
    rocks = [Rock(0, 50, 10)]
    probe = Probe("1", 40)
    chosen, remaining = fill_probe(rocks, probe, 40)
    assert chosen == ()
    assert remaining == rocks
    assert probe.compartment.is_empty()


def test_format_result():
    probe = Probe("2", 40)
    rocks = [Rock(0, 10, 10), Rock(1, 5, 0)]
    for rock in rocks:
        probe.compartment.add(rock)
    assert format_result(2, probe, rocks) == "Sonda 2: Peso 15, Valor 10 , Solucao [0,1]"


def test_format_result_empty():
    assert format_result(1, Probe("1", 40), ()) == "Sonda 1: Peso 0, Valor 0 , Solucao []"