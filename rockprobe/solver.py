"""Choosing the most valuable set of rocks that fits in a probe."""

from collections.abc import Sequence
from itertools import combinations
from math import prod

from .probe import Probe
from .rock import Rock


def arrangement(n: int, p: int) -> int:
    """Number of ordered selections of p items out of n (n when p <= 1)."""
    if p <= 1:
        return n
    return prod(range(n - p + 1, n + 1))


def factorial(n: int) -> int:
    """n! for positive n, 1 otherwise."""
    return prod(range(1, n + 1)) if n > 0 else 1


def combination_count(n: int, p: int) -> int:
    """Number of unordered selections of p items out of n."""
    return arrangement(n, p) // factorial(p)


def best_combination(rocks: Sequence[Rock], size: int, max_weight: int) -> tuple[Rock, ...]:
    """The first combination of `size` rocks with the strictly highest value within the weight limit.

    Returns an empty tuple when no combination of positive value fits.
    """
    best: tuple[Rock, ...] = ()
    best_value = 0
    for combo in combinations(rocks, size):
        value = sum(rock.value for rock in combo)
        weight = sum(rock.weight for rock in combo)
        if value > best_value and weight <= max_weight:
            best, best_value = combo, value
    return best


def fill_probe(
    rocks: Sequence[Rock], probe: Probe, max_weight: int
) -> tuple[tuple[Rock, ...], list[Rock]]:
    """Load the probe with the best rocks and return them with the rocks left over.

    Among the best combination of each size, the most valuable wins; on a tie the
    larger one does. Chosen rocks are taken out by moving the last remaining rock
    into their place, so the leftover order follows that rule.
    """
    chosen: tuple[Rock, ...] = ()
    chosen_value = 0
    for size in range(1, len(rocks) + 1):
        candidate = best_combination(rocks, size, max_weight)
        if not candidate:
            continue
        value = sum(rock.value for rock in candidate)
        if value >= chosen_value:
            chosen, chosen_value = candidate, value

    remaining = list(rocks)
    for rock in chosen:
        probe.compartment.add(rock)
        position = next(i for i, other in enumerate(remaining) if other.id == rock.id)
        remaining[position] = remaining[-1]
        remaining.pop()
    return chosen, remaining


def format_result(number: int, probe: Probe, chosen: Sequence[Rock]) -> str:
    """The report line for one probe."""
    ids = ",".join(str(rock.id) for rock in chosen)
    compartment = probe.compartment
    return (
        f"Sonda {number}: Peso {compartment.weight}, Valor {compartment.value} , "
        f"Solucao [{ids}]"
    )