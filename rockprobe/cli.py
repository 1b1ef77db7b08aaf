"""Command line entry point: distribute rocks from a file among the probes."""

import re
import sys
import time
from collections.abc import Sequence
from typing import TextIO

from .probe import Probe
from .probe_list import ProbeList
from .rock import Rock
from .solver import fill_probe, format_result

PROBE_COUNT = 3
MAX_COMPARTMENT_WEIGHT = 40

_NUMBER = re.compile(r"[-+]?\d+")


def read_rocks(stream: TextIO) -> list[Rock]:
    """Read a rock count followed by that many weight/value pairs.

    Rocks are numbered from 0 in the order they appear.
    """
    numbers = iter(int(token) for token in _NUMBER.findall(stream.read()))
    try:
        count = next(numbers)
        return [Rock(index, next(numbers), next(numbers)) for index in range(count)]
    except StopIteration:
        raise ValueError("rock file ends before all rocks are read") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Run with "-f FILE"; prints the load of each probe and the time taken."""
    args = list(sys.argv[1:] if argv is None else argv)
    start = time.process_time()
    if not args or args[0] != "-f":
        return 0
    try:
        with open(args[1], encoding="utf-8") as stream:
            rocks = read_rocks(stream)
    except (IndexError, OSError):
        print("arquivo inválido!")
        return 0

    probes = ProbeList()
    for number in range(1, PROBE_COUNT + 1):
        probes.append(Probe(str(number), MAX_COMPARTMENT_WEIGHT))

    for number, probe in enumerate(probes, start=1):
        chosen, rocks = fill_probe(rocks, probe, MAX_COMPARTMENT_WEIGHT)
        print()
        print(format_result(number, probe, chosen))

    elapsed = time.process_time() - start
    print(f"Tempo gasto: {elapsed:f} segundos")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())