# rockprobe

Distributes a set of mineral rocks among three space probes. Each probe has a
compartment that holds at most 40 units of weight. Probes are filled one after
another. For each probe, every combination of the remaining rocks is searched,
and the most valuable set that fits is loaded. The rocks that probe took are
not offered to the next probe.

## Installation

```
pip install .
```

## Usage

Write an input file. Its first number is the rock count. After it comes one
`weight value` pair for each rock:

```
4
10 60
20 100
30 120
15 70
```

Rocks are numbered from 0 in the order they appear in the file. Run:

```
rockprobe -f rocks.txt
```

For each probe the command prints a blank line and then a report line. The
report gives the probe's total weight, its total value and the ids of the rocks
it carries. The last line gives the processor time the run took:

```

Sonda 1: Peso 40, Valor 180 , Solucao [0,2]

Sonda 2: Peso 35, Valor 170 , Solucao [3,1]

Sonda 3: Peso 0, Valor 0 , Solucao []
Tempo gasto: 0.000123 segundos
```

Without `-f`, the command does nothing.

If the file name is missing or the file cannot be opened, it prints
`arquivo inválido!`.

If the file ends before all rocks are read, `read_rocks` raises `ValueError`.

## How a probe is filled

For each size from 1 to the number of remaining rocks,
`best_combination(rocks, size, max_weight)` finds the combination of exactly
`size` rocks that has the highest positive value and fits within the weight
limit. If several combinations share that value, it keeps the first one found.

Among these per-size winners, the most valuable is loaded into the probe. When
two winners have the same value, the larger set wins.

The chosen rocks are then taken out of the list. Each one is removed by moving
the last remaining rock into its place, which is why the second probe above
reports `[3,1]`.

## Library use

```python
from rockprobe.rock import Rock
from rockprobe.probe import Probe
from rockprobe.solver import fill_probe, format_result

rocks = [Rock(0, 10, 60), Rock(1, 20, 100), Rock(2, 30, 120)]
probe = Probe("1", 40)
chosen, rocks = fill_probe(rocks, probe, 40)
print(format_result(1, probe, chosen))
# Sonda 1: Peso 40, Valor 180 , Solucao [0,2]
```

`fill_probe` adds the chosen rocks to `probe.compartment`. It returns two
things: the chosen rocks, and a new list of the rocks left over. The list that
was passed in is not changed.

Other parts of the package:

- `Compartment` keeps the running totals `weight` and `value`. It supports
  `len()` and iteration over its rocks. Its `format()` method gives one
  `weight value` line per rock.
- `ProbeList` keeps probes in insertion order. `remove(identifier)` takes a
  probe out and returns it; it raises `LookupError` if no probe has that
  identifier.
- `Probe` identifiers may be at most 19 characters long.
- `rockprobe.cli.read_rocks(stream)` parses the input format shown above.
- `combination_count(n, p)` gives the number of combinations of `p` rocks out
  of `n`.

## Tests

```
pip install .[test]
pytest
```