"""The storage compartment of a probe."""

from collections.abc import Iterator

from .rock import Rock


class Compartment:
    """An ordered collection of rocks with running weight and value totals."""

    def __init__(self, max_weight: int) -> None:
        self.max_weight = max_weight
        self.weight = 0
        self.value = 0
        self._rocks: list[Rock] = []

    def add(self, rock: Rock) -> None:
        """Store a rock, updating the weight and value totals."""
        self._rocks.append(rock)
        self.weight += rock.weight
        self.value += rock.value

    def is_empty(self) -> bool:
        return not self._rocks

    def __len__(self) -> int:
        return len(self._rocks)

    def __iter__(self) -> Iterator[Rock]:
        return iter(self._rocks)

    def format(self) -> str:
        """One "weight value" line per rock, or a notice if there are none."""
        if self.is_empty():
            return "compartimento vazio!\n"
        return "".join(f"{rock.weight} {rock.value}\n" for rock in self._rocks)

    def __repr__(self) -> str:
        return (
            f"Compartment(max_weight={self.max_weight}, weight={self.weight}, "
            f"value={self.value}, rocks={self._rocks!r})"
        )