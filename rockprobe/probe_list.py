"""An ordered list of probes."""

from collections.abc import Iterator

from .probe import Probe


class ProbeList:
    """Probes kept in insertion order."""

    def __init__(self) -> None:
        self._probes: list[Probe] = []

    def append(self, probe: Probe) -> None:
        self._probes.append(probe)

    def remove(self, identifier: str) -> Probe:
        """Remove and return the probe with the given identifier.

        Raises LookupError if the list is empty or has no such probe.
        """
        if self.is_empty():
            raise LookupError("Lista vazia")
        for index, probe in enumerate(self._probes):
            if probe.identifier == identifier:
                return self._probes.pop(index)
        raise LookupError(f"sonda com identificador {identifier} não encontrado.")

    def is_empty(self) -> bool:
        return not self._probes

    def __len__(self) -> int:
        return len(self._probes)

    def __iter__(self) -> Iterator[Probe]:
        return iter(self._probes)

    def format(self) -> str:
        """The identifiers, each followed by ", ", or a notice if empty."""
        if self.is_empty():
            return "Lista vazia\n"
        return "".join(f"{probe.identifier}, " for probe in self._probes)