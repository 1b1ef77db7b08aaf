"""A space probe carrying one compartment."""

from .compartment import Compartment

MAX_IDENTIFIER_LENGTH = 19


class Probe:
    """A probe with a short textual identifier and a compartment."""

    def __init__(self, identifier: str, max_weight: int) -> None:
        if len(identifier) > MAX_IDENTIFIER_LENGTH:
            raise ValueError(
                f"identifier longer than {MAX_IDENTIFIER_LENGTH} characters: {identifier!r}"
            )
        self.identifier = identifier
        self.compartment = Compartment(max_weight)

    def __repr__(self) -> str:
        return f"Probe(identifier={self.identifier!r}, compartment={self.compartment!r})"