"""Errors raised while validating an apportionment run."""
from __future__ import annotations

from typing import Sequence


class ApportionmentError(ValueError):
    """Base class for every input problem detected before allocation starts."""


class InvalidPopulationError(ApportionmentError):
    def __init__(self, identifier, value) -> None:
        self.identifier = identifier
        self.value = value
        super().__init__(
            f"Population for {identifier!r} must be a finite, non-negative number (got {value!r})"
        )


class DuplicateEntityError(ApportionmentError):
    def __init__(self, duplicates: Sequence) -> None:
        self.duplicates = tuple(duplicates)
        listed = ", ".join(repr(name) for name in self.duplicates)
        super().__init__(f"Entity identifiers must be unique; repeated: {listed}")


class InsufficientSeatsError(ApportionmentError):
    def __init__(self, total_seats: int, entity_count: int, min_seats: int) -> None:
        self.total_seats = total_seats
        self.entity_count = entity_count
        self.min_seats = min_seats
        super().__init__(
            f"{total_seats} seats cannot give {entity_count} entities "
            f"{min_seats} seat(s) each ({entity_count * min_seats} needed)"
        )


class LengthMismatchError(ApportionmentError):
    def __init__(self, names_length: int, populations_length: int) -> None:
        self.names_length = names_length
        self.populations_length = populations_length
        super().__init__(
            f"`names` has {names_length} values but `populations` has {populations_length}"
        )


class InvalidSeatCountError(ApportionmentError):
    def __init__(self, argument: str, value) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"`{argument}` must be a non-negative integer (got {value!r})")


__all__ = [
    "ApportionmentError",
    "InvalidPopulationError",
    "DuplicateEntityError",
    "InsufficientSeatsError",
    "LengthMismatchError",
    "InvalidSeatCountError",
]
