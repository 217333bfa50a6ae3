"""Tools to apportion legislative seats with the Huntington-Hill method."""

from .data_loader import EntityPopulation, load_populations
from .errors import (
    ApportionmentError,
    DuplicateEntityError,
    InsufficientSeatsError,
    InvalidPopulationError,
    InvalidSeatCountError,
    LengthMismatchError,
)
from .huntington_hill import ApportionmentResult, SeatAward, allocate, huntington_hill, priority_score

__all__ = [
    "load_populations",
    "EntityPopulation",
    "allocate",
    "huntington_hill",
    "priority_score",
    "ApportionmentResult",
    "SeatAward",
    "ApportionmentError",
    "DuplicateEntityError",
    "InsufficientSeatsError",
    "InvalidPopulationError",
    "InvalidSeatCountError",
    "LengthMismatchError",
]
