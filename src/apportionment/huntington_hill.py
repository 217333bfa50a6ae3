"""Huntington-Hill (equal proportions) apportionment of legislative seats.

Every entity first receives ``min_seats`` seats. Each remaining seat goes to
the entity with the highest priority score ``population / sqrt(n * (n + 1))``,
where ``n`` is the number of seats it currently holds. Only the winner's score
changes after an award, so the candidates live in a heap keyed on
``(-score, input position)``: equal scores are resolved in favour of the entity
that appears first in the input.
"""
from __future__ import annotations

from dataclasses import dataclass
import heapq
import logging
import math
import numbers
import sys
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from .constants import DEFAULT_MIN_SEATS, PROGRESS_MESSAGE
from .data_loader import EntityPopulation
from .errors import (
    ApportionmentError,
    DuplicateEntityError,
    InsufficientSeatsError,
    InvalidPopulationError,
    InvalidSeatCountError,
    LengthMismatchError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeatAward:
    """One seat of the chamber and the entity that received it.

    ``priority_score`` is the winner's score before the award, or ``None`` for
    seats handed out by the minimum floor. Floor seats are not won in
    competition, so they carry no score rather than the entity's initial score.
    """

    priority_score: Optional[float]
    entity_identifier: str
    entity_seat_number: int
    chamber_seat_number: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority_score": self.priority_score,
            "entity_identifier": self.entity_identifier,
            "entity_seat_number": self.entity_seat_number,
            "chamber_seat_number": self.chamber_seat_number,
        }


@dataclass(frozen=True)
class ApportionmentResult:
    """Outcome of a single run; dictionaries and tuples follow input order."""

    final_allocation: Dict[str, int]
    award_sequence: Tuple[SeatAward, ...]
    minimum_seat_entities: Tuple[str, ...]
    populations: Dict[str, float]
    total_seats: int
    min_seats: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_seats": self.total_seats,
            "min_seats": self.min_seats,
            "final_allocation": dict(self.final_allocation),
            "award_sequence": [award.to_dict() for award in self.award_sequence],
            "minimum_seat_entities": list(self.minimum_seat_entities),
        }


@dataclass
class _EntityState:
    identifier: str
    population: float
    position: int
    seat_count: int
    priority_score: float

    def award_seat(self) -> None:
        self.seat_count += 1
        self.priority_score = priority_score(self.population, self.seat_count)


def priority_score(population: float, seats: int) -> float:
    """Score of an entity holding ``seats`` seats when competing for the next one."""

    divisor = math.sqrt(seats * (seats + 1))
    if divisor == 0:
        return math.inf if population > 0 else 0.0
    return population / divisor


def allocate(
    entities: Iterable[Tuple[Hashable, Any] | EntityPopulation],
    total_seats: int,
    min_seats: int = DEFAULT_MIN_SEATS,
    excluded: Iterable[Hashable] = (),
    *,
    verbose: bool = False,
    detailed: bool = True,
    include_floor: bool = False,
) -> ApportionmentResult:
    """Apportion ``total_seats`` among ``entities`` with the Huntington-Hill method.

    ``entities`` holds ``(identifier, population)`` pairs or
    :class:`EntityPopulation` records. Entities named in ``excluded`` are
    dropped before populations and names are validated. With ``verbose`` a
    progress line is printed to stderr for every competitive seat; ``detailed=False`` leaves
    ``award_sequence`` empty and ``include_floor`` prefixes it with the seats
    granted by the minimum floor.
    """

    total_seats = _check_seat_count("total_seats", total_seats)
    min_seats = _check_seat_count("min_seats", min_seats)

    states = _build_states(entities, excluded, min_seats)
    floor_seats = len(states) * min_seats
    if total_seats < floor_seats:
        raise InsufficientSeatsError(total_seats, len(states), min_seats)
    remaining = total_seats - floor_seats
    if remaining and not states:
        raise ApportionmentError(f"No entities left to receive {total_seats} seats")

    awards: List[SeatAward] = []
    if detailed and include_floor:
        awards.extend(_floor_awards(states, min_seats))

    heap = [(-state.priority_score, state.position) for state in states]
    heapq.heapify(heap)
    for offset in range(1, remaining + 1):
        _, position = heapq.heappop(heap)
        winner = states[position]
        chamber_seat = floor_seats + offset
        if verbose:
            print(PROGRESS_MESSAGE.format(seat=chamber_seat, total=total_seats), file=sys.stderr)
        logger.debug("Seat %d of %d goes to %s", chamber_seat, total_seats, winner.identifier)
        awarded_score = winner.priority_score
        winner.award_seat()
        if detailed:
            awards.append(
                SeatAward(
                    priority_score=awarded_score,
                    entity_identifier=winner.identifier,
                    entity_seat_number=winner.seat_count,
                    chamber_seat_number=chamber_seat,
                )
            )
        heapq.heappush(heap, (-winner.priority_score, position))

    return ApportionmentResult(
        final_allocation={state.identifier: state.seat_count for state in states},
        award_sequence=tuple(awards),
        minimum_seat_entities=tuple(
            state.identifier for state in states if state.seat_count == min_seats
        ),
        populations={state.identifier: state.population for state in states},
        total_seats=total_seats,
        min_seats=min_seats,
    )


def huntington_hill(
    names: Sequence[Hashable],
    populations: Sequence[Any],
    seats: int,
    min_seats: int = DEFAULT_MIN_SEATS,
    exclude: Iterable[Hashable] = (),
    **options: bool,
) -> ApportionmentResult:
    """Same as :func:`allocate`, taking names and populations as parallel sequences."""

    names = list(names)
    populations = list(populations)
    if len(names) != len(populations):
        raise LengthMismatchError(len(names), len(populations))
    return allocate(zip(names, populations), seats, min_seats, exclude, **options)


def _check_seat_count(argument: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
        raise InvalidSeatCountError(argument, value)
    return int(value)


def _build_states(
    entities: Iterable[Tuple[Hashable, Any] | EntityPopulation],
    excluded: Iterable[Hashable],
    min_seats: int,
) -> List[_EntityState]:
    excluded_set = {excluded} if isinstance(excluded, str) else set(excluded)

    states: List[_EntityState] = []
    seen: set = set()
    duplicates: List[Hashable] = []
    for identifier, raw_population in _entity_pairs(entities):
        if identifier in excluded_set:
            continue
        population = _coerce_population(identifier, raw_population)
        if identifier in seen:
            if identifier not in duplicates:
                duplicates.append(identifier)
            continue
        seen.add(identifier)
        states.append(
            _EntityState(
                identifier=identifier,
                population=population,
                position=len(states),
                seat_count=min_seats,
                priority_score=priority_score(population, min_seats),
            )
        )
    if duplicates:
        raise DuplicateEntityError(duplicates)
    return states


def _entity_pairs(entities) -> Iterable[Tuple[Hashable, Any]]:
    for entity in entities:
        if isinstance(entity, EntityPopulation):
            yield entity.identifier, entity.population
        else:
            identifier, population = entity
            yield identifier, population


def _coerce_population(identifier: Hashable, value) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidPopulationError(identifier, value)
    candidate = value.strip() if isinstance(value, str) else value
    try:
        number = pd.to_numeric(candidate)
        if hasattr(number, "item"):
            number = number.item()
    except (TypeError, ValueError) as exc:
        raise InvalidPopulationError(identifier, value) from exc
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        raise InvalidPopulationError(identifier, value)
    if not math.isfinite(number) or number < 0:
        raise InvalidPopulationError(identifier, value)
    return number


def _floor_awards(states: Sequence[_EntityState], min_seats: int) -> List[SeatAward]:
    awards: List[SeatAward] = []
    for entity_seat in range(1, min_seats + 1):
        for state in states:
            awards.append(
                SeatAward(
                    priority_score=None,
                    entity_identifier=state.identifier,
                    entity_seat_number=entity_seat,
                    chamber_seat_number=len(awards) + 1,
                )
            )
    return awards


__all__ = [
    "ApportionmentResult",
    "SeatAward",
    "allocate",
    "huntington_hill",
    "priority_score",
]
