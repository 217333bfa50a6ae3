"""Tabular views of an apportionment result."""
from __future__ import annotations

import pandas as pd

from .huntington_hill import ApportionmentResult

SEAT_ORDER_COLUMNS = ["chamber_seat_number", "entity", "entity_seat_number", "priority_score"]
FINAL_SEATS_COLUMNS = ["entity", "population", "seats", "at_minimum"]


def seat_order_table(result: ApportionmentResult) -> pd.DataFrame:
    """One row per recorded award, in chamber seat order."""

    rows = [
        {
            "chamber_seat_number": award.chamber_seat_number,
            "entity": award.entity_identifier,
            "entity_seat_number": award.entity_seat_number,
            "priority_score": award.priority_score,
        }
        for award in result.award_sequence
    ]
    return pd.DataFrame(rows, columns=SEAT_ORDER_COLUMNS)


def final_seats_table(result: ApportionmentResult) -> pd.DataFrame:
    minimum = set(result.minimum_seat_entities)
    rows = [
        {
            "entity": entity,
            "population": result.populations[entity],
            "seats": seats,
            "at_minimum": entity in minimum,
        }
        for entity, seats in result.final_allocation.items()
    ]
    df = pd.DataFrame(rows, columns=FINAL_SEATS_COLUMNS)
    df["seats"] = df["seats"].astype(int)
    return df


def minimum_seat_table(result: ApportionmentResult) -> pd.DataFrame:
    return pd.DataFrame({"entity": list(result.minimum_seat_entities)}, dtype=object)


__all__ = ["seat_order_table", "final_seats_table", "minimum_seat_table"]
