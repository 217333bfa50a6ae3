"""Reading entity populations from CSV or Excel files."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List

import pandas as pd

from .constants import NAME_COLUMN, POPULATION_COLUMN


@dataclass(frozen=True)
class EntityPopulation:
    """An entity competing for seats and the population it is apportioned on."""

    identifier: str
    population: Any


EXCEL_SUFFIXES = (".xlsx",)


def load_populations(
    path: Path | str,
    name_column: str = NAME_COLUMN,
    population_column: str = POPULATION_COLUMN,
    sheet_name: str | int = 0,
) -> List[EntityPopulation]:
    """Load the ``(name, population)`` rows stored in ``path``.

    Population values are returned as read; they are validated when the
    apportionment runs.
    """

    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"Could not find {source}")

    df = _read_table(source, sheet_name)
    missing = [column for column in (name_column, population_column) if column not in df.columns]
    if missing:
        raise ValueError(f"{source} is missing columns: {missing}")

    entities: List[EntityPopulation] = []
    for _, row in df.iterrows():
        name = _parse_str(row.get(name_column))
        if name is None:
            continue
        entities.append(EntityPopulation(identifier=name, population=_parse_value(row.get(population_column))))
    if not entities:
        raise ValueError(f"No entities found in {source}")
    return entities


def _read_table(path: Path, sheet_name: str | int) -> pd.DataFrame:
    if path.suffix.lower() in EXCEL_SUFFIXES:
        return pd.read_excel(path, sheet_name=sheet_name)
    if path.suffix.lower() == ".xls":
        raise ValueError(f"Legacy Excel files are not supported, save {path.name} as .xlsx")
    return pd.read_csv(path, thousands=",", skipinitialspace=True)


def _parse_str(value) -> str | None:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    text = str(value).strip()
    return text or None


def _parse_value(value):
    # numpy scalars become plain Python values so results stay JSON friendly
    if hasattr(value, "item"):
        return value.item()
    return value


__all__ = ["EntityPopulation", "load_populations"]
