from __future__ import annotations

from apportionment.huntington_hill import allocate
from apportionment.reports import final_seats_table, minimum_seat_table, seat_order_table


def test_final_seats_table_follows_input_order():
    result = allocate([("Y", 50), ("X", 100), ("Z", 10)], total_seats=5)

    table = final_seats_table(result)

    assert list(table.columns) == ["entity", "population", "seats", "at_minimum"]
    assert table["entity"].tolist() == ["Y", "X", "Z"]
    assert table["seats"].tolist() == [1, 3, 1]
    assert table["at_minimum"].tolist() == [True, False, True]
    assert int(table["seats"].sum()) == 5


def test_seat_order_table_lists_every_award():
    result = allocate([("A", 900), ("B", 100)], total_seats=4, include_floor=True)

    table = seat_order_table(result)

    assert table["chamber_seat_number"].tolist() == [1, 2, 3, 4]
    assert table["entity"].tolist() == ["A", "B", "A", "A"]
    assert table["entity_seat_number"].tolist() == [1, 1, 2, 3]
    assert table["priority_score"].isna().tolist() == [True, True, False, False]


def test_tables_are_empty_without_detail():
    result = allocate([("A", 900), ("B", 100)], total_seats=4, detailed=False)

    assert seat_order_table(result).empty
    assert minimum_seat_table(result)["entity"].tolist() == ["B"]
