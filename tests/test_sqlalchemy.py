"""Tests for the SQLAlchemy column type."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import Column, Integer, MetaData, Table, insert, literal, select, text

from civil import Date
from civil.adapters.sqlalchemy import CivilDate

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData()

invoice_table = Table(
    "invoice",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("due", CivilDate, nullable=True),
)


@pytest.fixture
def engine(sqlite_engine: Engine) -> Engine:
    metadata.create_all(sqlite_engine)
    return sqlite_engine


def test_round_trip(engine: Engine) -> None:
    with engine.begin() as conn:
        conn.execute(
            insert(invoice_table),
            [
                {"id": 1, "due": Date(2014, 7, 29)},
                {"id": 2, "due": Date(999, 1, 26)},
                {"id": 3, "due": None},
            ],
        )
        rows = conn.execute(select(invoice_table).order_by(invoice_table.c.id)).all()

    assert [row.due for row in rows] == [Date(2014, 7, 29), Date(999, 1, 26), None]


def test_stored_as_canonical_string(engine: Engine) -> None:
    with engine.begin() as conn:
        conn.execute(insert(invoice_table), {"id": 1, "due": Date(1987, 4, 15)})
        raw = conn.execute(text("SELECT due FROM invoice WHERE id = 1")).scalar_one()

    assert raw == "1987-04-15"


def test_reads_timestamp_text(engine: Engine) -> None:
    with engine.begin() as conn:
        conn.execute(text("INSERT INTO invoice (id, due) VALUES (1, '1987-04-15T10:00:00Z')"))
        due = conn.execute(select(invoice_table.c.due)).scalar_one()

    assert due == Date(1987, 4, 15)


def test_filters_by_date(engine: Engine) -> None:
    with engine.begin() as conn:
        conn.execute(
            insert(invoice_table),
            [{"id": 1, "due": Date(2016, 1, 1)}, {"id": 2, "due": Date(2016, 2, 1)}],
        )
        found = conn.execute(
            select(invoice_table.c.id).where(invoice_table.c.due == Date(2016, 2, 1))
        ).scalar_one()

    assert found == 2


def test_literal_binds(engine: Engine) -> None:
    stmt = select(literal(Date(2016, 2, 1), CivilDate()))
    compiled = stmt.compile(engine, compile_kwargs={"literal_binds": True})
    assert "'2016-02-01'" in str(compiled)


def test_python_type() -> None:
    assert CivilDate().python_type is Date
