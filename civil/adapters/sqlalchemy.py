"""SQLAlchemy column type for civil dates."""

from __future__ import annotations

from sqlalchemy import Dialect, String, TypeDecorator

from civil.convert.scan import ScanInput, scan
from civil.convert.scan import value as store_value
from civil.core.date import Date


class CivilDate(TypeDecorator[Date]):
    """Store a Date as its canonical ``YYYY-MM-DD`` string.

    Results are read through :func:`civil.convert.scan`, so a column that
    hands back a DATE, a TIMESTAMP or text all load as Date.
    """

    impl = String
    cache_ok = True

    @property
    def python_type(self) -> type[Date]:
        return Date

    def process_bind_param(self, value: Date | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return store_value(value)

    def process_result_value(self, value: ScanInput | None, dialect: Dialect) -> Date | None:
        _ = dialect
        if value is None:
            return None
        return scan(value)


__all__ = ["CivilDate"]
