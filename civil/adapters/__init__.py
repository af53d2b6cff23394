"""Adapters binding civil dates to storage libraries.

    - sqlalchemy: CivilDate column type
"""

from __future__ import annotations

__all__: list[str] = []
