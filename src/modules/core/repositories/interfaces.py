"""Generic read-side repository interface (Dependency Inversion Principle).

Provides ``IReadRepository``, the base abstract class that read-only
repository interfaces extend.  Service-layer code depends on this
abstraction, never on Django ORM directly: every method hands back plain
rows (``dict`` of field name to value), so a service can be exercised
against an in-memory fake or a ``MagicMock``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

Row = Dict[str, Any]


class IReadRepository(ABC):
    """Base read-only repository contract."""

    @abstractmethod
    def fetch_one(self, id: str) -> Optional[Row]:
        """Retrieve a single row by its primary key, or ``None``."""
