"""Shared pytest fixtures for the EcoTrack test suite.

Provides:
- anyio_backend: run async API tests on asyncio only
- make_question: factory for QuestionRecord with sensible defaults
"""

from collections.abc import Callable

import pytest

from src.scoring.models import QuestionRecord


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def make_question() -> Callable[..., QuestionRecord]:
    """Build a QuestionRecord; only ``id`` is required."""

    def _make(
        id: str,
        pillar: str = "E",
        critical: bool = False,
        weight: float = 1.0,
        tags: list[str] | None = None,
    ) -> QuestionRecord:
        return QuestionRecord(
            id=id,
            pillar=pillar,
            critical=critical,
            weight=weight,
            tags=tags or [],
        )

    return _make
