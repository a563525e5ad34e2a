"""Root-level pytest fixtures shared by every test package."""

from __future__ import annotations

import pytest

from typed_metrics.metrics.container import MetricsContainer
from typed_metrics.services.logger.memory_logger import MemoryLogger


@pytest.fixture
def memory_logger() -> MemoryLogger:
    return MemoryLogger()


@pytest.fixture
def container(memory_logger: MemoryLogger) -> MetricsContainer:
    """Empty container in the 'test' namespace with its own registry."""
    return MetricsContainer("test", log=memory_logger)
