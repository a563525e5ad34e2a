"""Base class shared by every metric value-holder.

A metric owns a single in-memory value plus the identity fields (name, help,
namespace) used to expose it. Subclasses decide how the value may change and
which Prometheus family describes it.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from prometheus_client.metrics_core import Metric as MetricFamily

from typed_metrics.metrics.errors import InvalidMetricStateError

T = TypeVar("T")


def require_identity(name: str, help: str) -> None:
    """Fail fast when either identity field is empty."""
    if not name:
        raise InvalidMetricStateError("Metric name must not be empty")
    if not help:
        raise InvalidMetricStateError(f"Metric '{name}' has an empty help string")


def full_metric_name(name: str, namespace: str) -> str:
    return f"{namespace}_{name}" if namespace else name


class Metric(ABC, Generic[T]):
    """A named, typed value intended for periodic external observation."""

    def __init__(self, name: str, help: str, namespace: str = "") -> None:
        require_identity(name, help)
        self.name = name
        self.help = help
        self.namespace = namespace
        self._lock = threading.Lock()

    @property
    def full_name(self) -> str:
        return full_metric_name(self.name, self.namespace)

    def exposed_names(self) -> set[str]:
        """Every series or family name this metric writes into the scrape output."""
        return {self.full_name}

    @abstractmethod
    def get(self) -> T:
        """Return the current value."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Restore the value the metric was created with."""
        ...

    @abstractmethod
    def collect(self) -> list[MetricFamily]:
        """Describe the current value as Prometheus metric families."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_name!r}, value={self.get()!r})"
