from __future__ import annotations

from prometheus_client.core import GaugeMetricFamily
from prometheus_client.metrics_core import Metric as MetricFamily

from typed_metrics.metrics.metric import Metric


class BooleanMetric(Metric[bool]):
    """A settable flag. Exposed as a gauge reading 1 or 0."""

    def __init__(
        self, name: str, help: str, namespace: str = "", initial_value: bool = False
    ) -> None:
        super().__init__(name, help, namespace)
        self._initial_value = initial_value
        self._value = initial_value

    def get(self) -> bool:
        with self._lock:
            return self._value

    def set(self, value: bool) -> None:
        with self._lock:
            self._value = value

    def set_and_get(self, value: bool) -> bool:
        with self._lock:
            self._value = value
            return self._value

    def reset(self) -> None:
        self.set(self._initial_value)

    def collect(self) -> list[MetricFamily]:
        return [GaugeMetricFamily(self.full_name, self.help, value=1 if self.get() else 0)]
