"""Shared implementation of the freely adjustable gauges."""

from __future__ import annotations

from typing import TypeVar

from prometheus_client.core import GaugeMetricFamily
from prometheus_client.metrics_core import Metric as MetricFamily

from typed_metrics.metrics.metric import Metric

N = TypeVar("N", int, float)


class GaugeMetric(Metric[N]):
    """A signed number that can move in either direction.

    Subclasses pin the number type through ``_step``, the amount ``inc`` and
    ``dec`` move the value by.
    """

    _step: N

    def __init__(self, name: str, help: str, namespace: str, initial_value: N) -> None:
        super().__init__(name, help, namespace)
        self._initial_value = initial_value
        self._value = initial_value

    def get(self) -> N:
        with self._lock:
            return self._value

    def set(self, value: N) -> None:
        with self._lock:
            self._value = value

    def inc(self) -> None:
        self.add_and_get(self._step)

    def dec(self) -> None:
        self.add_and_get(-self._step)

    def inc_and_get(self) -> N:
        return self.add_and_get(self._step)

    def dec_and_get(self) -> N:
        return self.add_and_get(-self._step)

    def add_and_get(self, delta: N) -> N:
        with self._lock:
            self._value += delta
            return self._value

    def reset(self) -> None:
        self.set(self._initial_value)

    def collect(self) -> list[MetricFamily]:
        return [GaugeMetricFamily(self.full_name, self.help, value=self.get())]
