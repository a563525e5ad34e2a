from __future__ import annotations

from typed_metrics.metrics.gauge_metric import GaugeMetric


class LongGaugeMetric(GaugeMetric[int]):
    """Integer gauge with no range restriction."""

    _step = 1

    def __init__(self, name: str, help: str, namespace: str = "", initial_value: int = 0) -> None:
        super().__init__(name, help, namespace, initial_value)
