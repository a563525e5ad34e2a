from __future__ import annotations

from typed_metrics.metrics.gauge_metric import GaugeMetric


class DoubleGaugeMetric(GaugeMetric[float]):
    """Floating-point gauge; ``inc``/``dec`` move it by 1.0."""

    _step = 1.0

    def __init__(
        self, name: str, help: str, namespace: str = "", initial_value: float = 0.0
    ) -> None:
        super().__init__(name, help, namespace, float(initial_value))

    def set(self, value: float) -> None:
        super().set(float(value))

    def add_and_get(self, delta: float) -> float:
        return super().add_and_get(float(delta))
