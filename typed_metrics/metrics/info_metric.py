from __future__ import annotations

from prometheus_client.core import InfoMetricFamily
from prometheus_client.metrics_core import Metric as MetricFamily

from typed_metrics.metrics.metric import Metric


class InfoMetric(Metric[str]):
    """A static string fixed at construction.

    Exposed as a Prometheus info metric keyed by the metric's own name, e.g.
    ``jvb_version_info{version="2.3"} 1``. An empty value is accepted.
    """

    def __init__(self, name: str, help: str, namespace: str, value: str) -> None:
        super().__init__(name, help, namespace)
        self._value = value

    def exposed_names(self) -> set[str]:
        base = self.full_name.removesuffix("_info")
        return {base, f"{base}_info"}

    def get(self) -> str:
        return self._value

    def reset(self) -> None:
        pass

    def collect(self) -> list[MetricFamily]:
        return [InfoMetricFamily(self.full_name, self.help, value={self.name: self._value})]
