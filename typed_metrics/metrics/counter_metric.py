from __future__ import annotations

from prometheus_client.core import CounterMetricFamily
from prometheus_client.metrics_core import Metric as MetricFamily

from typed_metrics.metrics.metric import Metric


def _require_int(name: str, what: str, value: object) -> None:
    if not isinstance(value, int):
        raise ValueError(f"Counter '{name}' {what} must be an int, got {value!r}")


class CounterMetric(Metric[int]):
    """A non-negative integer that only ever goes up.

    Exposed as a Prometheus counter, so the scraped name carries a ``_total``
    suffix.
    """

    def __init__(self, name: str, help: str, namespace: str = "", initial_value: int = 0) -> None:
        super().__init__(name, help, namespace)
        _require_int(name, "initial value", initial_value)
        if initial_value < 0:
            raise ValueError(
                f"Counter '{name}' cannot start at a negative value ({initial_value})"
            )
        self._initial_value = initial_value
        self._value = initial_value

    def exposed_names(self) -> set[str]:
        # prometheus_client strips a trailing _total from the family name.
        base = self.full_name.removesuffix("_total")
        return {base, f"{base}_total"}

    def get(self) -> int:
        with self._lock:
            return self._value

    def inc(self) -> None:
        self.add_and_get(1)

    def inc_and_get(self) -> int:
        return self.add_and_get(1)

    def add_and_get(self, delta: int) -> int:
        # Checked before taking the lock: a rejected delta never touches the value.
        _require_int(self.name, "delta", delta)
        if delta < 0:
            raise ValueError(f"Counter '{self.name}' cannot be decremented (delta={delta})")
        with self._lock:
            self._value += delta
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = self._initial_value

    def collect(self) -> list[MetricFamily]:
        return [CounterMetricFamily(self.full_name, self.help, value=self.get())]
