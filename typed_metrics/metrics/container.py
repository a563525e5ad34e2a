"""Registry of metrics sharing one namespace, exposed through prometheus_client.

The container is a prometheus_client collector: it registers itself with a
``CollectorRegistry`` and, on every scrape, asks each metric to describe its
current value. Output is available in the Prometheus text format (0.0.4), in
OpenMetrics (negotiated from the Accept header), and as flat JSON.
"""

from __future__ import annotations

import json
import re
import threading
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from prometheus_client import CollectorRegistry
from prometheus_client.exposition import choose_encoder
from prometheus_client.metrics_core import Metric as MetricFamily
from prometheus_client.registry import Collector

from typed_metrics.config.metrics_config import MetricsConfig
from typed_metrics.metrics.boolean_metric import BooleanMetric
from typed_metrics.metrics.counter_metric import CounterMetric
from typed_metrics.metrics.double_gauge_metric import DoubleGaugeMetric
from typed_metrics.metrics.info_metric import InfoMetric
from typed_metrics.metrics.long_gauge_metric import LongGaugeMetric
from typed_metrics.metrics.metric import Metric, full_metric_name
from typed_metrics.services.logger.factory import LoggerFactory
from typed_metrics.services.logger.interface import LoggingInterface
from typed_metrics.services.logger.pretty_logger import PrettyLogger

M = TypeVar("M", bound=Metric[Any])

_VALID_NAME = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*$")


def sanitize_name(name: str) -> str:
    """Replace the separators Prometheus rejects (dashes, dots) with underscores."""
    return name.replace("-", "_").replace(".", "_")


class MetricsContainer(Collector):
    """Creates, stores and renders metrics for one namespace.

    With ``check_for_name_conflicts`` on, registering a name twice raises
    ``ValueError``. With it off, asking again for an existing name returns the
    metric already registered, provided it is of the requested type.

    Names are sanitized like Prometheus expects (dashes and dots become
    underscores) and must then be valid metric names. Two metrics whose
    scraped names would collide, such as counters ``hits`` and ``hits_total``,
    are never both accepted, whatever the conflict setting.
    """

    def __init__(
        self,
        namespace: str = "",
        check_for_name_conflicts: bool = True,
        log: LoggingInterface | None = None,
        registry: CollectorRegistry | None = None,
    ) -> None:
        self.namespace = sanitize_name(namespace)
        self.check_for_name_conflicts = check_for_name_conflicts
        self.log = log or PrettyLogger()
        self._metrics: dict[str, Metric[Any]] = {}
        # exposed series/family name -> registered metric name
        self._exposed: dict[str, str] = {}
        self._lock = threading.Lock()
        self.registry = registry if registry is not None else CollectorRegistry(auto_describe=False)
        self.registry.register(self)

    @classmethod
    def from_config(
        cls, config: MetricsConfig, logger_factory: LoggerFactory | None = None
    ) -> MetricsContainer:
        factory = logger_factory or LoggerFactory()
        return cls(
            namespace=config.namespace,
            check_for_name_conflicts=config.check_for_name_conflicts,
            log=factory.create(config.logger_impl),
        )

    # ── Registration ──────────────────────────────────────────────────────

    def register_boolean_metric(
        self, name: str, help: str, initial_value: bool = False
    ) -> BooleanMetric:
        return self._register(
            name, BooleanMetric, lambda n: BooleanMetric(n, help, self.namespace, initial_value)
        )

    def register_counter(self, name: str, help: str, initial_value: int = 0) -> CounterMetric:
        return self._register(
            name, CounterMetric, lambda n: CounterMetric(n, help, self.namespace, initial_value)
        )

    def register_long_gauge(self, name: str, help: str, initial_value: int = 0) -> LongGaugeMetric:
        return self._register(
            name,
            LongGaugeMetric,
            lambda n: LongGaugeMetric(n, help, self.namespace, initial_value),
        )

    def register_double_gauge(
        self, name: str, help: str, initial_value: float = 0.0
    ) -> DoubleGaugeMetric:
        return self._register(
            name,
            DoubleGaugeMetric,
            lambda n: DoubleGaugeMetric(n, help, self.namespace, initial_value),
        )

    def register_info(self, name: str, help: str, value: str) -> InfoMetric:
        return self._register(
            name, InfoMetric, lambda n: InfoMetric(n, help, self.namespace, value)
        )

    def _register(self, name: str, metric_type: type[M], build: Callable[[str], M]) -> M:
        name = sanitize_name(name)
        # Empty names fall through to the metric constructor's own check.
        if name and not _VALID_NAME.match(full_metric_name(name, self.namespace)):
            raise ValueError(
                f"'{full_metric_name(name, self.namespace)}' is not a valid Prometheus metric name"
            )
        with self._lock:
            existing = self._metrics.get(name)
            if existing is not None:
                if self.check_for_name_conflicts:
                    self.log.warn("Rejected duplicate metric", metric=name)
                    raise ValueError(
                        f"Could not register metric '{name}': a metric with that name "
                        f"already exists in namespace '{self.namespace}'"
                    )
                if not isinstance(existing, metric_type):
                    raise ValueError(
                        f"Metric '{name}' is already registered as "
                        f"{type(existing).__name__}, not {metric_type.__name__}"
                    )
                return existing

            # Construction errors propagate before anything is stored.
            metric = build(name)
            exposed = metric.exposed_names()
            clashes = sorted(exposed & self._exposed.keys())
            if clashes:
                self.log.warn(
                    "Rejected metric with clashing output name", metric=name, clashes=clashes
                )
                raise ValueError(
                    f"Could not register metric '{name}': output name(s) {', '.join(clashes)} "
                    f"already used by metric '{self._exposed[clashes[0]]}'"
                )
            self._metrics[name] = metric
            self._exposed.update(dict.fromkeys(exposed, name))
        self.log.debug(
            "Registered metric", metric=metric.full_name, type=metric_type.__name__
        )
        return metric

    # ── Lookup ────────────────────────────────────────────────────────────

    def get_metric(self, name: str) -> Metric[Any] | None:
        with self._lock:
            return self._metrics.get(sanitize_name(name))

    @property
    def metric_names(self) -> list[str]:
        with self._lock:
            return sorted(self._metrics)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._metrics

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)

    def _snapshot(self) -> list[Metric[Any]]:
        with self._lock:
            return list(self._metrics.values())

    def reset_all(self) -> None:
        """Put every metric back to the value it was registered with."""
        metrics = self._snapshot()
        for metric in metrics:
            metric.reset()
        self.log.info("Reset all metrics", count=len(metrics))

    # ── Exposition ────────────────────────────────────────────────────────

    def collect(self) -> Iterator[MetricFamily]:
        for metric in self._snapshot():
            yield from metric.collect()

    def get_prometheus_metrics(self, accept: str | None = None) -> tuple[bytes, str]:
        """Render all metrics, choosing the format from an HTTP Accept header.

        Returns the encoded body and the content type to serve it with.
        """
        encoder, content_type = choose_encoder(accept or "")
        return encoder(self.registry), content_type

    def as_dict(self) -> dict[str, Any]:
        return {metric.name: metric.get() for metric in self._snapshot()}

    def get_json(self) -> str:
        return json.dumps(self.as_dict())
