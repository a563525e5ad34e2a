"""Container settings read from a SecretsInterface.

Keys:
    METRICS_NAMESPACE            - Prefix for every registered metric (default: none).
    METRICS_CHECK_NAME_CONFLICTS - Reject duplicate metric names (default: true).
    METRICS_LOGGER               - Logger implementation name (default: pretty).
"""

from __future__ import annotations

from dataclasses import dataclass

from typed_metrics.services.secrets.interface import SecretsInterface


@dataclass(frozen=True)
class MetricsConfig:
    namespace: str = ""
    check_for_name_conflicts: bool = True
    logger_impl: str = "pretty"

    @classmethod
    def from_secrets(cls, secrets: SecretsInterface) -> MetricsConfig:
        return cls(
            namespace=secrets.get_or_default("METRICS_NAMESPACE", ""),
            check_for_name_conflicts=secrets.get_bool("METRICS_CHECK_NAME_CONFLICTS", True),
            logger_impl=secrets.get_or_default("METRICS_LOGGER", "pretty"),
        )
