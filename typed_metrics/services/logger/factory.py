from __future__ import annotations

from typed_metrics.services.logger.interface import LoggingInterface
from typed_metrics.services.logger.memory_logger import MemoryLogger
from typed_metrics.services.logger.pretty_logger import PrettyLogger


class LoggerFactory:
    """Creates and caches logger instances by implementation name."""

    _registry: dict[str, type[LoggingInterface]] = {
        "pretty": PrettyLogger,
        "memory": MemoryLogger,
    }

    def __init__(self, default_impl: str = "pretty") -> None:
        self._check(default_impl)
        self._default_impl = default_impl
        self._instances: dict[str, LoggingInterface] = {}

    @classmethod
    def available(cls) -> list[str]:
        return list(cls._registry)

    def create(self, impl_name: str | None = None) -> LoggingInterface:
        """Return the cached logger for *impl_name* (or the default), creating it once."""
        name = impl_name or self._default_impl
        if name not in self._instances:
            self._instances[name] = self._check(name)()
        return self._instances[name]

    @classmethod
    def _check(cls, name: str) -> type[LoggingInterface]:
        impl = cls._registry.get(name)
        if impl is None:
            raise ValueError(
                f"Unknown logger implementation: '{name}' "
                f"(available: {', '.join(cls._registry)})"
            )
        return impl
