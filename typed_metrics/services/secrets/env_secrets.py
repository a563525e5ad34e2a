from __future__ import annotations

import os

from typed_metrics.services.secrets.interface import SecretsInterface


class EnvSecrets(SecretsInterface):
    """Settings from environment variables, with overrides for tests and embedding.

    The environment is snapshotted at construction; later ``os.environ``
    changes are not seen.
    """

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._env = dict(os.environ)
        if overrides:
            self._env.update(overrides)

    def get_or_default(self, key: str, default: str) -> str:
        return self._env.get(key, default)
