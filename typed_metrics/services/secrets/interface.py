from abc import ABC, abstractmethod

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean (true/false), got '{raw}'")


class SecretsInterface(ABC):
    """Source of the string settings the metrics container is built from."""

    @abstractmethod
    def get_or_default(self, key: str, default: str) -> str:
        """Return the value for *key*, or *default* when it is not set."""
        ...

    def get_bool(self, key: str, default: bool) -> bool:
        """Read a true/false flag; raises ValueError for anything else."""
        return parse_bool(key, self.get_or_default(key, "true" if default else "false"))
