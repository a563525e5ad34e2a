class InvalidMetricStateError(RuntimeError):
    """Raised when a metric is built without a name or help string."""
