import pytest

from typed_metrics.metrics.boolean_metric import BooleanMetric
from typed_metrics.metrics.counter_metric import CounterMetric
from typed_metrics.metrics.double_gauge_metric import DoubleGaugeMetric
from typed_metrics.metrics.errors import InvalidMetricStateError
from typed_metrics.metrics.info_metric import InfoMetric
from typed_metrics.metrics.long_gauge_metric import LongGaugeMetric
from typed_metrics.metrics.metric import require_identity

NAMESPACE = "test"

BUILDERS = [
    pytest.param(lambda name, help: BooleanMetric(name, help, NAMESPACE), id="boolean"),
    pytest.param(lambda name, help: CounterMetric(name, help, NAMESPACE), id="counter"),
    pytest.param(lambda name, help: DoubleGaugeMetric(name, help, NAMESPACE), id="double_gauge"),
    pytest.param(lambda name, help: InfoMetric(name, help, NAMESPACE, "val"), id="info"),
    pytest.param(lambda name, help: LongGaugeMetric(name, help, NAMESPACE), id="long_gauge"),
]


@pytest.mark.parametrize("build", BUILDERS)
def test_empty_name_raises(build):
    with pytest.raises(InvalidMetricStateError, match="name must not be empty"):
        build("", "Help")


@pytest.mark.parametrize("build", BUILDERS)
def test_empty_help_raises(build):
    with pytest.raises(InvalidMetricStateError, match="empty help string"):
        build("name", "")


def test_invalid_state_is_a_runtime_error():
    with pytest.raises(RuntimeError):
        require_identity("", "")


def test_empty_namespace_is_allowed():
    metric = LongGaugeMetric("gauge", "Help", "")
    assert metric.full_name == "gauge"


def test_full_name_prefixes_namespace():
    assert BooleanMetric("flag", "Help", NAMESPACE).full_name == "test_flag"


def test_boolean_default_value_and_updates():
    metric = BooleanMetric("testBoolean", "Help", NAMESPACE)
    assert metric.get() is False
    assert metric.set_and_get(True) is True
    assert metric.set(False) is None
    assert metric.get() is False


def test_boolean_initial_true():
    assert BooleanMetric("testBoolean", "Help", NAMESPACE, True).get() is True


def test_boolean_reset_restores_initial_value():
    metric = BooleanMetric("testBoolean", "Help", NAMESPACE, True)
    metric.set(False)
    metric.reset()
    assert metric.get() is True


def test_long_gauge_sequence():
    metric = LongGaugeMetric("testLongGauge", "Help", NAMESPACE)
    assert metric.get() == 0
    metric.inc()
    metric.dec()
    assert metric.get() == 0
    assert metric.dec_and_get() == -1
    assert metric.inc_and_get() == 0
    assert metric.add_and_get(50) == 50
    metric.set(42)
    assert metric.get() == 42


def test_long_gauge_negative_initial_value():
    assert LongGaugeMetric("testLongGauge", "Help", NAMESPACE, -50).get() == -50


def test_long_gauge_accepts_negative_delta():
    metric = LongGaugeMetric("testLongGauge", "Help", NAMESPACE, 10)
    assert metric.add_and_get(-25) == -15


def test_long_gauge_reset():
    metric = LongGaugeMetric("testLongGauge", "Help", NAMESPACE, 7)
    metric.add_and_get(100)
    metric.reset()
    assert metric.get() == 7


def test_double_gauge_sequence():
    metric = DoubleGaugeMetric("testDoubleGauge", "Help", NAMESPACE)
    assert metric.get() == 0.0
    assert metric.inc_and_get() == 1.0
    assert metric.dec_and_get() == 0.0
    assert metric.add_and_get(2.5) == 2.5
    assert metric.add_and_get(-4.0) == -1.5
    metric.set(0.25)
    assert metric.get() == 0.25


def test_double_gauge_keeps_float_type():
    metric = DoubleGaugeMetric("testDoubleGauge", "Help", NAMESPACE, 3)
    assert isinstance(metric.get(), float)
    metric.set(4)
    assert isinstance(metric.get(), float)


def test_info_returns_value():
    metric = InfoMetric("testInfo", "Help", NAMESPACE, "testInfoValue")
    assert metric.get() == "testInfoValue"


def test_info_accepts_empty_value():
    assert InfoMetric("testInfo", "Help", NAMESPACE, "").get() == ""


def test_info_reset_keeps_value():
    metric = InfoMetric("testInfo", "Help", NAMESPACE, "v1")
    metric.reset()
    assert metric.get() == "v1"


def test_repr_shows_name_and_value():
    assert repr(CounterMetric("hits", "Help", NAMESPACE, 3)) == "CounterMetric('test_hits', value=3)"
