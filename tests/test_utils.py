import logging

import pytest

from models import OperationSpec, PipelineRequest, PipelineResult
from operators import take
from sequence import Range, repeat
import utils
from utils import (
    build_pipeline,
    clear_performance_metrics,
    get_performance_summary,
    measure_performance,
    process_lazy_operations,
    setup_logging,
    to_operator,
)


@pytest.fixture(autouse=True)
def clean_metrics():
    clear_performance_metrics()
    yield
    clear_performance_metrics()


class TestMeasurePerformance:
    """Test timing and memory measurement"""

    def test_measure_performance_basic(self):
        result, info = measure_performance("test_op", lambda: list(Range(9)))
        assert result == list(range(10))
        assert info["operation"] == "test_op"
        assert info["success"] is True
        assert info["result_size"] == 10
        assert info["execution_time_ms"] >= 0
        assert info["memory_usage_mb"] >= 0

    def test_measure_performance_with_args(self):
        result, _info = measure_performance("take", lambda s, n: take(n)(s).to_list(), repeat(1), n=3)
        assert result == [1, 1, 1]

    def test_measure_performance_reraises(self, caplog):
        def failing():
            raise RuntimeError("boom")

        with caplog.at_level(logging.ERROR, logger="utils"):
            with pytest.raises(RuntimeError, match="boom"):
                measure_performance("failing_op", failing)
        assert "failing_op failed" in caplog.text

        summary = get_performance_summary()
        assert summary["total_operations"] == 1

    def test_performance_summary(self):
        summary = get_performance_summary()
        assert summary["total_operations"] == 0
        assert summary["avg_time_ms"] == 0.0

        measure_performance("one", list, Range(2))
        measure_performance("two", list, Range(3))
        summary = get_performance_summary()
        assert summary["total_operations"] == 2
        assert summary["avg_time_ms"] == pytest.approx(summary["total_time_ms"] / 2)

    def test_recorded_metrics_do_not_keep_results(self):
        measure_performance("big", list, Range(999))
        recorded = utils._performance_metrics["operations"]
        assert len(recorded) == 1
        assert "result" not in recorded[0]
        assert recorded[0]["result_size"] == 1000

    def test_clear_performance_metrics(self):
        measure_performance("one", list, Range(2))
        clear_performance_metrics()
        assert get_performance_summary()["total_operations"] == 0


class TestPipelines:
    """Test declarative pipelines"""

    @pytest.mark.parametrize("spec,expected", [
        ({"type": "take", "count": 2}, [1, 2]),
        ({"type": "drop", "count": 2}, [3]),
        ({"type": "cons", "value": 0}, [0, 1, 2, 3]),
        ({"type": "snoc", "value": 4}, [1, 2, 3, 4]),
        ({"type": "reverse"}, [3, 2, 1]),
    ])
    def test_to_operator(self, spec, expected):
        operator = to_operator(OperationSpec(**spec))
        assert operator([1, 2, 3]) == expected

    def test_to_operator_mconcat(self):
        operator = to_operator(OperationSpec(type="mconcat"))
        assert operator([[1], [2, 3]]) == [1, 2, 3]

    def test_build_pipeline_appends_limit(self):
        request = PipelineRequest(source=[1], operations=[{"type": "cycle"}], limit=2)
        assert len(build_pipeline(request)) == 2

    def test_process_lazy_operations(self):
        request = PipelineRequest(
            source=[1, 2, 3],
            operations=[{"type": "cycle"}, {"type": "cons", "value": 0}],
            limit=8
        )
        outcome = process_lazy_operations(request)
        assert isinstance(outcome, PipelineResult)
        assert outcome.result == [0, 1, 2, 3, 1, 2, 3, 1]
        assert outcome.operations_applied == ["cycle", "cons"]
        assert outcome.performance.input_size == 3
        assert outcome.performance.output_size == 8

    def test_process_without_limit(self):
        request = PipelineRequest(
            source=[5, 6, 7],
            operations=[{"type": "drop", "count": 1}, {"type": "snoc", "value": 8}]
        )
        assert process_lazy_operations(request).result == [6, 7, 8]

    def test_process_logs_run(self, caplog):
        request = PipelineRequest(source=[1], operations=[{"type": "reverse"}])
        with caplog.at_level(logging.INFO, logger="utils"):
            process_lazy_operations(request)
        assert "Running pipeline" in caplog.text


class TestSetupLogging:
    """Test logging configuration"""

    def test_setup_logging_returns_library_logger(self):
        logger = setup_logging("DEBUG")
        assert logger.name == "sequence"
