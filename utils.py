"""
Utility functions for the sequence library

Logging setup, performance measurement and declarative pipelines built from
pydantic request models.
"""

import gc
import logging
import sys
import time
import tracemalloc
from typing import Any, Callable, Dict, List, Optional, Tuple

import operators
from models import (
    OperationSpec,
    OperationType,
    PerformanceInfo,
    PipelineRequest,
    PipelineResult,
    get_settings,
)
from sequence import Sequence, to_seq

logger = logging.getLogger(__name__)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Setup structured logging for scripts and demos"""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    return logging.getLogger('sequence')


# Global performance tracking
_performance_metrics = {
    "operations": [],
    "total_time_ms": 0.0,
    "total_memory_mb": 0.0,
    "operation_count": 0
}


def _record(performance_info: Dict[str, Any]) -> None:
    _performance_metrics["operations"].append(performance_info)
    _performance_metrics["total_time_ms"] += performance_info["execution_time_ms"]
    _performance_metrics["total_memory_mb"] += performance_info["memory_usage_mb"]
    _performance_metrics["operation_count"] += 1


def measure_performance(operation_name: str, func: Callable, *args, **kwargs) -> Tuple[Any, Dict[str, Any]]:
    """
    Measure time and peak memory of a function call.

    Returns the call result and its metrics. Only the metrics are recorded;
    failures are recorded too and then re-raised.
    """
    tracemalloc.start()
    gc.collect()
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _current, peak = tracemalloc.get_traced_memory()

        performance_info = {
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak / 1024 / 1024,
            "success": True,
            "result_size": len(result) if hasattr(result, "__len__") else None,
            "timestamp": time.time()
        }
        _record(performance_info)
        return result, performance_info

    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _current, peak = tracemalloc.get_traced_memory()
        _record({
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak / 1024 / 1024,
            "success": False,
            "error": str(e),
            "timestamp": time.time()
        })
        logger.error(f"{operation_name} failed after {execution_time_ms:.2f}ms: {e}")
        raise

    finally:
        tracemalloc.stop()


def get_performance_summary() -> Dict[str, Any]:
    """Get summary of all performance metrics"""
    count = _performance_metrics["operation_count"]
    if count == 0:
        return {
            "total_operations": 0,
            "total_time_ms": 0.0,
            "total_memory_mb": 0.0,
            "avg_time_ms": 0.0,
            "avg_memory_mb": 0.0
        }

    return {
        "total_operations": count,
        "total_time_ms": _performance_metrics["total_time_ms"],
        "total_memory_mb": _performance_metrics["total_memory_mb"],
        "avg_time_ms": _performance_metrics["total_time_ms"] / count,
        "avg_memory_mb": _performance_metrics["total_memory_mb"] / count
    }


def clear_performance_metrics():
    """Clear all performance metrics"""
    global _performance_metrics
    _performance_metrics = {
        "operations": [],
        "total_time_ms": 0.0,
        "total_memory_mb": 0.0,
        "operation_count": 0
    }


def to_operator(spec: OperationSpec) -> Callable[[Sequence], Sequence]:
    """Translate one OperationSpec into a sequence operator"""
    if spec.type == OperationType.TAKE:
        return operators.take(spec.count)
    if spec.type == OperationType.DROP:
        return operators.drop(spec.count)
    if spec.type == OperationType.CONS:
        return operators.cons(spec.value)
    if spec.type == OperationType.SNOC:
        return operators.snoc(spec.value)
    if spec.type == OperationType.CYCLE:
        return operators.cycle
    if spec.type == OperationType.REVERSE:
        return operators.reverse_
    if spec.type == OperationType.MCONCAT:
        return operators.mconcat
    raise ValueError(f"Unknown operation: {spec.type}")


def build_pipeline(request: PipelineRequest) -> List[Callable[[Sequence], Sequence]]:
    """Turn a validated request into the list of operators it describes"""
    pipeline = [to_operator(op) for op in request.operations]
    if request.limit is not None:
        pipeline.append(operators.take(request.limit))
    return pipeline


def process_lazy_operations(request: PipelineRequest) -> PipelineResult:
    """Run a declarative pipeline and report what it produced"""
    operations_applied = [op.type.value for op in request.operations]
    logger.info(f"Running pipeline {operations_applied} over {len(request.source)} elements")

    sequence = operators.pipe(*build_pipeline(request))(to_seq(request.source))
    result, info = measure_performance("lazy_chain", list, sequence)

    return PipelineResult(
        result=result,
        operations_applied=operations_applied,
        performance=PerformanceInfo(
            processing_time_ms=info["execution_time_ms"],
            memory_usage_mb=info["memory_usage_mb"],
            input_size=len(request.source),
            output_size=len(result)
        )
    )
