"""
Pydantic Models

Settings for the sequence library and the models describing declarative
operator pipelines.
"""

import logging
import os
from collections.abc import Collection
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SequenceSettings(BaseModel):
    """Process-wide settings for the sequence library"""
    show_max_values: int = Field(
        50,
        description="Number of elements rendered by show() and str()",
        ge=1
    )
    log_level: str = Field(
        "INFO",
        description="Level passed to logging setup"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Accept stdlib level names in any case"""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> "SequenceSettings":
        """Read SEQUENCE_SHOW_MAX_VALUES and SEQUENCE_LOG_LEVEL, falling back to defaults"""
        values = {}
        if os.environ.get('SEQUENCE_SHOW_MAX_VALUES'):
            values['show_max_values'] = os.environ['SEQUENCE_SHOW_MAX_VALUES']
        if os.environ.get('SEQUENCE_LOG_LEVEL'):
            values['log_level'] = os.environ['SEQUENCE_LOG_LEVEL']
        return cls(**values)


_settings: Optional[SequenceSettings] = None


def get_settings() -> SequenceSettings:
    """Return the cached settings, loading them from the environment on first use"""
    global _settings
    if _settings is None:
        _settings = SequenceSettings.from_env()
        logger.debug(f"Loaded sequence settings: {_settings}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None


class OperationType(str, Enum):
    """Operators available to declarative pipelines"""
    TAKE = "take"
    DROP = "drop"
    CONS = "cons"
    SNOC = "snoc"
    CYCLE = "cycle"
    REVERSE = "reverse"
    MCONCAT = "mconcat"


COUNTED_OPERATIONS = (OperationType.TAKE, OperationType.DROP)
VALUED_OPERATIONS = (OperationType.CONS, OperationType.SNOC)


class OperationSpec(BaseModel):
    """A single operator in a pipeline"""
    type: OperationType = Field(
        ...,
        description="Operator to apply",
        examples=["take"]
    )
    count: Optional[int] = Field(
        None,
        description="Element count for take/drop",
        ge=0
    )
    value: Optional[Any] = Field(
        None,
        description="Element for cons/snoc"
    )

    @model_validator(mode='after')
    def validate_parameters(self):
        """Make sure each operator gets the parameter it needs"""
        if self.type in COUNTED_OPERATIONS and self.count is None:
            raise ValueError(f"Operation '{self.type.value}' requires a count")
        if self.type in VALUED_OPERATIONS and 'value' not in self.model_fields_set:
            raise ValueError(f"Operation '{self.type.value}' requires a value")
        return self


class PipelineRequest(BaseModel):
    """A source plus the operators to run over it"""
    source: List[Any] = Field(
        ...,
        description="Values the pipeline starts from"
    )
    operations: List[OperationSpec] = Field(
        ...,
        description="Operators applied left to right"
    )
    limit: Optional[int] = Field(
        None,
        description="Upper bound on the number of realised elements",
        ge=0
    )

    @field_validator('operations')
    @classmethod
    def validate_operations(cls, v):
        """At least one operator is required"""
        if not v:
            raise ValueError("At least one operation is required")
        return v

    @model_validator(mode='after')
    def validate_finite(self):
        """
        Walk the operators and reject pipelines that could never finish.

        ``bound`` is an upper bound on the number of elements reaching each
        operator, or None once a cycle has made the stream unbounded.
        ``candidates`` holds every value that may appear as an element.
        """
        bound: Optional[int] = len(self.source)
        candidates = list(self.source)

        for op in self.operations:
            if op.type in (OperationType.REVERSE, OperationType.SNOC) and bound is None:
                raise ValueError(f"Operation '{op.type.value}' needs a finite input; add a take before it")

            if op.type in VALUED_OPERATIONS:
                candidates.append(op.value)
                bound = None if bound is None else bound + 1
            elif op.type == OperationType.TAKE:
                bound = op.count if bound is None else min(bound, op.count)
            elif op.type == OperationType.DROP:
                bound = None if bound is None else max(0, bound - op.count)
            elif op.type == OperationType.CYCLE:
                # cycling nothing stays empty
                if bound != 0:
                    bound = None
            elif op.type == OperationType.MCONCAT:
                if not all(isinstance(value, Collection) for value in candidates):
                    raise ValueError("Operation 'mconcat' needs every element to be a list")
                longest = max((len(value) for value in candidates), default=0)
                if bound is None:
                    if longest == 0:
                        raise ValueError("Operation 'mconcat' over an unbounded cycle of empty lists never yields")
                else:
                    bound *= longest
                candidates = [item for value in candidates for item in value]

        if bound is None and self.limit is None:
            raise ValueError("Pipeline with cycle needs a limit or a following take")
        return self


class PerformanceInfo(BaseModel):
    """Timing and memory figures for one pipeline run"""
    processing_time_ms: float = Field(..., description="Wall time in milliseconds", ge=0)
    memory_usage_mb: float = Field(..., description="Peak traced memory in MB", ge=0)
    input_size: int = Field(..., description="Number of source elements", ge=0)
    output_size: int = Field(..., description="Number of realised elements", ge=0)


class PipelineResult(BaseModel):
    """Outcome of a pipeline run"""
    result: List[Any] = Field(..., description="Realised elements")
    operations_applied: List[str] = Field(..., description="Operator names in order")
    performance: PerformanceInfo
    timestamp: datetime = Field(default_factory=datetime.now, description="Completion time")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "result": [1, 0, 1, 2],
                "operations_applied": ["cons", "take"],
                "performance": {
                    "processing_time_ms": 0.42,
                    "memory_usage_mb": 0.01,
                    "input_size": 3,
                    "output_size": 4
                },
                "timestamp": "2024-01-01T12:00:00Z"
            }
        }
    )
