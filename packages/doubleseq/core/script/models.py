"""Models for replayable operation scripts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from doubleseq.core.sequence import DoubleLinkedSeq


class SequenceOp(str, Enum):
    """Operations a script step can perform."""

    INSERT_BEFORE = "insert_before"
    INSERT_AFTER = "insert_after"
    REMOVE_CURRENT = "remove_current"
    RESET_TO_FRONT = "reset_to_front"
    ADVANCE = "advance"
    APPEND_ALL = "append_all"


_VALUE_OPS = {SequenceOp.INSERT_BEFORE, SequenceOp.INSERT_AFTER}


class ScriptStep(BaseModel):
    """Single operation applied to the sequence."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    op: SequenceOp
    value: float | None = None
    values: list[float] | None = None

    @model_validator(mode="after")
    def _check_arguments(self) -> ScriptStep:
        if self.op in _VALUE_OPS and self.value is None:
            raise ValueError(f"{self.op.value} requires 'value'")
        if self.op == SequenceOp.APPEND_ALL and self.values is None:
            raise ValueError("append_all requires 'values'")
        return self


class OperationScript(BaseModel):
    """Initial values plus the ordered steps to replay."""

    model_config = ConfigDict(extra="forbid")

    initial: list[float] = Field(default_factory=list)
    steps: list[ScriptStep] = Field(default_factory=list)


class StepRecord(BaseModel):
    """Sequence state observed after a step."""

    model_config = ConfigDict(frozen=True)

    index: int
    op: SequenceOp
    rendering: str
    size: int


class ScriptResult(BaseModel):
    """Outcome of replaying a script."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    sequence: DoubleLinkedSeq
    records: list[StepRecord] = Field(default_factory=list)
