"""Replayable operation scripts."""

from doubleseq.core.script.models import (
    OperationScript,
    ScriptResult,
    ScriptStep,
    SequenceOp,
    StepRecord,
)
from doubleseq.core.script.runner import ScriptStepError, apply_step, run_script

__all__ = [
    "OperationScript",
    "ScriptResult",
    "ScriptStep",
    "ScriptStepError",
    "SequenceOp",
    "StepRecord",
    "apply_step",
    "run_script",
]
