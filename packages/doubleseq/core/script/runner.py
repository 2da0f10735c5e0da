"""Replay operation scripts against a sequence."""

from __future__ import annotations

import logging

from doubleseq.core.script.models import OperationScript, ScriptResult, ScriptStep, SequenceOp, StepRecord
from doubleseq.core.sequence import DoubleLinkedSeq, SequenceError

logger = logging.getLogger(__name__)


class ScriptStepError(Exception):
    """Raised when a step fails; wraps the underlying SequenceError."""

    def __init__(self, index: int, step: ScriptStep, cause: SequenceError):
        self.index = index
        self.step = step
        self.cause = cause
        super().__init__(f"Step {index} ({step.op.value}) failed: {cause}")


def apply_step(seq: DoubleLinkedSeq, step: ScriptStep) -> None:
    """Apply one step to seq.

    Raises:
        SequenceError: If the operation's precondition does not hold
    """
    if step.op == SequenceOp.INSERT_BEFORE:
        assert step.value is not None
        seq.insert_before(step.value)
    elif step.op == SequenceOp.INSERT_AFTER:
        assert step.value is not None
        seq.insert_after(step.value)
    elif step.op == SequenceOp.REMOVE_CURRENT:
        seq.remove_current()
    elif step.op == SequenceOp.RESET_TO_FRONT:
        seq.reset_to_front()
    elif step.op == SequenceOp.ADVANCE:
        seq.advance()
    elif step.op == SequenceOp.APPEND_ALL:
        seq.append_all(DoubleLinkedSeq.from_iterable(step.values or []))


def run_script(script: OperationScript, debug_markers: bool = False) -> ScriptResult:
    """Replay script from its initial values.

    Args:
        script: Script to replay
        debug_markers: Record renderings with precursor/tail markers

    Returns:
        ScriptResult with the final sequence and one record per step

    Raises:
        ScriptStepError: If a step's operation fails
    """
    seq = DoubleLinkedSeq.from_iterable(script.initial)
    records: list[StepRecord] = []

    for index, step in enumerate(script.steps):
        try:
            apply_step(seq, step)
        except SequenceError as e:
            logger.debug(f"Step {index} failed: {e}")
            raise ScriptStepError(index, step, e) from e

        rendering = seq.to_debug_string() if debug_markers else seq.to_display_string()
        records.append(StepRecord(index=index, op=step.op, rendering=rendering, size=seq.size()))

    logger.debug(f"Replayed {len(records)} steps, final size={seq.size()}")
    return ScriptResult(sequence=seq, records=records)
