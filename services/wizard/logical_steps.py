# -*- coding: utf-8 -*-
"""
Logical steps of the template upload wizard.

The wizard has five logical steps. The component definition step only
exists for PNG uploads, so literal step numbers shift by one for other
files. resolve_logical_step() is the single place that maps a literal
step number to its logical step; indicators, titles and step-view
loading all go through it.
"""

from enum import Enum
from typing import List

from services.translation_manager import tr

TOTAL_STEPS_WITH_COMPONENTS = 5
TOTAL_STEPS_WITHOUT_COMPONENTS = 4


class LogicalStep(Enum):
    """Named wizard phase, independent of its literal number."""
    UPLOAD = "upload"
    COMPONENT_DEFINITION = "componentDefinition"
    METADATA = "metadata"
    SUMMARY = "summary"
    COMPLETION = "completion"


_SEQUENCE_WITH_COMPONENTS = (
    LogicalStep.UPLOAD,
    LogicalStep.COMPONENT_DEFINITION,
    LogicalStep.METADATA,
    LogicalStep.SUMMARY,
    LogicalStep.COMPLETION,
)

_SEQUENCE_WITHOUT_COMPONENTS = (
    LogicalStep.UPLOAD,
    LogicalStep.METADATA,
    LogicalStep.SUMMARY,
    LogicalStep.COMPLETION,
)

_TITLE_KEYS = {
    LogicalStep.UPLOAD: "step.upload.title",
    LogicalStep.COMPONENT_DEFINITION: "step.components.title",
    LogicalStep.METADATA: "step.metadata.title",
    LogicalStep.SUMMARY: "step.summary.title",
    LogicalStep.COMPLETION: "step.completion.title",
}

_DESCRIPTION_KEYS = {
    LogicalStep.UPLOAD: "step.upload.description",
    LogicalStep.COMPONENT_DEFINITION: "step.components.description",
    LogicalStep.METADATA: "step.metadata.description",
    LogicalStep.SUMMARY: "step.summary.description",
    LogicalStep.COMPLETION: "step.completion.description",
}


def total_steps_for(component_definition_required: bool) -> int:
    if component_definition_required:
        return TOTAL_STEPS_WITH_COMPONENTS
    return TOTAL_STEPS_WITHOUT_COMPONENTS


def step_sequence(total_steps: int) -> List[LogicalStep]:
    """Ordered logical steps for a wizard with `total_steps` slots."""
    if total_steps == TOTAL_STEPS_WITH_COMPONENTS:
        return list(_SEQUENCE_WITH_COMPONENTS)
    if total_steps == TOTAL_STEPS_WITHOUT_COMPONENTS:
        return list(_SEQUENCE_WITHOUT_COMPONENTS)
    raise ValueError(f"Unsupported total step count: {total_steps}")


def resolve_logical_step(step_number: int, total_steps: int) -> LogicalStep:
    """
    Map a 1-indexed literal step number to its logical step.

    Args:
        step_number: Literal step number (1..total_steps)
        total_steps: 5 when the component definition step is present, else 4

    Raises:
        ValueError: if step_number is outside 1..total_steps
    """
    sequence = step_sequence(total_steps)
    if not 1 <= step_number <= len(sequence):
        raise ValueError(f"Step number {step_number} outside 1..{total_steps}")
    return sequence[step_number - 1]


def step_number_for(step: LogicalStep, total_steps: int) -> int:
    """
    Inverse of resolve_logical_step().

    Raises:
        ValueError: if the logical step is not part of this sequence
            (component definition in a 4-step wizard)
    """
    sequence = step_sequence(total_steps)
    if step not in sequence:
        raise ValueError(f"{step.value} is not part of a {total_steps}-step wizard")
    return sequence.index(step) + 1


def get_logical_step_title(step: LogicalStep) -> str:
    return tr(_TITLE_KEYS[step])


def get_logical_step_description(step: LogicalStep) -> str:
    return tr(_DESCRIPTION_KEYS[step])
