# -*- coding: utf-8 -*-
"""
Template upload wizard core: state, logical steps, payloads, validation
and draft persistence. No Qt dependency.
"""

from .logical_steps import LogicalStep, resolve_logical_step, step_number_for
from .state_manager import WizardStateManager, WizardState, WizardStatus
from .step_data import (
    UploadData, ComponentDefinitionData, MetadataData, SummaryData, CompletionData,
    STEP_PAYLOAD_TYPES
)
from .draft_store import WizardDraftStore

__all__ = [
    'LogicalStep',
    'resolve_logical_step',
    'step_number_for',
    'WizardStateManager',
    'WizardState',
    'WizardStatus',
    'UploadData',
    'ComponentDefinitionData',
    'MetadataData',
    'SummaryData',
    'CompletionData',
    'STEP_PAYLOAD_TYPES',
    'WizardDraftStore',
]
