# -*- coding: utf-8 -*-
"""
Wizard Framework - state-manager driven multi-step wizards.

Provides the wizard shell, the step-view base class, navigation state
computation and the step error boundary.
"""

from .base_wizard import BaseWizard, SubmissionWorker
from .base_step import BaseStep, StepValidationResult
from .step_navigator import StepNavigator, NavigationState, StepIndicator
from .error_boundary import ErrorBoundary, with_error_boundary

__all__ = [
    'BaseWizard',
    'SubmissionWorker',
    'BaseStep',
    'StepValidationResult',
    'StepNavigator',
    'NavigationState',
    'StepIndicator',
    'ErrorBoundary',
    'with_error_boundary'
]
