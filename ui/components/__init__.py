# -*- coding: utf-8 -*-
"""
Template Studio UI Components
"""

from .action_button import ActionButton
from .wizard_header import WizardHeader
from .wizard_footer import WizardFooter
from .step_indicator_bar import StepIndicatorBar

__all__ = [
    "ActionButton",
    "WizardHeader",
    "WizardFooter",
    "StepIndicatorBar",
]
