# -*- coding: utf-8 -*-
"""
Template Upload Wizard.

Multi-step wizard for creating page templates from an uploaded file.

Steps:
1. Upload File - PNG image or Figma file
2. Define Components - interactive regions (PNG uploads only)
3. Configure Template - name, description, category, tags
4. Review & Submit - read-only review with confirmation
5. Complete - submission result

Figma uploads skip step 2, so the wizard has four steps for them.
"""

from functools import partial
from typing import Any, Dict, Optional

from PyQt5.QtWidgets import QWidget

from services.api_client import TemplateApiClient, get_api_client
from services.wizard.logical_steps import LogicalStep
from services.wizard.state_manager import WizardStateManager
from ui.wizards.framework import BaseWizard
from ui.wizards.template_upload.steps import (
    UploadStep,
    ComponentDefinitionStep,
    MetadataStep,
    SummaryStep,
    CompletionStep
)
from utils.logger import get_logger

logger = get_logger(__name__)


class TemplateUploadWizard(BaseWizard):
    """
    Template Upload Wizard.

    Usage:
        state_manager = WizardStateManager(draft_store=WizardDraftStore())
        wizard = TemplateUploadWizard(state_manager)
        wizard.wizard_completed.connect(on_template_created)
    """

    def __init__(self, state_manager: WizardStateManager,
                 api_client: Optional[TemplateApiClient] = None,
                 parent: Optional[QWidget] = None):
        """
        Initialize the wizard.

        Args:
            state_manager: State of this wizard session
            api_client: Client for uploads, categories and submission
                (default: shared client)
            parent: Parent widget
        """
        self.api_client = api_client or get_api_client()
        super().__init__(state_manager, parent)

    def create_step_registry(self):
        return {
            LogicalStep.UPLOAD: partial(UploadStep, api_client=self.api_client),
            LogicalStep.COMPONENT_DEFINITION: ComponentDefinitionStep,
            LogicalStep.METADATA: partial(MetadataStep, api_client=self.api_client),
            LogicalStep.SUMMARY: SummaryStep,
            LogicalStep.COMPLETION: CompletionStep,
        }

    def submit(self, template_data: Dict[str, Any]) -> str:
        return self.api_client.create_template(template_data)
