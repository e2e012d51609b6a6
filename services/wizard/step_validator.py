# -*- coding: utf-8 -*-
"""
Step validation service for the Template Upload Wizard.

Validates step data held by the state manager without UI coupling.
"""

from typing import Tuple, TYPE_CHECKING

from app.config import Config
from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep

if TYPE_CHECKING:
    from services.wizard.state_manager import WizardStateManager


class StepValidator:
    """Validates wizard step data for each logical step."""

    @staticmethod
    def validate_step(step: LogicalStep, manager: 'WizardStateManager') -> Tuple[bool, str]:
        """
        Validate the data of one logical step.

        Args:
            step: Logical step to validate
            manager: WizardStateManager holding the step data

        Returns:
            Tuple of (is_valid, error_message)
        """
        if step == LogicalStep.UPLOAD:
            upload = manager.get_step_data(LogicalStep.UPLOAD)
            if upload is None or not upload.file_name:
                return False, tr("validation.upload.file_required")
            if not upload.is_uploaded or not upload.public_url:
                return False, tr("validation.upload.not_uploaded")
            return True, ""

        elif step == LogicalStep.COMPONENT_DEFINITION:
            definition = manager.get_step_data(LogicalStep.COMPONENT_DEFINITION)
            if definition is None or len(definition.components) == 0:
                return False, tr("validation.components.required")
            for region in definition.components:
                if not region.is_valid():
                    return False, tr("validation.components.invalid",
                                     label=region.label or region.id)
            return True, ""

        elif step == LogicalStep.METADATA:
            metadata = manager.get_step_data(LogicalStep.METADATA)
            if metadata is None or not metadata.name.strip():
                return False, tr("validation.metadata.name_required")
            if len(metadata.name.strip()) > Config.MAX_TEMPLATE_NAME_LENGTH:
                return False, tr("validation.metadata.name_too_long",
                                 max=Config.MAX_TEMPLATE_NAME_LENGTH)
            if len(metadata.description.strip()) > Config.MAX_TEMPLATE_DESCRIPTION_LENGTH:
                return False, tr("validation.metadata.description_too_long",
                                 max=Config.MAX_TEMPLATE_DESCRIPTION_LENGTH)
            if not metadata.category_id:
                return False, tr("validation.metadata.category_required")
            if len(metadata.tags) > Config.MAX_TEMPLATE_TAGS:
                return False, tr("validation.metadata.too_many_tags",
                                 max=Config.MAX_TEMPLATE_TAGS)
            return True, ""

        elif step == LogicalStep.SUMMARY:
            summary = manager.get_step_data(LogicalStep.SUMMARY)
            if summary is None or not summary.is_reviewed:
                return False, tr("validation.summary.confirm_required")
            return True, ""

        elif step == LogicalStep.COMPLETION:
            # Final step: ready to submit once every earlier step is complete
            total = manager.get_total_steps()
            for number in range(1, total):
                if not manager.is_step_completed(number):
                    return False, tr("validation.completion.not_ready")
            return True, ""

        raise ValueError(f"Unknown logical step: {step}")
