# -*- coding: utf-8 -*-
"""
Template Upload Wizard.

Upload -> (Define Components, PNG only) -> Configure -> Review -> Complete
"""

from .template_upload_wizard import TemplateUploadWizard

__all__ = ['TemplateUploadWizard']
