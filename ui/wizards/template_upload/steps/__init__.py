# -*- coding: utf-8 -*-
"""Step-views of the Template Upload Wizard."""

from .upload_step import UploadStep, UploadWorker
from .component_definition_step import ComponentDefinitionStep
from .metadata_step import MetadataStep, CategoriesWorker, CreateCategoryWorker
from .summary_step import SummaryStep
from .completion_step import CompletionStep

__all__ = [
    'UploadStep',
    'UploadWorker',
    'ComponentDefinitionStep',
    'MetadataStep',
    'CategoriesWorker',
    'CreateCategoryWorker',
    'SummaryStep',
    'CompletionStep',
]
