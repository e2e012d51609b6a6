# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.success": "Success",
    "dialog.confirm": "Confirm",

    # Buttons
    "button.cancel": "Cancel",
    "button.back": "Back",
    "button.next": "Next",
    "button.complete": "Complete",
    "button.add": "Add",
    "button.remove": "Remove",
    "button.browse": "Choose File",
    "button.clear_all": "Clear All",
    "button.retry": "Retry",

    # Wizard shell
    "wizard.title": "Create New Template",
    "wizard.subtitle": "Follow the steps below to create your template",
    "wizard.step_of": "Step {current} of {total}",
    "wizard.confirm_cancel": "Are you sure you want to cancel? All progress will be lost.",
    "wizard.submitting": "Creating Template...",
    "wizard.completed": "Template created successfully.",
    "wizard.cancelled": "Template creation cancelled.",
    "wizard.resume_draft": "An unfinished template was found. Do you want to continue where you left off?",

    # Step titles/descriptions
    "step.upload.title": "Upload File",
    "step.upload.description": "Upload your template file (PNG or Figma)",
    "step.components.title": "Define Components",
    "step.components.description": "Define interactive components for PNG templates",
    "step.metadata.title": "Configure Template",
    "step.metadata.description": "Set template name, description, and category",
    "step.summary.title": "Review & Submit",
    "step.summary.description": "Review all information before submitting",
    "step.completion.title": "Complete",
    "step.completion.description": "Template creation completed",

    # Validation
    "validation.upload.file_required": "Please select a template file.",
    "validation.upload.not_uploaded": "Please wait for the upload to finish.",
    "validation.components.required": "Define at least one component region.",
    "validation.components.invalid": "Component region '{label}' has an invalid size or type.",
    "validation.metadata.name_required": "Template name is required.",
    "validation.metadata.name_too_long": "Template name must not exceed {max} characters.",
    "validation.metadata.description_too_long": "Description must not exceed {max} characters.",
    "validation.metadata.category_required": "Please choose a category.",
    "validation.metadata.too_many_tags": "Maximum {max} tags allowed.",
    "validation.summary.confirm_required": "Please confirm that the information is correct.",
    "validation.completion.not_ready": "Complete all previous steps before submitting.",

    # Upload step
    "upload.hint": "Choose a PNG image or a Figma file (.fig), up to {limit}.",
    "upload.no_file": "No file selected",
    "upload.status.initiating": "Preparing upload...",
    "upload.status.uploading": "Uploading file...",
    "upload.status.finalizing": "Finalizing upload...",
    "upload.status.done": "Upload complete",
    "upload.error.invalid_type": "Please select a PNG image or Figma file (.fig)",
    "upload.error.empty_file": "The selected file is empty.",
    "upload.error.too_large": "File size must be less than {limit}",
    "upload.error.read_failed": "The selected file could not be read.",
    "upload.error.type_locked": "The file type cannot change after the upload step is complete. Reset the wizard to use a different file.",
    "upload.file_dialog": "Select Template File",
    "upload.file_filter": "Template files (*.png *.fig)",

    # Component definition step
    "components.hint": "Enter the position and size of each interactive region on the image.",
    "components.empty": "No components defined yet",
    "components.confirm_clear": "Are you sure you want to clear all components?",
    "components.field.x": "X",
    "components.field.y": "Y",
    "components.field.width": "Width",
    "components.field.height": "Height",
    "components.field.type": "Type",
    "components.field.label": "Label",

    # Metadata step
    "metadata.name": "Template Name",
    "metadata.description": "Description",
    "metadata.category": "Category",
    "metadata.select_category": "Select a category",
    "metadata.tags": "Tags",
    "metadata.tag_placeholder": "Type a tag and press Add",
    "metadata.no_tags": "No tags added yet",
    "metadata.categories_load_failed": "Categories could not be loaded. Retry or create a new category.",
    "metadata.new_category": "New Category",
    "metadata.new_category_prompt": "Category name:",

    # Summary step
    "summary.file": "File",
    "summary.file_type": "File Type",
    "summary.file_size": "File Size",
    "summary.name": "Name",
    "summary.description": "Description",
    "summary.category": "Category",
    "summary.tags": "Tags",
    "summary.components": "Components",
    "summary.none": "None",
    "summary.confirm": "I have reviewed the template information",

    # Completion step
    "completion.ready": "Everything is ready. Click Complete to create the template.",
    "completion.success": "Template created successfully!",
    "completion.template_id": "Template ID: {id}",

    # API errors
    "error.api.connection": "Connection error. Please check your internet connection.",
    "error.api.timeout": "Connection timeout. Please try again.",
    "error.api.server": "Server error. Please contact support.",
    "error.api.unknown": "An unexpected error occurred. Please try again.",
    "error.upload.failed": "Failed to upload file",
    "error.step_view": "Something went wrong in this step: {error}",
    "error.missing_step_data": "Some required information is missing ({step}).",
}
