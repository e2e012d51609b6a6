# -*- coding: utf-8 -*-
"""
Tests for the Template Upload Wizard.

Tests cover:
- Step-view loading per logical step
- Upload flow for PNG and Figma files
- Full run through submission
- Submission failures, re-entrancy and stale results
- Cancellation with injected confirmation
"""

import pytest

from conftest import fill_to_summary, fill_to_final, server_error
from services.exceptions import MissingStepViewError
from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep
from services.wizard.state_manager import WizardStatus
from services.wizard.step_data import SummaryData
from ui.wizards.framework import base_step
from ui.wizards.template_upload import TemplateUploadWizard
from ui.wizards.template_upload.steps import (
    UploadStep, ComponentDefinitionStep, MetadataStep, SummaryStep, CompletionStep
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def _wait_for_workers(wizard):
    workers = list(wizard._workers) + list(base_step._detached_workers)
    if wizard.current_view is not None:
        workers += list(wizard.current_view._workers)
    for worker in workers:
        worker.wait(5000)


@pytest.fixture
def wizard(qtbot, manager, api_client, blocking_event):
    wizard = TemplateUploadWizard(manager, api_client=api_client)
    qtbot.addWidget(wizard)
    yield wizard
    blocking_event.set()
    _wait_for_workers(wizard)


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "hero.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def figma_file(tmp_path):
    path = tmp_path / "design.fig"
    path.write_bytes(b"figma-document")
    return path


class TestWizardInitialization:
    """Test wizard creation."""

    def test_starts_with_upload_step(self, wizard):
        assert isinstance(wizard.current_view, UploadStep)
        assert wizard.footer.btn_previous.isEnabled() is False
        assert wizard.footer.btn_next.isEnabled() is False
        assert wizard.footer.btn_next.text() == tr("button.next")

    def test_provisional_indicators(self, wizard):
        assert len(wizard.indicator_bar.buttons) == 5

    def test_missing_step_view_raises(self, qtbot, manager, api_client):
        class IncompleteWizard(TemplateUploadWizard):
            def create_step_registry(self):
                registry = super().create_step_registry()
                del registry[LogicalStep.SUMMARY]
                return registry

        fill_to_summary(manager)
        with pytest.raises(MissingStepViewError):
            IncompleteWizard(manager, api_client=api_client)

    def test_missing_step_view_after_navigation_becomes_step_error(self, qtbot, manager, api_client):
        class IncompleteWizard(TemplateUploadWizard):
            def create_step_registry(self):
                registry = super().create_step_registry()
                del registry[LogicalStep.SUMMARY]
                return registry

        fill_to_summary(manager)
        manager.go_to_step(3)
        wizard = IncompleteWizard(manager, api_client=api_client)
        qtbot.addWidget(wizard)

        assert manager.next_step() is True

        assert wizard.current_view is None
        assert manager.get_step_error(4) == tr("error.step_view", error=tr("error.api.unknown"))
        assert wizard.error_label.text() == manager.get_step_error(4)

        manager.previous_step()
        assert isinstance(wizard.current_view, MetadataStep)
        _wait_for_workers(wizard)


class TestUpload:
    """Test the upload step inside the wizard."""

    def test_png_upload_advances_to_components(self, qtbot, wizard, manager, api_client, png_file):
        assert wizard.current_view.select_file(str(png_file)) is True

        qtbot.waitUntil(lambda: manager.current_step == 2, timeout=5000)

        assert isinstance(wizard.current_view, ComponentDefinitionStep)
        upload = manager.get_step_data(LogicalStep.UPLOAD)
        assert upload.is_uploaded is True
        assert upload.upload_id == "up-1"
        assert upload.public_url == "https://cdn.test/hero.png"
        assert manager.get_total_steps() == 5
        assert [c[0] for c in api_client.calls[:3]] == [
            "initiate_upload", "upload_to_storage", "complete_upload"
        ]

    def test_figma_upload_skips_components(self, qtbot, wizard, manager, figma_file):
        wizard.current_view.select_file(str(figma_file))

        qtbot.waitUntil(lambda: manager.current_step == 2, timeout=5000)

        assert manager.get_total_steps() == 4
        assert isinstance(wizard.current_view, MetadataStep)
        assert len(wizard.indicator_bar.buttons) == 4

    def test_invalid_file_reports_error(self, wizard, manager, tmp_path):
        path = tmp_path / "photo.jpg"
        path.write_bytes(b"jpeg")

        assert wizard.current_view.select_file(str(path)) is False

        assert manager.get_step_error(1) == tr("upload.error.invalid_type")
        assert wizard.error_label.text() == tr("upload.error.invalid_type")

    def test_upload_failure(self, qtbot, wizard, manager, api_client, png_file):
        api_client.upload_error = server_error("Storage down")
        wizard.current_view.select_file(str(png_file))

        qtbot.waitUntil(lambda: manager.get_step_error(1) is not None, timeout=5000)

        assert manager.get_step_error(1) == f"{tr('error.upload.failed')}: Storage down"
        assert manager.current_step == 1
        assert manager.get_step_data(LogicalStep.UPLOAD).is_uploaded is False

    def test_file_type_change_rejected_after_step_one(self, qtbot, wizard, manager, png_file, figma_file):
        wizard.current_view.select_file(str(png_file))
        qtbot.waitUntil(lambda: manager.current_step == 2, timeout=5000)
        wizard.handle_back()

        assert wizard.current_view.select_file(str(figma_file)) is False

        assert manager.get_step_error(1) == tr("upload.error.type_locked")
        assert manager.get_step_data(LogicalStep.UPLOAD).file_name == "hero.png"


class TestNavigation:
    """Test Next/Back handling."""

    def test_next_on_invalid_step_shows_error(self, wizard, manager):
        wizard.handle_next()
        assert manager.current_step == 1
        assert manager.get_step_error(1) == tr("validation.upload.file_required")
        assert not wizard.error_label.isHidden()

    def test_back_and_forward(self, wizard, manager):
        fill_to_summary(manager)
        assert isinstance(wizard.current_view, SummaryStep)

        wizard.handle_back()
        assert isinstance(wizard.current_view, MetadataStep)
        assert wizard.footer.btn_next.isEnabled() is True

        wizard.handle_next()
        assert manager.current_step == 4

    def test_only_one_step_view_exists(self, wizard, manager):
        fill_to_summary(manager)
        views = wizard.step_container.findChildren(base_step.BaseStep)
        assert [v for v in views if not v.is_destroyed] == [wizard.current_view]

    def test_indicator_jumps_to_completed_step(self, wizard, manager):
        fill_to_summary(manager)
        wizard.indicator_bar.buttons[0].click()
        assert manager.current_step == 1
        assert isinstance(wizard.current_view, UploadStep)


class TestSubmission:
    """Test completing the wizard."""

    def test_full_png_run(self, qtbot, wizard, manager, api_client, png_file):
        wizard.current_view.select_file(str(png_file))
        qtbot.waitUntil(lambda: manager.current_step == 2, timeout=5000)

        assert wizard.current_view.add_component() is not None
        wizard.handle_next()
        assert isinstance(wizard.current_view, MetadataStep)

        metadata_view = wizard.current_view
        qtbot.waitUntil(lambda: metadata_view.category_combo.findData("cat-1") >= 0, timeout=5000)
        metadata_view.name_input.setText("Spring Sale")
        metadata_view.category_combo.setCurrentIndex(metadata_view.category_combo.findData("cat-1"))
        wizard.handle_next()
        assert isinstance(wizard.current_view, SummaryStep)

        wizard.current_view.confirm_checkbox.setChecked(True)
        wizard.handle_next()
        assert isinstance(wizard.current_view, CompletionStep)
        assert wizard.footer.btn_next.text() == tr("button.complete")

        with qtbot.waitSignal(wizard.wizard_completed, timeout=5000) as blocker:
            wizard.handle_next()

        assert manager.status == WizardStatus.COMPLETED
        assert manager.get_state().result_id == "tpl-123"
        assert blocker.args[0]["result_id"] == "tpl-123"
        payload = api_client.created[0]
        assert payload["name"] == "Spring Sale"
        assert payload["categoryId"] == "cat-1"
        assert payload["categoryName"] == "Marketing"
        assert len(payload["components"]) == 1
        assert wizard.current_view.status_label.text() == tr("completion.success")
        assert wizard.footer.btn_previous.isEnabled() is False
        assert wizard.footer.btn_cancel.isEnabled() is False

    def test_server_error_keeps_wizard_open(self, qtbot, wizard, manager, api_client):
        api_client.create_error = server_error("DB unavailable")
        fill_to_final(manager)

        assert wizard.complete_wizard() is True
        qtbot.waitUntil(lambda: not wizard.is_submitting, timeout=5000)

        state = manager.get_state()
        assert state.step_errors[state.total_steps] == "DB unavailable"
        assert state.status == WizardStatus.IN_PROGRESS
        assert wizard.footer.btn_next.isEnabled() is True
        assert wizard.footer.btn_next.text() == tr("button.complete")
        assert wizard.error_label.text() == "DB unavailable"

    def test_retry_after_failure(self, qtbot, wizard, manager, api_client):
        api_client.create_error = server_error("DB unavailable")
        fill_to_final(manager)
        wizard.complete_wizard()
        qtbot.waitUntil(lambda: not wizard.is_submitting, timeout=5000)

        api_client.create_error = None
        with qtbot.waitSignal(wizard.wizard_completed, timeout=5000):
            wizard.complete_wizard()

        assert manager.status == WizardStatus.COMPLETED
        assert manager.get_step_error(5) is None

    def test_submission_is_not_reentrant(self, qtbot, wizard, manager, api_client, blocking_event):
        api_client.release_create = blocking_event
        fill_to_final(manager)

        assert wizard.complete_wizard() is True
        assert wizard.complete_wizard() is False
        assert wizard.footer.btn_next.isEnabled() is False
        assert wizard.footer.btn_next.text() == tr("wizard.submitting")
        assert wizard.footer.btn_previous.isEnabled() is False

        blocking_event.set()
        qtbot.waitUntil(lambda: manager.status == WizardStatus.COMPLETED, timeout=5000)
        assert api_client.calls.count(("create_template",)) == 1

    def test_incomplete_steps_block_submission(self, wizard, manager):
        fill_to_final(manager)
        manager.update_step_data(LogicalStep.SUMMARY, SummaryData(is_reviewed=False))

        assert wizard.complete_wizard() is False
        assert manager.get_step_error(5) == tr("validation.completion.not_ready")

    def test_result_of_reset_session_is_discarded(self, qtbot, wizard, manager, api_client, blocking_event):
        api_client.release_create = blocking_event
        fill_to_final(manager)
        wizard.complete_wizard()

        wizard.reset()
        blocking_event.set()
        _wait_for_workers(wizard)
        qtbot.wait(100)

        assert manager.status == WizardStatus.IN_PROGRESS
        assert manager.current_step == 1
        assert manager.get_state().result_id is None
        assert wizard.is_submitting is False


class TestCancel:
    """Test cancellation."""

    def test_declined_cancel_keeps_state(self, wizard, manager):
        fill_to_summary(manager)
        before = manager.get_state()

        assert wizard.handle_cancel(confirm=lambda: False) is False

        after = manager.get_state()
        assert after.status == WizardStatus.IN_PROGRESS
        assert after.current_step == before.current_step
        assert dict(after.step_data) == dict(before.step_data)

    def test_confirmed_cancel(self, qtbot, wizard, manager):
        fill_to_summary(manager)

        with qtbot.waitSignal(wizard.wizard_cancelled, timeout=1000):
            assert wizard.handle_cancel(confirm=lambda: True) is True

        assert manager.status == WizardStatus.CANCELLED
        assert dict(manager.get_state().step_data) == {}
        assert wizard.current_view is None

    def test_cancel_after_completion_is_ignored(self, wizard, manager):
        fill_to_final(manager)
        manager.mark_completed("tpl-1")
        assert wizard.handle_cancel(confirm=lambda: True) is False
        assert manager.status == WizardStatus.COMPLETED
