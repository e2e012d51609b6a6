# -*- coding: utf-8 -*-
"""
Tests for WizardStateManager.

Tests cover:
- Initial state and snapshots
- Conditional step count (PNG vs Figma)
- Navigation rules
- Step data writes and completion invalidation
- Terminal states and reset
- Template payload flattening
- Events
- Draft persistence
"""

import pytest

from conftest import (
    make_upload, make_metadata, make_components, fill_to_summary, fill_to_final
)
from services.exceptions import WizardContractError, MissingStepDataError
from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep
from services.wizard.state_manager import WizardStateManager, WizardStatus
from services.wizard.step_data import UploadData, MetadataData, SummaryData


class TestInitialState:
    """Test a freshly created manager."""

    def test_starts_at_step_one_in_progress(self, manager):
        state = manager.get_state()
        assert state.current_step == 1
        assert state.status == WizardStatus.IN_PROGRESS
        assert state.result_id is None
        assert dict(state.step_data) == {}
        assert dict(state.step_completion) == {}
        assert dict(state.step_errors) == {}

    def test_provisional_total_is_five(self, manager):
        assert manager.get_total_steps() == 5
        assert manager.get_logical_step() == LogicalStep.UPLOAD

    def test_cannot_proceed_without_file(self, manager):
        assert manager.can_proceed_to_next_step() is False
        assert manager.get_step_validation_error() == tr("validation.upload.file_required")

    def test_snapshot_is_read_only(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        state = manager.get_state()
        with pytest.raises(TypeError):
            state.step_data[LogicalStep.METADATA] = MetadataData()
        with pytest.raises(AttributeError):
            state.current_step = 3

    def test_snapshot_does_not_share_payloads(self, manager):
        manager.update_step_data(LogicalStep.METADATA, make_metadata())
        state = manager.get_state()
        state.step_data[LogicalStep.METADATA].tags.append("leak")
        assert manager.get_step_data(LogicalStep.METADATA).tags == ["hero", "sale"]


class TestConditionalSteps:
    """Test the component definition step appearing only for PNG files."""

    def test_png_has_five_steps(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("hero.png", "image/png"))
        assert manager.is_png_component_definition_required() is True
        assert manager.get_total_steps() == 5
        assert manager.get_logical_step(2) == LogicalStep.COMPONENT_DEFINITION

    def test_figma_has_four_steps(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("design.fig", "application/figma"))
        assert manager.is_png_component_definition_required() is False
        assert manager.get_total_steps() == 4
        assert manager.get_logical_step(2) == LogicalStep.METADATA
        assert manager.get_step_number(LogicalStep.COMPONENT_DEFINITION) is None

    def test_octet_stream_falls_back_to_file_name(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("HERO.PNG", "application/octet-stream"))
        assert manager.get_total_steps() == 5

    def test_step_titles_follow_logical_steps(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("design.fig", "application/figma"))
        assert manager.get_step_title(2) == tr("step.metadata.title")
        assert manager.get_step_title(9) == "Step 9"
        assert manager.get_step_description(9) == ""

    def test_classification_locked_after_step_one(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("hero.png", "image/png"))
        assert manager.next_step()

        stored = manager.update_step_data(
            LogicalStep.UPLOAD, make_upload("design.fig", "application/figma")
        )

        assert stored is False
        assert manager.get_total_steps() == 5
        assert manager.get_step_data(LogicalStep.UPLOAD).file_name == "hero.png"
        assert manager.get_step_error(1) == tr("upload.error.type_locked")

    def test_same_classification_allowed_after_lock(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("hero.png", "image/png"))
        assert manager.next_step()
        assert manager.update_step_data(LogicalStep.UPLOAD, make_upload("other.png", "image/png"))
        assert manager.get_step_data(LogicalStep.UPLOAD).file_name == "other.png"

    def test_reset_unlocks_classification(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("hero.png", "image/png"))
        manager.next_step()
        manager.reset()
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("design.fig", "application/figma"))
        assert manager.get_total_steps() == 4


class TestNavigation:
    """Test next/previous/go-to rules."""

    def test_next_blocked_by_invalid_step(self, manager):
        assert manager.next_step() is False
        assert manager.current_step == 1
        assert manager.is_step_completed(1) is False

    def test_next_blocked_when_earlier_step_became_incomplete(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        manager.next_step()
        manager.update_step_data(LogicalStep.COMPONENT_DEFINITION, make_components())
        manager.next_step()
        manager.update_step_data(LogicalStep.UPLOAD, is_uploaded=False)
        manager.update_step_data(LogicalStep.METADATA, make_metadata())

        assert manager.is_step_completed(1) is False
        assert manager.can_proceed_to_next_step() is True
        assert manager.next_step() is False
        assert manager.current_step == 3

    def test_next_marks_step_completed(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        assert manager.next_step() is True
        assert manager.current_step == 2
        assert manager.is_step_completed(1) is True

    def test_upload_not_finished_blocks_next(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload(uploaded=False))
        assert manager.next_step() is False
        assert manager.get_step_validation_error() == tr("validation.upload.not_uploaded")

    def test_next_clears_step_error(self, manager):
        manager.set_step_error(1, "Upload failed")
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        manager.next_step()
        assert manager.get_step_error(1) is None

    def test_next_at_last_step_is_noop(self, manager):
        fill_to_final(manager)
        assert manager.current_step == 5
        assert manager.next_step() is False
        assert manager.current_step == 5

    def test_previous_from_first_step_is_noop(self, manager):
        assert manager.previous_step() is False
        assert manager.current_step == 1

    def test_previous_keeps_completion(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        manager.next_step()
        assert manager.previous_step() is True
        assert manager.current_step == 1
        assert manager.is_step_completed(1) is True

    def test_go_to_earlier_step(self, manager):
        fill_to_summary(manager)
        assert manager.go_to_step(1) is True
        assert manager.current_step == 1

    def test_go_to_forward_requires_completed_steps(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        manager.next_step()
        assert manager.go_to_step(4) is False
        assert manager.current_step == 2

    def test_go_to_forward_after_going_back(self, manager):
        fill_to_summary(manager)
        manager.go_to_step(1)
        assert manager.go_to_step(4) is True
        assert manager.current_step == 4

    def test_go_to_out_of_range(self, manager):
        assert manager.go_to_step(0) is False
        assert manager.go_to_step(6) is False

    def test_go_to_current_step_emits_nothing(self, manager):
        events = []
        manager.add_event_listener(WizardStateManager.STEP_CHANGED, events.append)
        assert manager.go_to_step(1) is True
        assert events == []

    def test_final_step_needs_every_earlier_step(self, manager):
        fill_to_final(manager)
        assert manager.can_proceed_to_next_step() is True
        manager.update_step_data(LogicalStep.SUMMARY, SummaryData(is_reviewed=False))
        assert manager.is_step_completed(4) is False
        assert manager.can_proceed_to_next_step() is False
        assert manager.get_step_validation_error() == tr("validation.completion.not_ready")


class TestStepData:
    """Test typed step payload writes."""

    def test_wrong_payload_type_raises(self, manager):
        with pytest.raises(WizardContractError):
            manager.update_step_data(LogicalStep.METADATA, UploadData(file_name="x.png"))
        assert manager.get_step_data(LogicalStep.METADATA) is None

    def test_unknown_field_raises(self, manager):
        with pytest.raises(WizardContractError):
            manager.update_step_data(LogicalStep.METADATA, colour="red")

    def test_partial_update_merges(self, manager):
        manager.update_step_data(LogicalStep.METADATA, make_metadata())
        manager.update_step_data(LogicalStep.METADATA, name="Renamed")
        metadata = manager.get_step_data(LogicalStep.METADATA)
        assert metadata.name == "Renamed"
        assert metadata.category_id == "cat-1"

    def test_returned_data_is_a_copy(self, manager):
        manager.update_step_data(LogicalStep.METADATA, make_metadata())
        manager.get_step_data(LogicalStep.METADATA).tags.clear()
        assert manager.get_step_data(LogicalStep.METADATA).tags == ["hero", "sale"]

    def test_invalid_data_uncompletes_step(self, manager):
        fill_to_summary(manager)
        assert manager.is_step_completed(3) is True
        manager.update_step_data(LogicalStep.METADATA, name="")
        assert manager.is_step_completed(3) is False

    def test_valid_update_keeps_completion(self, manager):
        fill_to_summary(manager)
        manager.update_step_data(LogicalStep.METADATA, name="Still valid")
        assert manager.is_step_completed(3) is True

    def test_metadata_requires_category(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("design.fig", "application/figma"))
        manager.next_step()
        manager.update_step_data(LogicalStep.METADATA, make_metadata(category_id=""))
        assert manager.get_step_validation_error() == tr("validation.metadata.category_required")

    def test_component_step_requires_a_region(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        manager.next_step()
        assert manager.next_step() is False
        assert manager.get_step_validation_error() == tr("validation.components.required")


class TestErrors:
    """Test per-step error messages."""

    def test_set_and_clear(self, manager):
        events = []
        manager.add_event_listener(WizardStateManager.STEP_ERROR_CHANGED, events.append)
        manager.set_step_error(1, "Boom")
        assert manager.get_step_error(1) == "Boom"
        manager.clear_step_error(1)
        assert manager.get_step_error(1) is None
        assert events == [
            {"step_number": 1, "error": "Boom"},
            {"step_number": 1, "error": None},
        ]

    def test_empty_message_clears(self, manager):
        manager.set_step_error(2, "Boom")
        manager.set_step_error(2, "")
        assert manager.get_step_error(2) is None

    def test_clearing_missing_error_emits_nothing(self, manager):
        events = []
        manager.add_event_listener(WizardStateManager.STEP_ERROR_CHANGED, events.append)
        manager.clear_step_error(3)
        assert events == []


class TestTerminalStates:
    """Test completion, cancellation and reset."""

    def test_mark_completed(self, manager):
        fill_to_final(manager)
        events = []
        manager.add_event_listener(WizardStateManager.WIZARD_COMPLETED, events.append)

        assert manager.mark_completed("tpl-1") is True

        state = manager.get_state()
        assert state.status == WizardStatus.COMPLETED
        assert state.result_id == "tpl-1"
        assert state.step_completion[5] is True
        assert events == [{"result_id": "tpl-1"}]

    def test_mark_completed_twice(self, manager):
        fill_to_final(manager)
        manager.mark_completed("tpl-1")
        assert manager.mark_completed("tpl-2") is False
        assert manager.get_state().result_id == "tpl-1"

    def test_mark_cancelled_discards_data(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        assert manager.mark_cancelled() is True
        state = manager.get_state()
        assert state.status == WizardStatus.CANCELLED
        assert dict(state.step_data) == {}

    def test_cancel_after_complete_is_noop(self, manager):
        fill_to_final(manager)
        manager.mark_completed("tpl-1")
        assert manager.mark_cancelled() is False
        assert manager.status == WizardStatus.COMPLETED

    def test_terminal_state_blocks_mutations(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        manager.mark_cancelled()
        assert manager.next_step() is False
        assert manager.previous_step() is False
        assert manager.go_to_step(1) is False
        assert manager.update_step_data(LogicalStep.UPLOAD, make_upload()) is False
        assert manager.can_proceed_to_next_step() is False

    def test_reset_from_completed(self, manager):
        fill_to_final(manager)
        manager.mark_completed("tpl-1")
        session = manager.session_id
        events = []
        manager.add_event_listener(WizardStateManager.WIZARD_RESET, events.append)

        manager.reset()

        state = manager.get_state()
        assert state.status == WizardStatus.IN_PROGRESS
        assert state.current_step == 1
        assert state.result_id is None
        assert dict(state.step_data) == {}
        assert state.session_id == session + 1
        assert events == [{"session_id": session + 1}]


class TestTemplateData:
    """Test flattening step data into the creation payload."""

    def test_png_payload(self, manager):
        fill_to_final(manager, png=True)
        data = manager.get_template_data()
        assert data["name"] == "Landing"
        assert data["description"] == "A landing page"
        assert data["categoryId"] == "cat-1"
        assert data["categoryName"] == "Marketing"
        assert data["tags"] == ["hero", "sale"]
        assert data["previewImageUrl"] == "https://cdn.test/hero.png"
        assert data["fileType"] == "image/png"
        assert data["uploadId"] == "up-1"
        assert len(data["components"]) == 1
        assert data["components"][0]["componentType"] == "text"

    def test_figma_payload_has_no_components(self, manager):
        fill_to_final(manager, png=False)
        data = manager.get_template_data()
        assert data["components"] == []
        assert data["fileType"] == "application/figma"

    def test_name_is_trimmed(self, manager):
        fill_to_summary(manager)
        manager.update_step_data(LogicalStep.METADATA, name="  Spaced  ")
        assert manager.get_template_data()["name"] == "Spaced"

    def test_missing_metadata_raises(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("design.fig", "application/figma"))
        with pytest.raises(MissingStepDataError) as exc_info:
            manager.get_template_data()
        assert exc_info.value.step == LogicalStep.METADATA

    def test_missing_components_raises_for_png(self, manager):
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        manager.update_step_data(LogicalStep.METADATA, make_metadata())
        with pytest.raises(MissingStepDataError) as exc_info:
            manager.get_template_data()
        assert exc_info.value.step == LogicalStep.COMPONENT_DEFINITION


class TestEvents:
    """Test listener registration and dispatch."""

    def test_step_changed_payload(self, manager):
        events = []
        manager.add_event_listener(WizardStateManager.STEP_CHANGED, events.append)
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        manager.next_step()
        manager.previous_step()
        assert events == [
            {"current_step": 2, "previous_step": 1},
            {"current_step": 1, "previous_step": 2},
        ]

    def test_step_data_updated_payload(self, manager):
        events = []
        manager.add_event_listener(WizardStateManager.STEP_DATA_UPDATED, events.append)
        manager.update_step_data(LogicalStep.SUMMARY, is_reviewed=True)
        assert events[0]["step"] == LogicalStep.SUMMARY
        assert events[0]["data"] == SummaryData(is_reviewed=True)

    def test_handlers_run_in_order(self, manager):
        calls = []
        manager.add_event_listener(WizardStateManager.WIZARD_CANCELLED, lambda d: calls.append("a"))
        manager.add_event_listener(WizardStateManager.WIZARD_CANCELLED, lambda d: calls.append("b"))
        manager.mark_cancelled()
        assert calls == ["a", "b"]

    def test_failing_handler_does_not_stop_others(self, manager):
        calls = []

        def broken(data):
            raise RuntimeError("listener bug")

        manager.add_event_listener(WizardStateManager.WIZARD_CANCELLED, broken)
        manager.add_event_listener(WizardStateManager.WIZARD_CANCELLED, lambda d: calls.append(d))
        assert manager.mark_cancelled() is True
        assert calls == [{}]

    def test_removed_handler_not_called(self, manager):
        calls = []
        manager.add_event_listener(WizardStateManager.WIZARD_RESET, calls.append)
        manager.remove_event_listener(WizardStateManager.WIZARD_RESET, calls.append)
        manager.reset()
        assert calls == []

    def test_unknown_event_rejected(self, manager):
        with pytest.raises(ValueError):
            manager.add_event_listener("stepChanged", lambda d: None)


class TestDrafts:
    """Test serialization and the injected draft store."""

    def test_mutations_save_draft(self, draft_store):
        manager = WizardStateManager(draft_store=draft_store)
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        manager.next_step()

        draft = draft_store.load()
        assert draft["current_step"] == 2
        assert draft["step_data"]["upload"]["file_name"] == "hero.png"

    def test_restore_round_trip(self, draft_store):
        manager = WizardStateManager(draft_store=draft_store)
        fill_to_summary(manager)

        restored = WizardStateManager()
        assert restored.restore(draft_store.load()) is True

        assert restored.current_step == 4
        assert restored.get_total_steps() == 5
        assert restored.is_step_completed(3) is True
        assert restored.get_step_data(LogicalStep.METADATA) == make_metadata()
        assert restored.get_step_data(LogicalStep.COMPONENT_DEFINITION).components[0].id == "region_a"

    def test_restore_ignores_finished_wizard(self):
        manager = WizardStateManager()
        assert manager.restore({"status": "completed", "current_step": 5}) is False
        assert manager.current_step == 1

    def test_restore_rejects_unknown_step(self):
        manager = WizardStateManager()
        assert manager.restore({"step_data": {"bogus": {}}}) is False

    @pytest.mark.parametrize("draft", [
        {"status": "in_progress", "step_data": {"upload": ["x"]}},
        {"step_data": ["upload"]},
        {"step_completion": "1"},
        {"locked_png_required": "yes"},
        {"current_step": "three"},
        ["not", "a", "draft"],
    ])
    def test_restore_rejects_corrupt_draft(self, draft):
        manager = WizardStateManager()
        assert manager.restore(draft) is False
        assert manager.current_step == 1
        assert manager.get_step_data(LogicalStep.UPLOAD) is None

    def test_restore_clamps_to_first_incomplete_step(self, draft_store):
        manager = WizardStateManager(draft_store=draft_store)
        fill_to_summary(manager)
        draft = draft_store.load()
        draft["step_completion"]["2"] = False

        restored = WizardStateManager()
        assert restored.restore(draft) is True
        assert restored.current_step == 2

    def test_completion_clears_draft(self, draft_store):
        manager = WizardStateManager(draft_store=draft_store)
        fill_to_final(manager)
        assert draft_store.exists()
        manager.mark_completed("tpl-1")
        assert not draft_store.exists()

    def test_components_survive_serialization(self):
        manager = WizardStateManager()
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        manager.update_step_data(LogicalStep.COMPONENT_DEFINITION, make_components())
        components = manager.to_dict()["step_data"]["componentDefinition"]["components"]
        assert components[0]["label"] == "Title"


def test_reset_and_replay_reproduce_template_data(manager):
    """Test replaying the same writes after reset yields the same payload."""
    upload, components, metadata = make_upload(), make_components(), make_metadata()

    def replay():
        manager.update_step_data(LogicalStep.UPLOAD, upload)
        manager.next_step()
        manager.update_step_data(LogicalStep.COMPONENT_DEFINITION, components)
        manager.next_step()
        manager.update_step_data(LogicalStep.METADATA, metadata)
        manager.next_step()
        manager.update_step_data(LogicalStep.SUMMARY, is_reviewed=True)
        manager.next_step()
        return manager.get_template_data()

    first = replay()
    manager.reset()
    assert replay() == first
    assert manager.current_step == 5
