# -*- coding: utf-8 -*-
"""
Wizard State Manager - single owner of the template upload wizard state.

Provides:
- Navigation (next/previous/go to) gated by step validation
- Typed per-step data with change events
- Conditional step count (component definition only for PNG uploads)
- Terminal completed/cancelled states
- Flattening of step data into the template creation payload

Nothing else mutates the state; callers read frozen snapshots from
get_state() and subscribe to events with add_event_listener().
"""

import copy
import dataclasses
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, TYPE_CHECKING

from services.exceptions import MissingStepDataError, WizardContractError
from services.translation_manager import tr
from services.wizard.logical_steps import (
    LogicalStep, TOTAL_STEPS_WITH_COMPONENTS, total_steps_for,
    resolve_logical_step, step_number_for,
    get_logical_step_title, get_logical_step_description
)
from services.wizard.step_data import STEP_PAYLOAD_TYPES, UploadData, CompletionData
from services.wizard.step_validator import StepValidator
from utils.file_types import is_png_like
from utils.logger import get_logger

if TYPE_CHECKING:
    from services.wizard.draft_store import WizardDraftStore

logger = get_logger(__name__)

EventHandler = Callable[[Dict[str, Any]], None]


def _mapping(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Draft section as a dict; a missing section is empty."""
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise TypeError(f"{key} is {type(value).__name__}")
    return value


class WizardStatus(Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class WizardState:
    """Read-only snapshot of the wizard state."""
    current_step: int
    total_steps: int
    step_data: Mapping[LogicalStep, Any]
    step_completion: Mapping[int, bool]
    step_errors: Mapping[int, str]
    status: WizardStatus
    result_id: Optional[str]
    session_id: int

    @property
    def is_terminal(self) -> bool:
        return self.status != WizardStatus.IN_PROGRESS


class WizardStateManager:
    """
    State machine behind the template upload wizard.

    Invalid transitions are silent no-ops that return False so the UI stays
    inert. Contract violations (wrong payload type, missing data when
    flattening) raise WizardContractError subclasses and leave the state
    untouched.
    """

    # Events
    STEP_CHANGED = "step_changed"
    STEP_DATA_UPDATED = "step_data_updated"
    STEP_ERROR_CHANGED = "step_error_changed"
    WIZARD_COMPLETED = "wizard_completed"
    WIZARD_CANCELLED = "wizard_cancelled"
    WIZARD_RESET = "wizard_reset"

    EVENTS = (
        STEP_CHANGED,
        STEP_DATA_UPDATED,
        STEP_ERROR_CHANGED,
        WIZARD_COMPLETED,
        WIZARD_CANCELLED,
        WIZARD_RESET,
    )

    def __init__(self, draft_store: Optional['WizardDraftStore'] = None):
        """
        Initialize the state manager.

        Args:
            draft_store: Optional store that receives the serialized state
                after every mutation
        """
        self._listeners: Dict[str, List[EventHandler]] = {event: [] for event in self.EVENTS}
        self._draft_store = draft_store
        self._session_id = 0
        self._init_state()

    def _init_state(self):
        self._current_step = 1
        self._step_data: Dict[LogicalStep, Any] = {}
        self._step_completion: Dict[int, bool] = {}
        self._step_errors: Dict[int, str] = {}
        self._status = WizardStatus.IN_PROGRESS
        self._result_id: Optional[str] = None
        # PNG classification captured when step 1 completes
        self._locked_png_required: Optional[bool] = None

    # =========================================================================
    # Read access
    # =========================================================================

    def get_state(self) -> WizardState:
        """Snapshot of the current state; mappings are read-only copies."""
        return WizardState(
            current_step=self._current_step,
            total_steps=self.get_total_steps(),
            step_data=MappingProxyType(copy.deepcopy(self._step_data)),
            step_completion=MappingProxyType(dict(self._step_completion)),
            step_errors=MappingProxyType(dict(self._step_errors)),
            status=self._status,
            result_id=self._result_id,
            session_id=self._session_id,
        )

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def status(self) -> WizardStatus:
        return self._status

    @property
    def session_id(self) -> int:
        return self._session_id

    @property
    def is_terminal(self) -> bool:
        return self._status != WizardStatus.IN_PROGRESS

    def get_step_data(self, step: LogicalStep) -> Optional[Any]:
        """Copy of the payload written for a logical step (None if absent)."""
        data = self._step_data.get(step)
        return copy.deepcopy(data) if data is not None else None

    # =========================================================================
    # Conditional step count
    # =========================================================================

    @staticmethod
    def _classify_upload(upload: UploadData) -> bool:
        if upload.file_type and upload.file_type != "application/octet-stream":
            return is_png_like(upload.file_type)
        return is_png_like(upload.file_name)

    def _is_file_type_known(self) -> bool:
        upload = self._step_data.get(LogicalStep.UPLOAD)
        return upload is not None and bool(upload.file_type or upload.file_name)

    def is_png_component_definition_required(self) -> bool:
        """True when the step 1 file is a PNG-family raster image."""
        if self._locked_png_required is not None:
            return self._locked_png_required
        upload = self._step_data.get(LogicalStep.UPLOAD)
        if upload is None:
            return False
        return self._classify_upload(upload)

    def get_total_steps(self) -> int:
        """
        Number of literal steps: 5 with component definition, 4 without.

        Until the upload's file type is known the provisional answer is 5.
        """
        if self._locked_png_required is not None:
            return total_steps_for(self._locked_png_required)
        if not self._is_file_type_known():
            return TOTAL_STEPS_WITH_COMPONENTS
        return total_steps_for(self.is_png_component_definition_required())

    def get_logical_step(self, step_number: Optional[int] = None) -> LogicalStep:
        """Logical step at a literal number (default: current step)."""
        if step_number is None:
            step_number = self._current_step
        return resolve_logical_step(step_number, self.get_total_steps())

    def get_step_number(self, step: LogicalStep) -> Optional[int]:
        """Literal number of a logical step, None if it is skipped."""
        try:
            return step_number_for(step, self.get_total_steps())
        except ValueError:
            return None

    def get_step_title(self, step_number: int) -> str:
        try:
            return get_logical_step_title(self.get_logical_step(step_number))
        except ValueError:
            return f"Step {step_number}"

    def get_step_description(self, step_number: int) -> str:
        try:
            return get_logical_step_description(self.get_logical_step(step_number))
        except ValueError:
            return ""

    # =========================================================================
    # Completion / validation
    # =========================================================================

    def is_step_completed(self, step_number: int) -> bool:
        return self._step_completion.get(step_number, False)

    def can_proceed_to_next_step(self) -> bool:
        """Validity of the current step (False once terminal)."""
        if self.is_terminal:
            return False
        is_valid, _ = StepValidator.validate_step(self.get_logical_step(), self)
        return is_valid

    def get_step_validation_error(self) -> str:
        """Why the current step cannot proceed ('' when it can)."""
        if self.is_terminal:
            return ""
        _, message = StepValidator.validate_step(self.get_logical_step(), self)
        return message

    # =========================================================================
    # Navigation
    # =========================================================================

    def next_step(self) -> bool:
        """
        Complete the current step and advance.

        Returns:
            True if the wizard advanced; False (and nothing changed) when the
            current step is invalid, it is the last step or the wizard is
            terminal
        """
        if self.is_terminal:
            return False
        if self._current_step >= self.get_total_steps():
            logger.debug(f"Cannot go next: already at last step ({self._current_step})")
            return False
        if not self.can_proceed_to_next_step():
            logger.debug(f"Cannot go next: step {self._current_step} is not valid")
            return False
        if self._first_incomplete_step() < self._current_step:
            logger.debug(f"Cannot go next: step {self._first_incomplete_step()} is incomplete")
            return False

        old_step = self._current_step
        if old_step == 1:
            self._locked_png_required = self.is_png_component_definition_required()
            logger.debug(f"Component definition required: {self._locked_png_required}")

        self._step_completion[old_step] = True
        if self._step_errors.pop(old_step, None) is not None:
            self._emit(self.STEP_ERROR_CHANGED, {"step_number": old_step, "error": None})

        self._current_step = old_step + 1
        logger.info(f"Navigating: Step {old_step} → {self._current_step}")
        self._save_draft()
        self._emit(self.STEP_CHANGED, {"current_step": self._current_step, "previous_step": old_step})
        return True

    def _first_incomplete_step(self) -> int:
        """First step that is not completed (total + 1 when all are)."""
        for n in range(1, self.get_total_steps() + 1):
            if not self.is_step_completed(n):
                return n
        return self.get_total_steps() + 1

    def previous_step(self) -> bool:
        """Go back one step; completion flags are left as they are."""
        if self.is_terminal or self._current_step <= 1:
            return False

        old_step = self._current_step
        self._current_step = old_step - 1
        logger.info(f"Navigating back: Step {old_step} → {self._current_step}")
        self._save_draft()
        self._emit(self.STEP_CHANGED, {"current_step": self._current_step, "previous_step": old_step})
        return True

    def go_to_step(self, step_number: int) -> bool:
        """
        Jump to a step.

        Backward jumps are always allowed; forward jumps need every step
        before the target to be completed.
        """
        if self.is_terminal:
            return False
        if step_number < 1 or step_number > self.get_total_steps():
            return False
        if step_number == self._current_step:
            return True
        if step_number > self._current_step:
            if not all(self.is_step_completed(n) for n in range(1, step_number)):
                logger.debug(f"Cannot jump to step {step_number}: earlier steps incomplete")
                return False

        old_step = self._current_step
        self._current_step = step_number
        self._save_draft()
        self._emit(self.STEP_CHANGED, {"current_step": step_number, "previous_step": old_step})
        return True

    # =========================================================================
    # Step data
    # =========================================================================

    def update_step_data(self, step: LogicalStep, data: Any = None, **changes) -> bool:
        """
        Write or merge the payload of a logical step.

        Args:
            step: Logical step that owns the payload
            data: Full payload instance (must match the step's payload type)
            **changes: Field updates merged onto `data` or the existing payload

        Returns:
            True if the data was stored

        Raises:
            WizardContractError: wrong payload type or unknown field
        """
        if self.is_terminal:
            logger.warning(f"Ignoring {step.value} update: wizard is {self._status.value}")
            return False

        payload_type = STEP_PAYLOAD_TYPES[step]
        if data is not None and not isinstance(data, payload_type):
            raise WizardContractError(
                f"{step.value} expects {payload_type.__name__}, got {type(data).__name__}", step
            )

        base = data if data is not None else self._step_data.get(step, payload_type())
        try:
            new_data = dataclasses.replace(base, **changes) if changes else copy.deepcopy(base)
        except TypeError as e:
            raise WizardContractError(f"Invalid field for {step.value}: {e}", step) from e

        if step == LogicalStep.UPLOAD and self._locked_png_required is not None:
            if (new_data.file_type or new_data.file_name) and \
                    self._classify_upload(new_data) != self._locked_png_required:
                logger.warning("Rejected upload: file type change after step 1 completed")
                self.set_step_error(1, tr("upload.error.type_locked"))
                return False

        self._step_data[step] = new_data
        self._invalidate_completion(step)
        self._save_draft()
        self._emit(self.STEP_DATA_UPDATED, {"step": step, "data": copy.deepcopy(new_data)})
        return True

    def _invalidate_completion(self, step: LogicalStep):
        """A completed step whose data became invalid is no longer complete."""
        step_number = self.get_step_number(step)
        if step_number is None or not self.is_step_completed(step_number):
            return
        is_valid, _ = StepValidator.validate_step(step, self)
        if not is_valid:
            logger.debug(f"Step {step_number} ({step.value}) no longer complete")
            self._step_completion[step_number] = False

    # =========================================================================
    # Errors
    # =========================================================================

    def get_step_error(self, step_number: int) -> Optional[str]:
        return self._step_errors.get(step_number)

    def set_step_error(self, step_number: int, message: Optional[str]):
        """Record an error for a step; an empty message clears it."""
        if not message:
            self.clear_step_error(step_number)
            return
        self._step_errors[step_number] = message
        logger.debug(f"Step {step_number} error: {message}")
        self._emit(self.STEP_ERROR_CHANGED, {"step_number": step_number, "error": message})

    def clear_step_error(self, step_number: int):
        if self._step_errors.pop(step_number, None) is not None:
            self._emit(self.STEP_ERROR_CHANGED, {"step_number": step_number, "error": None})

    # =========================================================================
    # Terminal states
    # =========================================================================

    def mark_completed(self, result_id: str) -> bool:
        """
        Finish the wizard with the persisted template's id.

        Returns:
            False if the wizard was already terminal (no event emitted)
        """
        if self.is_terminal:
            logger.debug(f"mark_completed ignored: wizard is {self._status.value}")
            return False

        total = self.get_total_steps()
        self._step_data[LogicalStep.COMPLETION] = CompletionData(is_submitted=True, template_id=result_id)
        self._step_completion[total] = True
        self._step_errors.pop(total, None)
        self._result_id = result_id
        self._status = WizardStatus.COMPLETED
        logger.info(f"Wizard completed: template {result_id}")
        self._clear_draft()
        self._emit(self.WIZARD_COMPLETED, {"result_id": result_id})
        return True

    def mark_cancelled(self) -> bool:
        """Cancel the wizard, discarding all step data."""
        if self.is_terminal:
            logger.debug(f"mark_cancelled ignored: wizard is {self._status.value}")
            return False

        self._step_data.clear()
        self._status = WizardStatus.CANCELLED
        logger.info("Wizard cancelled")
        self._clear_draft()
        self._emit(self.WIZARD_CANCELLED, {})
        return True

    def reset(self):
        """Return to creation defaults from any status."""
        self._session_id += 1
        self._init_state()
        logger.info(f"Wizard reset (session {self._session_id})")
        self._clear_draft()
        self._emit(self.WIZARD_RESET, {"session_id": self._session_id})

    # =========================================================================
    # Payload
    # =========================================================================

    def get_template_data(self) -> Dict[str, Any]:
        """
        Flatten the step data into the template creation payload.

        Raises:
            MissingStepDataError: a required step has no data
        """
        template_data: Dict[str, Any] = {
            "name": "",
            "description": "",
            "categoryId": "",
            "categoryName": "",
            "tags": [],
            "previewImageUrl": None,
            "fileType": None,
            "uploadId": None,
            "components": [],
        }

        for step in LogicalStep:
            data = self._step_data.get(step)

            if step == LogicalStep.UPLOAD:
                if data is None:
                    raise MissingStepDataError(step)
                template_data["previewImageUrl"] = data.public_url
                template_data["fileType"] = data.file_type
                template_data["uploadId"] = data.upload_id

            elif step == LogicalStep.COMPONENT_DEFINITION:
                if not self.is_png_component_definition_required():
                    continue
                if data is None:
                    raise MissingStepDataError(step)
                template_data["components"] = [region.to_dict() for region in data.components]

            elif step == LogicalStep.METADATA:
                if data is None:
                    raise MissingStepDataError(step)
                template_data["name"] = data.name.strip()
                template_data["description"] = data.description.strip()
                template_data["categoryId"] = data.category_id
                template_data["categoryName"] = data.category_name
                template_data["tags"] = list(data.tags)

            elif step in (LogicalStep.SUMMARY, LogicalStep.COMPLETION):
                # Review and completion carry no template fields
                continue

            else:
                raise WizardContractError(f"Unhandled logical step: {step}", step)

        return template_data

    # =========================================================================
    # Events
    # =========================================================================

    def add_event_listener(self, event: str, handler: EventHandler):
        """Subscribe to an event; handlers run synchronously in order."""
        if event not in self._listeners:
            raise ValueError(f"Unknown wizard event: {event}")
        self._listeners[event].append(handler)

    def remove_event_listener(self, event: str, handler: EventHandler):
        if event not in self._listeners:
            raise ValueError(f"Unknown wizard event: {event}")
        if handler in self._listeners[event]:
            self._listeners[event].remove(handler)

    def _emit(self, event: str, data: Dict[str, Any]):
        for handler in list(self._listeners[event]):
            try:
                handler(data)
            except Exception as e:
                logger.error(f"Error in '{event}' listener: {e}", exc_info=True)

    # =========================================================================
    # Drafts
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the state for draft persistence."""
        return {
            "session_id": self._session_id,
            "current_step": self._current_step,
            "status": self._status.value,
            "result_id": self._result_id,
            "locked_png_required": self._locked_png_required,
            "step_completion": {str(k): v for k, v in self._step_completion.items()},
            "step_errors": {str(k): v for k, v in self._step_errors.items()},
            "step_data": {step.value: data.to_dict() for step, data in self._step_data.items()},
        }

    def restore(self, data: Dict[str, Any]) -> bool:
        """
        Restore a serialized state (see to_dict()).

        Only in-progress drafts are restored.

        Returns:
            True if the state was restored
        """
        if not isinstance(data, dict):
            logger.warning("Discarding wizard draft: not a mapping")
            return False
        if data.get("status", WizardStatus.IN_PROGRESS.value) != WizardStatus.IN_PROGRESS.value:
            return False

        try:
            step_data = {}
            for key, value in _mapping(data, "step_data").items():
                step = LogicalStep(key)
                if not isinstance(value, dict):
                    raise TypeError(f"{key} payload is {type(value).__name__}")
                step_data[step] = STEP_PAYLOAD_TYPES[step].from_dict(value)
            completion = {int(k): bool(v) for k, v in _mapping(data, "step_completion").items()}
            errors = {int(k): str(v) for k, v in _mapping(data, "step_errors").items() if v}
            current_step = int(data.get("current_step", 1))
            locked_png_required = data.get("locked_png_required")
            if locked_png_required is not None and not isinstance(locked_png_required, bool):
                raise TypeError(f"locked_png_required is {type(locked_png_required).__name__}")
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning(f"Discarding unreadable wizard draft: {e}")
            return False

        self._init_state()
        self._step_data = step_data
        self._step_completion = completion
        self._step_errors = errors
        self._locked_png_required = locked_png_required
        current_step = min(current_step, self.get_total_steps(), self._first_incomplete_step())
        self._current_step = max(1, current_step)
        logger.info(f"Wizard draft restored at step {self._current_step}")
        self._emit(self.STEP_CHANGED, {"current_step": self._current_step, "previous_step": None})
        return True

    def _save_draft(self):
        if self._draft_store is not None:
            self._draft_store.save(self.to_dict())

    def _clear_draft(self):
        if self._draft_store is not None:
            self._draft_store.clear()
