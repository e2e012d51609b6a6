# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for state-manager driven wizards.

Provides unified wizard UI with:
- Header with title, "Step X of Y" and progress
- Step indicators
- Step container holding exactly one step-view
- Inline step error message
- Navigation buttons (Cancel, Back, Next/Complete)
- Background submission with a re-entrancy guard
"""

from functools import partial
from typing import Any, Callable, Dict, List, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QFrame
from PyQt5.QtCore import QThread, pyqtSignal

from .base_step import BaseStep
from .step_navigator import StepNavigator
from services.error_mapper import map_exception
from services.exceptions import WizardContractError, MissingStepViewError
from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep
from services.wizard.state_manager import WizardStateManager
from ui.components.step_indicator_bar import StepIndicatorBar
from ui.components.wizard_footer import WizardFooter
from ui.components.wizard_header import WizardHeader
from ui.design_system import ComponentStyles
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)

StepFactory = Callable[[WizardStateManager, Callable[[], None], QWidget], BaseStep]


class SubmissionWorker(QThread):
    """Background worker for the final submission."""

    succeeded = pyqtSignal(int, str)  # session_id, result_id
    failed = pyqtSignal(int, object)  # session_id, exception

    def __init__(self, submit: Callable[[Dict[str, Any]], str],
                 template_data: Dict[str, Any], session_id: int):
        super().__init__()
        self.submit = submit
        self.template_data = template_data
        self.session_id = session_id

    def run(self):
        """Run submission in background."""
        try:
            result_id = self.submit(self.template_data)
        except Exception as e:
            logger.error(f"Submission failed: {e}")
            self.failed.emit(self.session_id, e)
            return
        self.succeeded.emit(self.session_id, str(result_id))


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    The injected WizardStateManager owns all state; the wizard renders it
    and turns user intent into state-manager calls.

    Subclasses must implement:
    - create_step_registry(): Map each logical step to a step-view factory
    - submit(): Persist the flattened template data, return its id
    """

    # Signals
    wizard_completed = pyqtSignal(dict)  # {"result_id", "template_data"}
    wizard_cancelled = pyqtSignal()

    def __init__(self, state_manager: WizardStateManager, parent: Optional[QWidget] = None):
        """
        Initialize the wizard.

        Args:
            state_manager: State of this wizard session
            parent: Parent widget
        """
        super().__init__(parent)

        self.state_manager = state_manager
        self.navigator = StepNavigator(state_manager)
        self.step_registry: Dict[LogicalStep, StepFactory] = self.create_step_registry()
        self.current_view: Optional[BaseStep] = None

        self._is_submitting = False
        self._submitted_data: Optional[Dict[str, Any]] = None
        self._workers: List[SubmissionWorker] = []

        self._setup_ui()

        self.state_manager.add_event_listener(WizardStateManager.STEP_CHANGED, self._on_step_changed)
        self.state_manager.add_event_listener(WizardStateManager.WIZARD_RESET, self._on_wizard_reset)
        self.state_manager.add_event_listener(WizardStateManager.STEP_DATA_UPDATED, self._on_state_updated)
        self.state_manager.add_event_listener(WizardStateManager.STEP_ERROR_CHANGED, self._on_state_updated)
        self.state_manager.add_event_listener(WizardStateManager.WIZARD_COMPLETED, self._on_wizard_completed)
        self.state_manager.add_event_listener(WizardStateManager.WIZARD_CANCELLED, self._on_wizard_cancelled)

        self.load_current_step()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_step_registry(self) -> Dict[LogicalStep, StepFactory]:
        """
        Step-view factories keyed by logical step.

        Each factory is called as factory(state_manager, on_step_complete, parent).
        """
        pass

    @abstractmethod
    def submit(self, template_data: Dict[str, Any]) -> str:
        """
        Persist the template (runs on a worker thread).

        Returns:
            Identifier of the created template
        """
        pass

    def get_wizard_title(self) -> str:
        return tr("wizard.title")

    def get_wizard_subtitle(self) -> str:
        return tr("wizard.subtitle")

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.header = WizardHeader(self.get_wizard_title(), self.get_wizard_subtitle())
        main_layout.addWidget(self.header)

        self.indicator_bar = StepIndicatorBar()
        self.indicator_bar.step_clicked.connect(self._on_indicator_clicked)
        main_layout.addWidget(self.indicator_bar)

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet("background-color: #ddd;")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QWidget()
        self.step_container_layout = QVBoxLayout(self.step_container)
        self.step_container_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(self.step_container, 1)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(ComponentStyles.get_error_banner_style())
        self.error_label.hide()
        main_layout.addWidget(self.error_label)

        self.footer = WizardFooter()
        self.footer.cancel_clicked.connect(lambda: self.handle_cancel())
        self.footer.previous_clicked.connect(self.handle_back)
        self.footer.next_clicked.connect(self.handle_next)
        main_layout.addWidget(self.footer)

    # =========================================================================
    # Rendering
    # =========================================================================

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    def load_current_step(self):
        """
        Re-render navigation and replace the step-view for the current step.

        Raises:
            MissingStepViewError: no factory is registered for the logical step
        """
        logical_step = self.state_manager.get_logical_step()
        factory = self.step_registry.get(logical_step)
        if factory is None:
            logger.error(f"No step-view registered for {logical_step.value}")
            raise MissingStepViewError(logical_step)

        self.refresh_navigation()
        self._destroy_current_view()

        step_number = self.state_manager.current_step
        logger.debug(f"Loading step {step_number} ({logical_step.value})")
        self.current_view = factory(
            self.state_manager,
            partial(self.handle_step_complete, step_number),
            self.step_container
        )
        self.step_container_layout.addWidget(self.current_view)
        # The view may have written data while loading
        self.refresh_navigation()

    def refresh_navigation(self):
        """Update header, indicators, error message and buttons."""
        nav = self.navigator.get_navigation_state(self._is_submitting)

        self.header.set_progress(nav.step_label, nav.progress)
        self.indicator_bar.set_indicators(nav.indicators)

        self.footer.set_previous_enabled(nav.back_enabled)
        self.footer.set_next_enabled(nav.next_enabled)
        self.footer.set_cancel_enabled(nav.cancel_enabled)
        self.footer.set_next_text(nav.next_label)

        error = self.state_manager.get_step_error(nav.current_step)
        self.error_label.setText(error or "")
        self.error_label.setVisible(bool(error))

    def _destroy_current_view(self):
        if self.current_view is not None:
            self.step_container_layout.removeWidget(self.current_view)
            self.current_view.destroy()
            self.current_view = None

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def handle_next(self):
        """Next advances; on the final step the wizard is submitted."""
        manager = self.state_manager
        if manager.current_step == manager.get_total_steps():
            self.complete_wizard()
            return
        if not manager.next_step():
            message = manager.get_step_validation_error()
            if message:
                manager.set_step_error(manager.current_step, message)

    def handle_back(self):
        self.state_manager.previous_step()

    def handle_cancel(self, confirm: Optional[Callable[[], bool]] = None) -> bool:
        """
        Cancel the wizard after confirmation.

        Args:
            confirm: Zero-argument callable returning True to proceed
                (default: a confirmation dialog)

        Returns:
            True if the wizard was cancelled
        """
        if self.state_manager.is_terminal:
            return False
        if confirm is None:
            confirm = partial(ErrorHandler.confirm, self, tr("wizard.confirm_cancel"))
        if not confirm():
            logger.debug("Cancel declined")
            return False
        return self.state_manager.mark_cancelled()

    def handle_step_complete(self, step_number: int):
        """Completion callback handed to the step-view of `step_number`."""
        manager = self.state_manager
        if manager.is_terminal or step_number != manager.current_step:
            logger.debug(f"Ignoring completion of step {step_number} (current: {manager.current_step})")
            return
        manager.clear_step_error(step_number)
        if step_number < manager.get_total_steps() and not manager.next_step():
            manager.set_step_error(step_number, manager.get_step_validation_error())

    def reset(self):
        self.state_manager.reset()

    def _on_indicator_clicked(self, step_number: int):
        if not self._is_submitting:
            self.state_manager.go_to_step(step_number)

    # =========================================================================
    # Submission
    # =========================================================================

    def complete_wizard(self) -> bool:
        """
        Submit the template from the final step.

        Returns:
            True if a submission was started
        """
        manager = self.state_manager
        if self._is_submitting:
            logger.debug("Submission already in progress")
            return False
        if manager.is_terminal or manager.current_step != manager.get_total_steps():
            return False

        current = manager.current_step
        if not manager.can_proceed_to_next_step():
            manager.set_step_error(current, manager.get_step_validation_error())
            return False

        try:
            template_data = manager.get_template_data()
        except WizardContractError as e:
            manager.set_step_error(current, ErrorHandler.handle(e, self, "submission", show_dialog=False))
            return False

        self._is_submitting = True
        self._submitted_data = template_data
        manager.clear_step_error(current)
        self.refresh_navigation()

        logger.info(f"Submitting template '{template_data.get('name')}'")
        worker = SubmissionWorker(self.submit, template_data, manager.session_id)
        worker.succeeded.connect(self._on_submission_succeeded)
        worker.failed.connect(self._on_submission_failed)
        # References are kept until the thread has finished
        self._workers = [w for w in self._workers if not w.isFinished()]
        self._workers.append(worker)
        worker.start()
        return True

    def _is_stale(self, session_id: int) -> bool:
        if session_id != self.state_manager.session_id:
            logger.warning(f"Discarding submission result from session {session_id}")
            return True
        return False

    def _on_submission_succeeded(self, session_id: int, result_id: str):
        if self._is_stale(session_id):
            return
        self._is_submitting = False
        self.state_manager.mark_completed(result_id)
        self.refresh_navigation()

    def _on_submission_failed(self, session_id: int, error: Exception):
        if self._is_stale(session_id):
            return
        self._is_submitting = False
        message = ErrorHandler.handle(error, self, "submission", show_dialog=False)
        if not self.state_manager.is_terminal:
            self.state_manager.set_step_error(self.state_manager.current_step, message)
        self.refresh_navigation()

    # =========================================================================
    # State manager events
    # =========================================================================

    def _on_step_changed(self, data: Dict[str, Any]):
        self._mount_current_step()

    def _on_wizard_reset(self, data: Dict[str, Any]):
        self._is_submitting = False
        self._submitted_data = None
        self._mount_current_step()

    def _mount_current_step(self):
        """load_current_step() for state events; a missing step-view becomes a step error."""
        try:
            self.load_current_step()
        except MissingStepViewError as e:
            step_number = self.state_manager.current_step
            logger.error(f"Cannot show step {step_number}: {e}", exc_info=e)
            self._destroy_current_view()
            self.state_manager.set_step_error(
                step_number, tr("error.step_view", error=map_exception(e, "loading step"))
            )
            self.refresh_navigation()

    def _on_state_updated(self, data: Dict[str, Any]):
        self.refresh_navigation()

    def _on_wizard_completed(self, data: Dict[str, Any]):
        self.refresh_navigation()
        self.wizard_completed.emit({
            "result_id": data.get("result_id"),
            "template_data": self._submitted_data or {},
        })

    def _on_wizard_cancelled(self, data: Dict[str, Any]):
        self._destroy_current_view()
        self.refresh_navigation()
        self.wizard_cancelled.emit()
