# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard step-views.

A step-view is built by the wizard for the current logical step and
destroyed when the wizard moves away from it. Subclasses implement:
- setup_ui(): Create the step's UI
- populate_data(): Fill the UI from the state manager (optional)
- on_destroy(): Release resources (optional)

Step-views write their payload through save_step_data() and report a
finished step with complete_step().
"""

from typing import Any, Callable, Dict, List, Optional, Set, Tuple
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field

from PyQt5.QtWidgets import QWidget, QVBoxLayout
from PyQt5.QtCore import QThread

from services.wizard.logical_steps import LogicalStep
from services.wizard.state_manager import WizardStateManager
from services.wizard.step_validator import StepValidator
from ui.wizards.framework.error_boundary import ErrorBoundary
from utils.logger import get_logger

logger = get_logger(__name__)

# Workers still running when their step-view was destroyed
_detached_workers: Set[QThread] = set()


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        self.errors.append(message)
        self.is_valid = False

    @property
    def first_error(self) -> str:
        return self.errors[0] if self.errors else ""


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for step-views.

    Provides:
    - Access to the injected state manager and this step's payload
    - Completion reporting through the wizard's callback
    - Error boundary that turns internal failures into step errors
    - Tracking of background workers and state-manager listeners
    """

    LOGICAL_STEP: LogicalStep = None

    def __init__(
        self,
        state_manager: WizardStateManager,
        on_step_complete: Callable[[], None],
        parent: Optional[QWidget] = None
    ):
        """
        Initialize the step.

        Args:
            state_manager: State manager of the current wizard session
            on_step_complete: Called once per successful completion
            parent: Parent widget
        """
        super().__init__(parent)
        self.state_manager = state_manager
        self._on_step_complete = on_step_complete
        self._is_destroyed = False
        self._workers: List[QThread] = []
        self._listeners: List[Tuple[str, Callable[[Dict[str, Any]], None]]] = []

        self.error_boundary = ErrorBoundary(self.__class__.__name__, self)
        self.error_boundary.error_occurred.connect(self._on_boundary_error)

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(24, 20, 24, 20)
        self.main_layout.setSpacing(16)

        self.error_boundary.protect(self.setup_ui, "setup")()
        self.error_boundary.protect(self.populate_data, "loading data")()

    # =========================================================================
    # Abstract / overridable
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """Create all widgets and layouts."""
        pass

    def populate_data(self):
        """Restore the UI from the step's stored payload."""
        pass

    def on_destroy(self):
        """Release step resources (called once by destroy())."""
        pass

    def validate(self) -> StepValidationResult:
        """Validate the stored payload of this step."""
        is_valid, message = StepValidator.validate_step(self.LOGICAL_STEP, self.state_manager)
        result = StepValidationResult(is_valid=True)
        if not is_valid:
            result.add_error(message)
        return result

    # =========================================================================
    # Helpers
    # =========================================================================

    @property
    def step_number(self) -> Optional[int]:
        return self.state_manager.get_step_number(self.LOGICAL_STEP)

    @property
    def is_destroyed(self) -> bool:
        return self._is_destroyed

    def get_step_data(self) -> Any:
        return self.state_manager.get_step_data(self.LOGICAL_STEP)

    def save_step_data(self, data: Any = None, **changes) -> bool:
        """Write this step's payload (see WizardStateManager.update_step_data)."""
        if self._is_destroyed:
            return False
        return self.state_manager.update_step_data(self.LOGICAL_STEP, data, **changes)

    def report_error(self, message: str):
        """Show a message as this step's error."""
        if self._is_destroyed or self.step_number is None:
            return
        self.state_manager.set_step_error(self.step_number, message)

    def clear_error(self):
        if self._is_destroyed or self.step_number is None:
            return
        self.state_manager.clear_step_error(self.step_number)

    def complete_step(self) -> bool:
        """
        Validate the stored payload and report completion to the wizard.

        Returns:
            True if the wizard was notified
        """
        if self._is_destroyed:
            return False
        result = self.validate()
        if not result.is_valid:
            self.report_error(result.first_error)
            return False
        self.clear_error()
        self._on_step_complete()
        return True

    def listen(self, event: str, handler: Callable[[Dict[str, Any]], None]):
        """Subscribe to a state-manager event for the lifetime of this view."""
        self.state_manager.add_event_listener(event, handler)
        self._listeners.append((event, handler))

    def start_worker(self, worker: QThread):
        """Start a background worker owned by this view."""
        self._workers = [w for w in self._workers if not w.isFinished()]
        self._workers.append(worker)
        worker.start()

    def _on_boundary_error(self, error_type: str, message: str):
        self.report_error(message)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def destroy(self):
        """
        Tear the step-view down before the wizard swaps steps.

        Unsubscribes listeners, detaches running workers (their results are
        ignored) and schedules the widget for deletion. Safe to call twice.
        """
        if self._is_destroyed:
            return
        self._is_destroyed = True

        try:
            self.on_destroy()
        except Exception as e:
            logger.error(f"Error destroying {self.__class__.__name__}: {e}", exc_info=True)

        for event, handler in self._listeners:
            self.state_manager.remove_event_listener(event, handler)
        self._listeners.clear()

        for worker in list(_detached_workers):
            if worker.isFinished():
                _detached_workers.discard(worker)
        for worker in self._workers:
            if worker.isRunning():
                _detached_workers.add(worker)
        self._workers.clear()

        self.hide()
        self.setParent(None)
        self.deleteLater()
