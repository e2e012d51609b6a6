# -*- coding: utf-8 -*-
"""
Step Navigator - derives indicator and navigation-button state.

Handles:
- Progress percentage
- Step indicators (title, current/completed/reachable)
- Back / Next / Complete availability and labels

Holds no state of its own; everything is computed from the
WizardStateManager on each call.
"""

from dataclasses import dataclass
from typing import List

from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep
from services.wizard.state_manager import WizardStateManager


@dataclass(frozen=True)
class StepIndicator:
    """One entry of the step indicator bar."""
    number: int
    logical_step: LogicalStep
    title: str
    is_current: bool
    is_completed: bool
    is_reachable: bool


@dataclass(frozen=True)
class NavigationState:
    """Everything the wizard chrome needs to render navigation."""
    current_step: int
    total_steps: int
    progress: float
    step_label: str
    back_enabled: bool
    next_enabled: bool
    cancel_enabled: bool
    is_final_step: bool
    next_label: str
    indicators: List[StepIndicator]


class StepNavigator:
    """
    Computes navigation state for a wizard.

    Usage:
        navigator = StepNavigator(state_manager)
        nav = navigator.get_navigation_state(is_submitting=False)
        footer.set_next_enabled(nav.next_enabled)
    """

    def __init__(self, state_manager: WizardStateManager):
        self.state_manager = state_manager

    def get_progress_percentage(self) -> float:
        """
        Progress as (current - 1) / (total - 1) * 100.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        total = self.state_manager.get_total_steps()
        if total <= 1:
            return 100.0
        return (self.state_manager.current_step - 1) / (total - 1) * 100.0

    def build_indicators(self) -> List[StepIndicator]:
        total = self.state_manager.get_total_steps()
        current = self.state_manager.current_step
        terminal = self.state_manager.is_terminal
        indicators = []
        earlier_completed = True
        for number in range(1, total + 1):
            completed = self.state_manager.is_step_completed(number)
            indicators.append(StepIndicator(
                number=number,
                logical_step=self.state_manager.get_logical_step(number),
                title=self.state_manager.get_step_title(number),
                is_current=number == current,
                is_completed=completed,
                is_reachable=not terminal and (number <= current or earlier_completed),
            ))
            earlier_completed = earlier_completed and completed
        return indicators

    def get_navigation_state(self, is_submitting: bool = False) -> NavigationState:
        manager = self.state_manager
        total = manager.get_total_steps()
        current = manager.current_step
        is_final = current == total
        terminal = manager.is_terminal

        if is_submitting:
            next_label = tr("wizard.submitting")
        elif is_final:
            next_label = tr("button.complete")
        else:
            next_label = tr("button.next")

        return NavigationState(
            current_step=current,
            total_steps=total,
            progress=self.get_progress_percentage(),
            step_label=tr("wizard.step_of", current=current, total=total),
            back_enabled=current > 1 and not terminal and not is_submitting,
            next_enabled=not is_submitting and manager.can_proceed_to_next_step(),
            cancel_enabled=not terminal,
            is_final_step=is_final,
            next_label=next_label,
            indicators=self.build_indicators(),
        )
