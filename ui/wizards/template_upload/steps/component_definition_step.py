# -*- coding: utf-8 -*-
"""
Component Definition Step - Step 2 of the Template Upload Wizard (PNG only).

Component regions are entered numerically (position and size in image
pixels) together with their component type.
"""

from typing import Callable, List, Optional

from PyQt5.QtWidgets import (
    QLabel, QHBoxLayout, QGridLayout, QSpinBox, QComboBox, QLineEdit,
    QListWidget, QListWidgetItem, QFrame
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor

from models.component_region import ComponentRegion
from models.component_types import get_component_type, get_component_type_options
from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep
from services.wizard.step_data import ComponentDefinitionData
from ui.components.action_button import ActionButton
from ui.design_system import Colors, ComponentStyles
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep, with_error_boundary
from utils.logger import get_logger

logger = get_logger(__name__)

MAX_COORDINATE = 20000


class ComponentDefinitionStep(BaseStep):
    """Step 2: Component regions for PNG templates."""

    LOGICAL_STEP = LogicalStep.COMPONENT_DEFINITION

    def setup_ui(self):
        layout = self.main_layout

        hint = QLabel(tr("components.hint"))
        hint.setWordWrap(True)
        hint.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(hint)

        form = QFrame()
        form.setStyleSheet(ComponentStyles.get_card_style() + ComponentStyles.get_input_style())
        grid = QGridLayout(form)
        grid.setContentsMargins(16, 16, 16, 16)
        grid.setHorizontalSpacing(12)
        grid.setVerticalSpacing(8)

        self.x_input = self._create_spin_box(0, 0)
        self.y_input = self._create_spin_box(0, 0)
        self.width_input = self._create_spin_box(100, 1)
        self.height_input = self._create_spin_box(50, 1)

        self.type_combo = QComboBox()
        for option in get_component_type_options():
            self.type_combo.addItem(option["label"], option["value"])

        self.label_input = QLineEdit()
        self.label_input.setMaxLength(100)

        fields = [
            ("components.field.x", self.x_input),
            ("components.field.y", self.y_input),
            ("components.field.width", self.width_input),
            ("components.field.height", self.height_input),
            ("components.field.type", self.type_combo),
            ("components.field.label", self.label_input),
        ]
        for column, (key, widget) in enumerate(fields):
            caption = QLabel(tr(key))
            caption.setStyleSheet("border: none;")
            grid.addWidget(caption, 0, column)
            grid.addWidget(widget, 1, column)

        self.add_button = ActionButton(tr("button.add"), variant="outline", width=90, height=36)
        self.add_button.clicked.connect(lambda: self.add_component())
        grid.addWidget(self.add_button, 1, len(fields))
        layout.addWidget(form)

        self.component_list = QListWidget()
        self.component_list.setStyleSheet(ComponentStyles.get_card_style())
        layout.addWidget(self.component_list, 1)

        self.empty_label = QLabel(tr("components.empty"))
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(self.empty_label)

        actions = QHBoxLayout()
        actions.addStretch()
        self.remove_button = ActionButton(tr("button.remove"), variant="secondary", width=100, height=36)
        self.remove_button.clicked.connect(lambda: self.remove_component(self.component_list.currentRow()))
        actions.addWidget(self.remove_button)
        self.clear_button = ActionButton(tr("button.clear_all"), variant="secondary", width=100, height=36)
        self.clear_button.clicked.connect(lambda: self.clear_components())
        actions.addWidget(self.clear_button)
        layout.addLayout(actions)

    @staticmethod
    def _create_spin_box(value: int, minimum: int) -> QSpinBox:
        spin_box = QSpinBox()
        spin_box.setRange(minimum, MAX_COORDINATE)
        spin_box.setValue(value)
        return spin_box

    def populate_data(self):
        self._refresh_list(self.get_components())

    def get_components(self) -> List[ComponentRegion]:
        data = self.get_step_data()
        return list(data.components) if data else []

    def _refresh_list(self, components: List[ComponentRegion]):
        self.component_list.clear()
        for region in components:
            component_type = get_component_type(region.component_type)
            type_name = component_type.name if component_type else region.component_type
            text = (f"{region.label or type_name}  -  {type_name}  "
                    f"({int(region.x)}, {int(region.y)}, {int(region.width)}×{int(region.height)})")
            item = QListWidgetItem(text)
            item.setData(Qt.UserRole, region.id)
            if component_type:
                item.setForeground(QColor(component_type.color))
            self.component_list.addItem(item)
        self.empty_label.setVisible(not components)
        self.remove_button.setEnabled(bool(components))
        self.clear_button.setEnabled(bool(components))

    def _save_components(self, components: List[ComponentRegion]) -> bool:
        stored = self.save_step_data(ComponentDefinitionData(components=components))
        if stored:
            self._refresh_list(components)
        return stored

    @with_error_boundary("adding component")
    def add_component(self) -> Optional[ComponentRegion]:
        """Add a region from the form values."""
        region = ComponentRegion(
            x=self.x_input.value(),
            y=self.y_input.value(),
            width=self.width_input.value(),
            height=self.height_input.value(),
            component_type=self.type_combo.currentData(),
            label=self.label_input.text().strip(),
        )
        if not region.is_valid():
            self.report_error(tr("validation.components.invalid", label=region.label or region.id))
            return None

        if not self._save_components(self.get_components() + [region]):
            return None
        self.clear_error()
        self.label_input.clear()
        logger.debug(f"Added component {region.id} ({region.component_type})")
        return region

    @with_error_boundary("removing component")
    def remove_component(self, index: int) -> bool:
        components = self.get_components()
        if not 0 <= index < len(components):
            return False
        removed = components.pop(index)
        logger.debug(f"Removed component {removed.id}")
        return self._save_components(components)

    @with_error_boundary("clearing components")
    def clear_components(self, confirm: Optional[Callable[[], bool]] = None) -> bool:
        """Remove every region after confirmation."""
        if not self.get_components():
            return False
        if confirm is None:
            confirm = lambda: ErrorHandler.confirm(self, tr("components.confirm_clear"))
        if not confirm():
            return False
        return self._save_components([])
