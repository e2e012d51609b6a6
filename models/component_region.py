# -*- coding: utf-8 -*-
"""
Component region entity model.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple
from datetime import datetime
import uuid

from models.component_types import (
    DEFAULT_COMPONENT_TYPE, generate_default_values, is_valid_component_type
)


def _generate_region_id() -> str:
    return f"region_{uuid.uuid4().hex[:12]}"


@dataclass
class ComponentRegion:
    """
    Editable region on a PNG template.

    Coordinates are image pixels with the origin at the top-left corner.
    """

    id: str = field(default_factory=_generate_region_id)
    x: float = 0
    y: float = 0
    width: float = 100
    height: float = 50
    component_type: str = DEFAULT_COMPONENT_TYPE
    default_values: Dict[str, Any] = field(default_factory=dict)
    label: str = ""
    is_visible: bool = True
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not self.default_values:
            self.default_values = generate_default_values(self.component_type)

    def update_bounds(self, x: float, y: float, width: float, height: float):
        """Move/resize the region."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.updated_at = datetime.now()

    def update_component_type(self, component_type: str):
        """Change the type and reset default values for it."""
        if not is_valid_component_type(component_type):
            raise ValueError(f"Unknown component type: {component_type}")
        self.component_type = component_type
        self.default_values = generate_default_values(component_type)
        self.updated_at = datetime.now()

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point is inside this region (edges included)."""
        return (self.x <= x <= self.x + self.width and
                self.y <= y <= self.y + self.height)

    def get_center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_valid(self) -> bool:
        """Positive size, non-negative origin and a known type."""
        return (self.width > 0 and self.height > 0 and
                self.x >= 0 and self.y >= 0 and
                is_valid_component_type(self.component_type))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the API's camelCase keys."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "componentType": self.component_type,
            "defaultValues": dict(self.default_values),
            "label": self.label,
            "isVisible": self.is_visible,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ComponentRegion':
        """Create from a dictionary (camelCase or snake_case keys)."""
        region = cls(
            id=data.get("id") or _generate_region_id(),
            x=data.get("x", 0),
            y=data.get("y", 0),
            width=data.get("width", 100),
            height=data.get("height", 50),
            component_type=data.get("componentType", data.get("component_type", DEFAULT_COMPONENT_TYPE)),
            default_values=dict(data.get("defaultValues", data.get("default_values", {})) or {}),
            label=data.get("label", ""),
            is_visible=data.get("isVisible", data.get("is_visible", True)),
        )
        created_at = data.get("createdAt", data.get("created_at"))
        updated_at = data.get("updatedAt", data.get("updated_at"))
        if created_at:
            region.created_at = datetime.fromisoformat(created_at)
        if updated_at:
            region.updated_at = datetime.fromisoformat(updated_at)
        return region
