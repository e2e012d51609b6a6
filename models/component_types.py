# -*- coding: utf-8 -*-
"""
Component type registry.

Lists the component types a template region can hold and the default
values each type starts with.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import copy


@dataclass(frozen=True)
class ComponentType:
    """Definition of a component type."""
    key: str
    name: str
    description: str
    color: str
    defaults: Dict[str, Any] = field(default_factory=dict)


COMPONENT_TYPES: Dict[str, ComponentType] = {
    "text": ComponentType(
        key="text",
        name="Text",
        description="Editable text content",
        color="#3b82f6",
        defaults={
            "text": "Sample Text",
            "fontSize": 16,
            "fontFamily": "Arial, sans-serif",
            "fontWeight": "normal",
            "color": "#000000",
            "textAlign": "left",
            "lineHeight": 1.4,
        },
    ),
    "image": ComponentType(
        key="image",
        name="Image",
        description="Replaceable image",
        color="#10b981",
        defaults={
            "src": "",
            "alt": "Image",
            "width": 300,
            "height": 200,
            "objectFit": "cover",
            "borderRadius": 0,
        },
    ),
    "button": ComponentType(
        key="button",
        name="Button",
        description="Clickable call to action",
        color="#8b5cf6",
        defaults={
            "text": "Click Me",
            "href": "#",
            "target": "_self",
            "backgroundColor": "#3b82f6",
            "textColor": "#ffffff",
            "fontSize": 16,
            "padding": "12px 24px",
            "borderRadius": 4,
        },
    ),
    "link": ComponentType(
        key="link",
        name="Link",
        description="Hyperlink",
        color="#06b6d4",
        defaults={
            "text": "Link Text",
            "href": "#",
            "target": "_self",
            "color": "#3b82f6",
            "fontSize": 16,
            "textDecoration": "underline",
        },
    ),
    "heading": ComponentType(
        key="heading",
        name="Heading",
        description="Section heading",
        color="#ef4444",
        defaults={
            "text": "Heading Text",
            "level": 1,
            "fontSize": 32,
            "fontFamily": "Arial, sans-serif",
            "fontWeight": "bold",
            "color": "#000000",
            "textAlign": "left",
            "margin": "0 0 16px 0",
        },
    ),
    "card": ComponentType(
        key="card",
        name="Card",
        description="Content card",
        color="#f59e0b",
        defaults={
            "title": "Card Title",
            "content": "Card content goes here...",
            "backgroundColor": "#ffffff",
            "borderColor": "#e5e7eb",
            "borderRadius": 8,
            "padding": "16px",
            "boxShadow": "0 1px 3px rgba(0, 0, 0, 0.1)",
        },
    ),
    "banner": ComponentType(
        key="banner",
        name="Banner",
        description="Hero banner section",
        color="#f97316",
        defaults={
            "title": "Banner Title",
            "subtitle": "Banner subtitle",
            "backgroundImage": "",
            "backgroundColor": "#f3f4f6",
            "textColor": "#000000",
            "textAlign": "center",
            "padding": "60px 20px",
            "minHeight": 300,
        },
    ),
    "accordion": ComponentType(
        key="accordion",
        name="Accordion",
        description="Collapsible list of items",
        color="#64748b",
        defaults={
            "title": "Accordion",
            "items": [{"title": "Item 1", "content": "Item content"}],
            "allowMultipleOpen": False,
        },
    ),
}

DEFAULT_COMPONENT_TYPE = "text"


def get_component_type(key: str) -> Optional[ComponentType]:
    """Return the component type definition or None."""
    return COMPONENT_TYPES.get(key)


def is_valid_component_type(key: str) -> bool:
    return key in COMPONENT_TYPES


def generate_default_values(key: str) -> Dict[str, Any]:
    """Fresh copy of the default values for a component type."""
    component_type = COMPONENT_TYPES.get(key)
    if component_type is None:
        return {}
    return copy.deepcopy(component_type.defaults)


def get_component_type_options() -> List[Dict[str, str]]:
    """Options for a component type combo box."""
    return [
        {"value": ct.key, "label": ct.name, "color": ct.color}
        for ct in COMPONENT_TYPES.values()
    ]
