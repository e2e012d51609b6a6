# -*- coding: utf-8 -*-
"""
Template Studio Data Models
"""

from .component_region import ComponentRegion
from .component_types import ComponentType, COMPONENT_TYPES

__all__ = [
    "ComponentRegion",
    "ComponentType",
    "COMPONENT_TYPES",
]
