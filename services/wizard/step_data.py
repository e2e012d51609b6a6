# -*- coding: utf-8 -*-
"""
Typed payloads written by each wizard step.

Every logical step owns exactly one payload type; STEP_PAYLOAD_TYPES is
the registry the state manager checks writes against.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from models.component_region import ComponentRegion
from services.wizard.logical_steps import LogicalStep


@dataclass
class UploadData:
    """Step 1: uploaded template file."""
    file_name: Optional[str] = None
    file_type: Optional[str] = None
    file_size: int = 0
    upload_id: Optional[str] = None
    public_url: Optional[str] = None
    is_uploaded: bool = False
    upload_progress: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadData':
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass
class ComponentDefinitionData:
    """Step 2 (PNG only): component regions drawn over the image."""
    components: List[ComponentRegion] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"components": [c.to_dict() for c in self.components]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ComponentDefinitionData':
        return cls(components=[
            c if isinstance(c, ComponentRegion) else ComponentRegion.from_dict(c)
            for c in data.get("components", [])
        ])


@dataclass
class MetadataData:
    """Template name, description, category and tags."""
    name: str = ""
    description: str = ""
    category_id: str = ""
    category_name: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MetadataData':
        values = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        values["tags"] = list(values.get("tags") or [])
        return cls(**values)


@dataclass
class SummaryData:
    """Review confirmation."""
    is_reviewed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SummaryData':
        return cls(is_reviewed=bool(data.get("is_reviewed", False)))


@dataclass
class CompletionData:
    """Submission outcome."""
    is_submitted: bool = False
    template_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CompletionData':
        return cls(
            is_submitted=bool(data.get("is_submitted", False)),
            template_id=data.get("template_id"),
        )


STEP_PAYLOAD_TYPES = {
    LogicalStep.UPLOAD: UploadData,
    LogicalStep.COMPONENT_DEFINITION: ComponentDefinitionData,
    LogicalStep.METADATA: MetadataData,
    LogicalStep.SUMMARY: SummaryData,
    LogicalStep.COMPLETION: CompletionData,
}
