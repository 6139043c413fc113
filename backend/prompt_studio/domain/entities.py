"""
In-memory entities shared by the client store and the prompt compiler.

These mirror the persisted rows but carry no persistence behaviour. They
convert to and from the wire shape used by the HTTP API (snake_case keys,
ISO timestamps).
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Optional

from prompt_studio.utils.timestamps import iso, parse_ts, utc_now

SECTION_CONTENT_FIELDS = (
    "name",
    "type",
    "description",
    "image_url",
    "image_description",
    "style_notes",
    "animation_notes",
)

SECTION_MUTABLE_FIELDS = SECTION_CONTENT_FIELDS + ("order",)

PROJECT_MUTABLE_FIELDS = ("name", "status", "global_prompt")


@dataclass
class Section:
    id: str
    project_id: str
    name: str
    type: str = "custom"
    description: str = ""
    image_url: Optional[str] = None
    image_description: Optional[str] = None
    style_notes: Optional[str] = None
    animation_notes: Optional[str] = None
    order: int = 0
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "Section":
        return cls(
            id=data["id"],
            project_id=data["project_id"],
            name=data["name"],
            type=data.get("type") or "custom",
            description=data.get("description") or "",
            image_url=data.get("image_url"),
            image_description=data.get("image_description"),
            style_notes=data.get("style_notes"),
            animation_notes=data.get("animation_notes"),
            order=int(data.get("order") or 0),
            created_at=parse_ts(data.get("created_at")) or utc_now(),
            updated_at=parse_ts(data.get("updated_at")) or utc_now(),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "project_id": self.project_id,
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "image_url": self.image_url,
            "image_description": self.image_description,
            "style_notes": self.style_notes,
            "animation_notes": self.animation_notes,
            "order": self.order,
            "created_at": iso(self.created_at),
            "updated_at": iso(self.updated_at),
        }

    def persistable_fields(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in SECTION_MUTABLE_FIELDS}


@dataclass
class Project:
    id: str
    name: str
    status: str = "draft"
    global_prompt: str = ""
    sections: List[Section] = field(default_factory=list)
    user_id: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "Project":
        sections = [Section.from_wire(s) for s in data.get("sections") or []]
        return cls(
            id=data["id"],
            name=data["name"],
            status=data.get("status") or "draft",
            global_prompt=data.get("global_prompt") or "",
            sections=sorted(sections, key=lambda s: s.order),
            user_id=data.get("user_id"),
            created_at=parse_ts(data.get("created_at")) or utc_now(),
            updated_at=parse_ts(data.get("updated_at")) or utc_now(),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "status": self.status,
            "global_prompt": self.global_prompt,
            "created_at": iso(self.created_at),
            "updated_at": iso(self.updated_at),
            "sections": [s.to_wire() for s in self.sorted_sections()],
        }

    def sorted_sections(self) -> List[Section]:
        return sorted(self.sections, key=lambda s: s.order)

    def find_section(self, section_id: str) -> Optional[Section]:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def persistable_fields(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in PROJECT_MUTABLE_FIELDS}

    def copy(self) -> "Project":
        return replace(self, sections=[replace(s) for s in self.sections])


@dataclass
class GenerationResult:
    content: str
    model: str
    usage: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "model": self.model, "usage": self.usage}
