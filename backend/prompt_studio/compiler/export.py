import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from prompt_studio.domain.entities import Project
from prompt_studio.utils.timestamps import iso, utc_now
from .markdown import compile_markdown

EXPORT_FORMATS = {
    "markdown": ("md", "text/markdown"),
    "json": ("json", "application/json"),
}


def build_json_export(project: Project, exported_at: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Faithful snapshot of a project: every section, empty ones included,
    sorted by order.
    """
    return {
        "name": project.name,
        "status": project.status,
        "globalPrompt": project.global_prompt,
        "sections": [
            {
                "name": s.name,
                "type": s.type,
                "description": s.description,
                "imageUrl": s.image_url,
                "imageDescription": s.image_description,
                "styleNotes": s.style_notes,
                "animationNotes": s.animation_notes,
            }
            for s in project.sorted_sections()
        ],
        "exportedAt": iso(exported_at or utc_now()),
    }


def compile_json(project: Project, exported_at: Optional[datetime] = None) -> str:
    return json.dumps(build_json_export(project, exported_at), indent=2, ensure_ascii=False)


def export_filename(project: Project, fmt: str) -> str:
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unknown export format: {fmt}")
    extension, _ = EXPORT_FORMATS[fmt]
    slug = re.sub(r"\s+", "-", project.name.lower())
    return f"{slug}-prompt.{extension}"


def render_export(project: Project, fmt: str) -> str:
    if fmt == "markdown":
        return compile_markdown(project)
    if fmt == "json":
        return compile_json(project)
    raise ValueError(f"Unknown export format: {fmt}")


def write_export(project: Project, directory, fmt: str = "markdown") -> Path:
    """Writes the compiled prompt verbatim and returns the file path."""
    path = Path(directory) / export_filename(project, fmt)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_export(project, fmt), encoding="utf-8")
    return path
