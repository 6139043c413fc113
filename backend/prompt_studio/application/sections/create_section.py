from typing import Any, Dict
from prompt_studio.extensions import db
from prompt_studio.exceptions import UpdateError
from prompt_studio.application.queries import owned_project
from prompt_studio.domain.invariants.section import (
    assert_section_fields,
    assert_section_name,
)
from prompt_studio.models.section import Section
from prompt_studio.normalizers.section import normalize_section
from prompt_studio.utils.audit import log_action
from prompt_studio.utils.identity import require_identity
from prompt_studio.utils.transaction import transactional


CREATE_FIELDS = (
    "type",
    "description",
    "image_url",
    "image_description",
    "style_notes",
    "animation_notes",
)


def create_section(
    *,
    user_id: str,
    project_id: str,
    data: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Append a section to a project.

    The new order is one past the current maximum, or 0 for a project
    without sections. Any ``order`` in ``data`` is ignored.
    """
    require_identity(user_id)

    name = data.get("name")
    assert_section_name(name)
    assert_section_fields({k: v for k, v in data.items() if k in CREATE_FIELDS})

    project = owned_project(user_id, project_id)
    if not project:
        raise UpdateError("Project not found", status_code=404)

    # Determine the current max order for this project
    max_order = (
        db.session.query(db.func.max(Section.order))
        .filter(Section.project_id == project.id)
        .scalar()
    )

    section = Section()
    section.project_id = project.id
    section.name = name
    section.type = data.get("type") or "custom"
    section.description = data.get("description") or ""
    section.image_url = data.get("image_url")
    section.image_description = data.get("image_description")
    section.style_notes = data.get("style_notes")
    section.animation_notes = data.get("animation_notes")
    section.order = 0 if max_order is None else max_order + 1

    with transactional(UpdateError, "Failed to create section"):
        db.session.add(section)
        db.session.flush()

        project.touch()

        log_action(
            action="section.create",
            actor_id=user_id,
            entity_type="section",
            entity_id=section.id,
            project_id=project.id,
            payload={
                "type": section.type,
                "order": section.order,
            },
        )

    return normalize_section(section)
