from typing import Any, Dict
from prompt_studio.extensions import db
from prompt_studio.exceptions import UpdateError
from prompt_studio.application.queries import owned_section, project_sections
from prompt_studio.domain.entities import SECTION_CONTENT_FIELDS
from prompt_studio.domain.templates import copy_name
from prompt_studio.models.section import Section
from prompt_studio.normalizers.section import normalize_section
from prompt_studio.utils.audit import log_action
from prompt_studio.utils.identity import require_identity
from prompt_studio.utils.transaction import transactional


def duplicate_section(
    *,
    user_id: str,
    section_id: str,
) -> Dict[str, Any]:
    """
    Insert a copy of a section directly after the original.

    The copy takes ``order = original + 1``; every later sibling is shifted
    down by one first so the project's orders stay unique.
    """
    require_identity(user_id)

    original = owned_section(user_id, section_id)

    if not original:
        raise UpdateError("Section not found", status_code=404)

    insert_at = original.order + 1

    with transactional(UpdateError, "Failed to duplicate section"):
        (
            project_sections(original.project_id)
            .filter(Section.order >= insert_at)
            .update({Section.order: Section.order + 1}, synchronize_session=False)
        )

        copy = Section()
        copy.project_id = original.project_id
        for field in SECTION_CONTENT_FIELDS:
            setattr(copy, field, getattr(original, field))
        copy.name = copy_name(original.name)
        copy.order = insert_at

        db.session.add(copy)
        db.session.flush()

        original.project.touch()

        log_action(
            action="section.duplicate",
            actor_id=user_id,
            entity_type="section",
            entity_id=copy.id,
            project_id=copy.project_id,
            payload={"source_id": original.id, "order": insert_at},
        )

    return normalize_section(copy)
