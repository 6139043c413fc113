from typing import Any, Dict
from prompt_studio.exceptions import UpdateError
from prompt_studio.application.queries import owned_section
from prompt_studio.domain.entities import SECTION_MUTABLE_FIELDS
from prompt_studio.domain.invariants.section import assert_section_fields
from prompt_studio.normalizers.section import normalize_section
from prompt_studio.utils.audit import log_action
from prompt_studio.utils.identity import require_identity
from prompt_studio.utils.transaction import transactional


def update_section(
    *,
    user_id: str,
    section_id: str,
    data: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Update mutable fields on a section and refresh its project's
    updated_at. ``project_id`` is never writable.
    """
    require_identity(user_id)
    assert_section_fields(data)

    section = owned_section(user_id, section_id)

    if not section:
        raise UpdateError("Section not found", status_code=404)

    changed_fields = []

    with transactional(UpdateError, "Failed to update section"):
        for field in SECTION_MUTABLE_FIELDS:
            if field in data and getattr(section, field) != data[field]:
                setattr(section, field, data[field])
                changed_fields.append(field)

        section.touch()
        section.project.touch()

        if changed_fields:
            log_action(
                action="section.update",
                actor_id=user_id,
                entity_type="section",
                entity_id=section.id,
                project_id=section.project_id,
                payload={"fields": changed_fields},
            )

    return normalize_section(section)
