from prompt_studio.extensions import db
from prompt_studio.exceptions import UpdateError
from prompt_studio.application.queries import owned_section
from prompt_studio.utils.audit import log_action
from prompt_studio.utils.identity import require_identity
from prompt_studio.utils.transaction import transactional


def delete_section(
    *,
    user_id: str,
    section_id: str,
) -> None:
    """
    Remove a section.

    Siblings keep their stored order; the gap is closed by the client's
    next flush and is never visible to readers (see normalize_project).
    """
    require_identity(user_id)

    section = owned_section(user_id, section_id)

    if not section:
        raise UpdateError("Section not found", status_code=404)

    project_id = section.project_id

    with transactional(UpdateError, "Failed to delete section"):
        section.project.touch()
        db.session.delete(section)

        log_action(
            action="section.delete",
            actor_id=user_id,
            entity_type="section",
            entity_id=section_id,
            project_id=project_id,
        )
