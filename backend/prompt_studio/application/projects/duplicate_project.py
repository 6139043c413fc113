from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from prompt_studio.extensions import db
from prompt_studio.exceptions import UpdateError
from prompt_studio.application.queries import owned_project, project_sections
from prompt_studio.domain.templates import copy_name
from prompt_studio.models.project import Project
from prompt_studio.models.section import Section
from prompt_studio.utils.audit import log_action
from prompt_studio.utils.identity import require_identity
from prompt_studio.utils.transaction import transactional
from .get_project import get_project


COPIED_SECTION_FIELDS = (
    "name",
    "type",
    "description",
    "image_url",
    "image_description",
    "style_notes",
    "animation_notes",
    "order",
)


def duplicate_project(
    *,
    user_id: str,
    project_id: str,
) -> Dict[str, Any]:
    """
    Copy a project and all of its sections under new identities.

    The copy is named "<name> (Copy)" and keeps status and global prompt.
    Sections are inserted in one batch after the project; if that batch
    fails the duplicate is still returned.
    """
    require_identity(user_id)

    original = owned_project(user_id, project_id)
    if not original:
        raise UpdateError("Project not found", status_code=404)

    originals = project_sections(original.id).order_by(Section.order.asc()).all()

    copy = Project()
    copy.user_id = user_id
    copy.name = copy_name(original.name)
    copy.status = original.status
    copy.global_prompt = original.global_prompt

    with transactional(UpdateError, "Failed to duplicate project"):
        db.session.add(copy)
        db.session.flush()

        log_action(
            action="project.duplicate",
            actor_id=user_id,
            entity_type="project",
            entity_id=copy.id,
            payload={"source_id": original.id},
        )

    if originals:
        try:
            with transactional():
                for source in originals:
                    section = Section()
                    section.project_id = copy.id
                    for field in COPIED_SECTION_FIELDS:
                        setattr(section, field, getattr(source, field))
                    db.session.add(section)
        except SQLAlchemyError as exc:
            current_app.logger.error(f"Error duplicating sections of {original.id}: {exc}")

    duplicated = get_project(user_id=user_id, project_id=copy.id)
    if duplicated is None:
        raise UpdateError("Failed to fetch duplicated project")
    return duplicated
