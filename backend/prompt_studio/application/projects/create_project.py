from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from prompt_studio.extensions import db
from prompt_studio.exceptions import UpdateError
from prompt_studio.models.project import Project
from prompt_studio.models.section import Section
from prompt_studio.domain.invariants.project import assert_project_name
from prompt_studio.domain.templates import default_sections
from prompt_studio.normalizers.project import normalize_project
from prompt_studio.utils.audit import log_action
from prompt_studio.utils.identity import require_identity
from prompt_studio.utils.transaction import transactional


def create_project(
    *,
    user_id: str,
    name: str,
) -> Dict[str, Any]:
    """
    Create a new project in DRAFT state with the six default sections.

    Edge cases handled:
    - Missing identity (AuthError before any store access)
    - Blank name
    - Default section insert failing: the project is still returned,
      without sections
    """
    require_identity(user_id)
    assert_project_name(name)

    project = Project()
    project.user_id = user_id
    project.name = name.strip()
    project.status = "draft"
    project.global_prompt = ""

    with transactional(UpdateError, "Failed to create project"):
        db.session.add(project)
        db.session.flush()  # ensures project.id is available

        log_action(
            action="project.create",
            actor_id=user_id,
            entity_type="project",
            entity_id=project.id,
            payload={"name": project.name},
        )

    sections = []
    try:
        with transactional():
            for fields in default_sections():
                section = Section()
                section.project_id = project.id
                section.name = fields["name"]
                section.type = fields["type"]
                section.description = fields["description"]
                section.order = fields["order"]
                db.session.add(section)
                sections.append(section)
    except SQLAlchemyError as exc:
        # Don't fail, the project is still usable without its defaults
        current_app.logger.error(f"Error creating default sections for {project.id}: {exc}")
        sections = []

    return normalize_project(project, sections=sections)
