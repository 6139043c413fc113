from typing import Any, Dict, Optional
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from prompt_studio.exceptions import FetchError
from prompt_studio.application.queries import owned_project, project_sections
from prompt_studio.models.section import Section
from prompt_studio.normalizers.project import normalize_project
from prompt_studio.utils.identity import require_identity


def get_project(*, user_id: str, project_id: str) -> Optional[Dict[str, Any]]:
    """
    Single project with its sections, or None when no such project is
    owned by the caller.
    """
    require_identity(user_id, error_cls=FetchError)

    try:
        project = owned_project(user_id, project_id)
        if not project:
            return None

        sections = project_sections(project.id).order_by(Section.order.asc()).all()
    except SQLAlchemyError as exc:
        current_app.logger.error(f"Error fetching project {project_id}: {exc}")
        raise FetchError("Failed to fetch project") from exc

    return normalize_project(project, sections=sections)
