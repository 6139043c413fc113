from typing import Any, Dict, List
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from prompt_studio.exceptions import FetchError
from prompt_studio.models.project import Project
from prompt_studio.models.section import Section
from prompt_studio.normalizers.project import normalize_project
from prompt_studio.utils.identity import require_identity


def list_projects(*, user_id: str) -> List[Dict[str, Any]]:
    """
    All projects owned by ``user_id``, most recently updated first, each
    with its sections attached in order.

    Two queries: the projects, then every section belonging to them.
    """
    require_identity(user_id, error_cls=FetchError)

    try:
        projects = (
            Project.query
            .filter_by(user_id=user_id)
            .order_by(Project.updated_at.desc())
            .all()
        )

        if not projects:
            return []

        sections = (
            Section.query
            .filter(Section.project_id.in_([p.id for p in projects]))
            .order_by(Section.order.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        current_app.logger.error(f"Error fetching projects: {exc}")
        raise FetchError("Failed to fetch projects") from exc

    sections_by_project: Dict[str, list] = {}
    for section in sections:
        sections_by_project.setdefault(section.project_id, []).append(section)

    return [
        normalize_project(project, sections=sections_by_project.get(project.id, []))
        for project in projects
    ]
