from typing import Optional
from prompt_studio.models.project import Project
from prompt_studio.models.section import Section


def owned_project(user_id: str, project_id: str) -> Optional[Project]:
    return Project.query.filter_by(id=project_id, user_id=user_id).first()


def owned_section(user_id: str, section_id: str) -> Optional[Section]:
    return (
        Section.query
        .join(Project, Project.id == Section.project_id)
        .filter(Section.id == section_id, Project.user_id == user_id)
        .first()
    )


def project_sections(project_id: str):
    return Section.query.filter_by(project_id=project_id)
