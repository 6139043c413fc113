"""
In-process gateway: calls the application layer directly inside a Flask
app context, bound to one user identity. Used by tooling and tests that
run the store against a real database without an HTTP hop.
"""
from typing import Any, Dict, List, Optional

from prompt_studio.application import projects as project_ops
from prompt_studio.application import sections as section_ops
from prompt_studio.domain.entities import Project, Section
from .gateway import ProjectGateway


class LocalGateway(ProjectGateway):
    def __init__(self, app, user_id: Optional[str] = None):
        self.app = app
        self.user_id = user_id

    def _run(self, operation, **kwargs):
        with self.app.app_context():
            return operation(user_id=self.user_id, **kwargs)

    async def list_projects(self) -> List[Project]:
        return [Project.from_wire(p) for p in self._run(project_ops.list_projects)]

    async def get_project(self, project_id: str) -> Optional[Project]:
        data = self._run(project_ops.get_project, project_id=project_id)
        return Project.from_wire(data) if data else None

    async def create_project(self, name: str) -> Project:
        return Project.from_wire(self._run(project_ops.create_project, name=name))

    async def update_project(self, project_id: str, fields: Dict[str, Any]) -> Project:
        data = self._run(project_ops.update_project, project_id=project_id, data=fields)
        return Project.from_wire(data)

    async def delete_project(self, project_id: str) -> None:
        self._run(project_ops.delete_project, project_id=project_id)

    async def duplicate_project(self, project_id: str) -> Project:
        return Project.from_wire(self._run(project_ops.duplicate_project, project_id=project_id))

    async def create_section(self, project_id: str, fields: Dict[str, Any]) -> Section:
        data = self._run(section_ops.create_section, project_id=project_id, data=fields)
        return Section.from_wire(data)

    async def update_section(self, section_id: str, fields: Dict[str, Any]) -> Section:
        data = self._run(section_ops.update_section, section_id=section_id, data=fields)
        return Section.from_wire(data)

    async def delete_section(self, section_id: str) -> None:
        self._run(section_ops.delete_section, section_id=section_id)

    async def duplicate_section(self, section_id: str) -> Section:
        return Section.from_wire(self._run(section_ops.duplicate_section, section_id=section_id))

    async def reorder_sections(self, project_id: str, section_ids: List[str]) -> None:
        self._run(section_ops.reorder_sections, project_id=project_id, section_ids=list(section_ids))
