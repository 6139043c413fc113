"""
Caller-side persistence gateway.

``ProjectGateway`` is the async interface the store talks to; one method
per entity operation, each returning entities (never raw wire dicts).
``ApiGateway`` implements it over the HTTP API.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from prompt_studio.domain.entities import Project, Section
from prompt_studio.exceptions import FetchError, UpdateError
from .api_session import ApiSession


class ProjectGateway(ABC):
    @abstractmethod
    async def list_projects(self) -> List[Project]: ...

    @abstractmethod
    async def get_project(self, project_id: str) -> Optional[Project]: ...

    @abstractmethod
    async def create_project(self, name: str) -> Project: ...

    @abstractmethod
    async def update_project(self, project_id: str, fields: Dict[str, Any]) -> Project: ...

    @abstractmethod
    async def delete_project(self, project_id: str) -> None: ...

    @abstractmethod
    async def duplicate_project(self, project_id: str) -> Project: ...

    @abstractmethod
    async def create_section(self, project_id: str, fields: Dict[str, Any]) -> Section: ...

    @abstractmethod
    async def update_section(self, section_id: str, fields: Dict[str, Any]) -> Section: ...

    @abstractmethod
    async def delete_section(self, section_id: str) -> None: ...

    @abstractmethod
    async def duplicate_section(self, section_id: str) -> Section: ...

    @abstractmethod
    async def reorder_sections(self, project_id: str, section_ids: List[str]) -> None: ...


class ApiGateway(ProjectGateway):
    """
    Gateway over ``/api/v1``. Blocking ``requests`` calls run in a worker
    thread so the caller's event loop keeps running.
    """

    def __init__(self, base_url: str, token=None, **session_kwargs):
        self.api = ApiSession(base_url, token, **session_kwargs)

    async def _fetch(self, method, path, message, **kwargs):
        return await self.api.request_async(
            method,
            path,
            error_cls=FetchError,
            auth_error_cls=FetchError,
            message=message,
            **kwargs,
        )

    async def _mutate(self, method, path, message, **kwargs):
        return await self.api.request_async(
            method,
            path,
            error_cls=UpdateError,
            message=message,
            **kwargs,
        )

    async def list_projects(self) -> List[Project]:
        data = await self._fetch("GET", "/projects", "Failed to fetch projects")
        return [Project.from_wire(item) for item in data or []]

    async def get_project(self, project_id: str) -> Optional[Project]:
        data = await self._fetch(
            "GET",
            f"/projects/{project_id}",
            "Failed to fetch project",
            allow_missing=True,
        )
        return Project.from_wire(data) if data else None

    async def create_project(self, name: str) -> Project:
        data = await self._mutate("POST", "/projects", "Failed to create project", json={"name": name})
        return Project.from_wire(data)

    async def update_project(self, project_id: str, fields: Dict[str, Any]) -> Project:
        data = await self._mutate(
            "PUT", f"/projects/{project_id}", "Failed to update project", json=fields
        )
        return Project.from_wire(data)

    async def delete_project(self, project_id: str) -> None:
        await self._mutate("DELETE", f"/projects/{project_id}", "Failed to delete project")

    async def duplicate_project(self, project_id: str) -> Project:
        data = await self._mutate(
            "POST", f"/projects/{project_id}/duplicate", "Failed to duplicate project"
        )
        return Project.from_wire(data)

    async def create_section(self, project_id: str, fields: Dict[str, Any]) -> Section:
        data = await self._mutate(
            "POST", f"/projects/{project_id}/sections", "Failed to create section", json=fields
        )
        return Section.from_wire(data)

    async def update_section(self, section_id: str, fields: Dict[str, Any]) -> Section:
        data = await self._mutate(
            "PUT", f"/sections/{section_id}", "Failed to update section", json=fields
        )
        return Section.from_wire(data)

    async def delete_section(self, section_id: str) -> None:
        await self._mutate("DELETE", f"/sections/{section_id}", "Failed to delete section")

    async def duplicate_section(self, section_id: str) -> Section:
        data = await self._mutate(
            "POST", f"/sections/{section_id}/duplicate", "Failed to duplicate section"
        )
        return Section.from_wire(data)

    async def reorder_sections(self, project_id: str, section_ids: List[str]) -> None:
        await self._mutate(
            "POST",
            f"/projects/{project_id}/sections/reorder",
            "Failed to reorder sections",
            json={"section_ids": list(section_ids)},
        )
