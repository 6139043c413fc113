"""
In-memory gateway double for store and autosave tests.

Behaves like the real gateway (ids, orders, copies) and records every call
so tests can assert on ordering. ``fail_on`` maps an operation name to True
(always fail) or to a predicate over the call arguments.
"""
import asyncio
import itertools
from datetime import datetime, timedelta, timezone

from prompt_studio.client.gateway import ProjectGateway
from prompt_studio.domain.entities import Project, Section
from prompt_studio.domain.templates import copy_name, default_sections
from prompt_studio.exceptions import FetchError, UpdateError

_ids = itertools.count(1)


def new_id(prefix):
    return f"{prefix}-{next(_ids)}"


def make_project(name="Launch", sections=("Hero", "Features", "Pricing"), **fields):
    project_id = new_id("project")
    project = Project(id=project_id, name=name, **fields)
    project.sections = [
        Section(id=new_id("section"), project_id=project_id, name=section_name, order=index)
        for index, section_name in enumerate(sections)
    ]
    return project


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        self.now = self.now + timedelta(seconds=1)
        return self.now


class FakeGateway(ProjectGateway):
    def __init__(self, projects=()):
        self.projects = {p.id: p.copy() for p in projects}
        self.calls = []
        self.fail_on = {}
        self.delay = 0.0

    async def _enter(self, name, *args):
        self.calls.append((name,) + args)
        fail = self.fail_on.get(name)
        if fail is True or (callable(fail) and fail(*args)):
            error_cls = FetchError if name in ("list_projects", "get_project") else UpdateError
            raise error_cls(f"{name} failed")
        if self.delay:
            await asyncio.sleep(self.delay)

    def _section(self, section_id):
        for project in self.projects.values():
            section = project.find_section(section_id)
            if section is not None:
                return project, section
        raise UpdateError("Section not found", status_code=404)

    def names(self):
        return [call[0] for call in self.calls]

    async def list_projects(self):
        await self._enter("list_projects")
        ranked = sorted(self.projects.values(), key=lambda p: p.updated_at, reverse=True)
        return [p.copy() for p in ranked]

    async def get_project(self, project_id):
        await self._enter("get_project", project_id)
        project = self.projects.get(project_id)
        return project.copy() if project else None

    async def create_project(self, name):
        await self._enter("create_project", name)
        project_id = new_id("project")
        project = Project(id=project_id, name=name)
        project.sections = [
            Section(id=new_id("section"), project_id=project_id, **fields)
            for fields in default_sections()
        ]
        self.projects[project_id] = project
        return project.copy()

    async def update_project(self, project_id, fields):
        await self._enter("update_project", project_id, dict(fields))
        project = self.projects.get(project_id)
        if project is None:
            raise UpdateError("Project not found", status_code=404)
        for name, value in fields.items():
            setattr(project, name, value)
        return project.copy()

    async def delete_project(self, project_id):
        await self._enter("delete_project", project_id)
        self.projects.pop(project_id, None)

    async def duplicate_project(self, project_id):
        await self._enter("duplicate_project", project_id)
        source = self.projects[project_id]
        copy_id = new_id("project")
        duplicate = Project(
            id=copy_id,
            name=copy_name(source.name),
            status=source.status,
            global_prompt=source.global_prompt,
        )
        for section in source.sections:
            fields = section.persistable_fields()
            duplicate.sections.append(Section(id=new_id("section"), project_id=copy_id, **fields))
        self.projects[copy_id] = duplicate
        return duplicate.copy()

    async def create_section(self, project_id, fields):
        await self._enter("create_section", project_id, dict(fields))
        project = self.projects[project_id]
        next_order = max((s.order for s in project.sections), default=-1) + 1
        section = Section(id=new_id("section"), project_id=project_id, order=next_order, **fields)
        project.sections.append(section)
        return section

    async def update_section(self, section_id, fields):
        await self._enter("update_section", section_id, dict(fields))
        _, section = self._section(section_id)
        for name, value in fields.items():
            setattr(section, name, value)
        return section

    async def delete_section(self, section_id):
        await self._enter("delete_section", section_id)
        project, section = self._section(section_id)
        project.sections.remove(section)

    async def duplicate_section(self, section_id):
        await self._enter("duplicate_section", section_id)
        project, original = self._section(section_id)
        for sibling in project.sections:
            if sibling.order > original.order:
                sibling.order += 1
        fields = original.persistable_fields()
        fields.update(name=copy_name(original.name), order=original.order + 1)
        section = Section(id=new_id("section"), project_id=project.id, **fields)
        project.sections.append(section)
        return section

    async def reorder_sections(self, project_id, section_ids):
        await self._enter("reorder_sections", project_id, list(section_ids))
        project = self.projects[project_id]
        for index, section_id in enumerate(section_ids):
            section = project.find_section(section_id)
            if section is not None:
                section.order = index
