"""
Client-side project store.

A single in-memory source of truth for a UI session. Field edits are
applied optimistically and queued in ``pending_changes``; structural
operations (create, delete, duplicate, reorder) go through the gateway
first and only touch memory once it succeeds.

The store is an explicit object: construct one per session and hand it to
whatever needs it.
"""
import asyncio
import logging
from contextlib import asynccontextmanager, contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from prompt_studio.domain.entities import (
    PROJECT_MUTABLE_FIELDS,
    SECTION_CONTENT_FIELDS,
    Project,
)
from prompt_studio.domain.invariants.project import assert_project
from prompt_studio.domain.lifecycle.project import assert_project_status
from prompt_studio.domain.invariants.section import assert_section_type
from prompt_studio.domain.templates import section_from_template
from prompt_studio.exceptions import PromptStudioError
from prompt_studio.utils.timestamps import utc_now
from .gateway import ProjectGateway

log = logging.getLogger(__name__)


@dataclass
class PendingChanges:
    """Unpersisted field values of one project, keyed by entity."""

    project: Dict[str, Any] = field(default_factory=dict)
    sections: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.project and not any(self.sections.values())

    def absorb(self, older: "PendingChanges") -> None:
        # Values recorded after ``older`` was taken win.
        for name, value in older.project.items():
            self.project.setdefault(name, value)
        for section_id, fields in older.sections.items():
            current = self.sections.setdefault(section_id, {})
            for name, value in fields.items():
                current.setdefault(name, value)


class ProjectStore:
    def __init__(
        self,
        gateway: ProjectGateway,
        *,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.gateway = gateway
        self._clock = clock

        self.projects: List[Project] = []
        self.active_project_id: Optional[str] = None
        self.is_loading = False
        self.error: Optional[str] = None
        self.last_saved_at: Optional[datetime] = None
        self.has_unsaved_changes = False
        self.pending_changes: Dict[str, PendingChanges] = {}

        self._locks: Dict[str, asyncio.Lock] = {}
        # Edits taken out of pending_changes whose write has not settled yet
        self._writing: Dict[str, List[PendingChanges]] = {}

    # ------------------------
    # Reads
    # ------------------------

    def get_project(self, project_id: Optional[str]) -> Optional[Project]:
        for project in self.projects:
            if project.id == project_id:
                return project
        return None

    @property
    def active_project(self) -> Optional[Project]:
        return self.get_project(self.active_project_id)

    def set_active_project(self, project_id: Optional[str]) -> None:
        self.active_project_id = project_id

    # ------------------------
    # Load
    # ------------------------

    async def load_projects(self) -> None:
        self.is_loading = True
        self.error = None
        try:
            projects = await self.gateway.list_projects()
        except PromptStudioError as exc:
            self._fail(exc, "Failed to load projects")
            return
        finally:
            self.is_loading = False

        self.pending_changes.clear()
        self._replace_projects(projects)
        self.last_saved_at = self._clock()
        self.has_unsaved_changes = self._has_pending()

        if self.get_project(self.active_project_id) is None:
            self.active_project_id = self.projects[0].id if self.projects else None

    # ------------------------
    # Optimistic field edits (no network)
    # ------------------------

    def update_project(self, project_id: str, **fields) -> bool:
        _check_fields(fields, PROJECT_MUTABLE_FIELDS, "project")
        if "status" in fields:
            assert_project_status(fields["status"])

        project = self.get_project(project_id)
        if project is None:
            return False

        for name, value in fields.items():
            setattr(project, name, value)
        project.updated_at = self._clock()

        self._pending(project_id).project.update(fields)
        self.has_unsaved_changes = True
        return True

    def update_section(self, project_id: str, section_id: str, **fields) -> bool:
        _check_fields(fields, SECTION_CONTENT_FIELDS, "section")
        if "type" in fields:
            assert_section_type(fields["type"])

        project = self.get_project(project_id)
        section = project.find_section(section_id) if project else None
        if section is None:
            return False

        now = self._clock()
        for name, value in fields.items():
            setattr(section, name, value)
        section.updated_at = now
        project.updated_at = now

        self._pending(project_id).sections.setdefault(section_id, {}).update(fields)
        self.has_unsaved_changes = True
        return True

    # ------------------------
    # Projects (persist first)
    # ------------------------

    async def create_project(self, name: str) -> str:
        async with self._operation("Failed to create project"):
            project = await self.gateway.create_project(name)

        self.projects.insert(0, project)
        self.active_project_id = project.id
        self.last_saved_at = self._clock()
        return project.id

    async def delete_project(self, project_id: str) -> None:
        async with self._operation("Failed to delete project"):
            await self.gateway.delete_project(project_id)

        self.projects = [p for p in self.projects if p.id != project_id]
        self.pending_changes.pop(project_id, None)
        self._locks.pop(project_id, None)
        self.has_unsaved_changes = self._has_pending()

        if self.active_project_id == project_id:
            self.active_project_id = self.projects[0].id if self.projects else None

    async def duplicate_project(self, project_id: str) -> str:
        async with self._operation("Failed to duplicate project"):
            duplicated = await self.gateway.duplicate_project(project_id)

        self.projects.insert(0, duplicated)
        self.active_project_id = duplicated.id
        self.last_saved_at = self._clock()
        return duplicated.id

    # ------------------------
    # Sections (persist first)
    # ------------------------

    async def add_section(
        self,
        project_id: str,
        name: str,
        section_type: str = "custom",
        **fields,
    ) -> None:
        _check_fields(fields, SECTION_CONTENT_FIELDS, "section")
        payload = {**fields, "name": name, "type": section_type}

        async with self._lock(project_id), self._operation("Failed to add section"):
            await self.gateway.create_section(project_id, payload)
            await self._reload()

    async def add_section_from_template(self, project_id: str, section_type: str) -> None:
        template = section_from_template(section_type)
        await self.add_section(
            project_id,
            template["name"],
            template["type"],
            description=template["description"],
        )

    async def delete_section(self, project_id: str, section_id: str) -> None:
        async with self._operation("Failed to delete section"):
            await self.gateway.delete_section(section_id)

        project = self.get_project(project_id)
        if project is None:
            return

        project.sections = [s for s in project.sections if s.id != section_id]
        pending = self.pending_changes.get(project_id)
        if pending:
            pending.sections.pop(section_id, None)

        self._renumber(project)
        project.updated_at = self._clock()
        self.has_unsaved_changes = self._has_pending()

    async def duplicate_section(self, project_id: str, section_id: str) -> None:
        async with self._lock(project_id), self._operation("Failed to duplicate section"):
            await self.gateway.duplicate_section(section_id)
            await self._reload()

    async def reorder_sections(self, project_id: str, section_ids: List[str]) -> None:
        async with self._operation("Failed to reorder sections"):
            await self.gateway.reorder_sections(project_id, section_ids)

        project = self.get_project(project_id)
        if project is None:
            return

        by_id = {s.id: s for s in project.sections}
        listed = [by_id[i] for i in section_ids if i in by_id]
        listed_ids = {s.id for s in listed}
        # Sections missing from the sequence keep their relative order after it
        rest = [s for s in project.sorted_sections() if s.id not in listed_ids]

        for index, section in enumerate(listed):
            section.order = index
        project.sections = listed + rest
        self._renumber(project)

        project.updated_at = self._clock()
        self.has_unsaved_changes = self._has_pending()

    # ------------------------
    # Saving
    # ------------------------

    async def save_project(self, project_id: str) -> None:
        """
        Flush a project: top-level fields first, then every section in
        order, one awaited call at a time. Flushes of the same project
        never interleave.
        """
        async with self._lock(project_id):
            project = self.get_project(project_id)
            if project is None:
                return

            snapshot = project.copy()
            taken = self.pending_changes.pop(project_id, None)

            self.is_loading = True
            try:
                assert_project(snapshot)
                with self._in_flight(project_id, taken):
                    await self.gateway.update_project(project_id, snapshot.persistable_fields())
                    for section in snapshot.sorted_sections():
                        await self.gateway.update_section(section.id, section.persistable_fields())
            except PromptStudioError as exc:
                self._restore(project_id, taken)
                self.has_unsaved_changes = True
                self._fail(exc, "Failed to save project")
                raise
            finally:
                self.is_loading = False

            self.last_saved_at = self._clock()
            self.has_unsaved_changes = self._has_pending()

    async def persist_pending(self, project_id: str, section_id: Optional[str] = None) -> None:
        """
        Write the queued edits of one entity (the project itself when
        ``section_id`` is None) in a single update.
        """
        async with self._lock(project_id):
            pending = self.pending_changes.get(project_id)
            if pending is None:
                return

            if section_id is None:
                fields, pending.project = pending.project, {}
            else:
                fields = pending.sections.pop(section_id, {})

            if pending.is_empty():
                self.pending_changes.pop(project_id, None)

            if not fields:
                return

            taken = PendingChanges()
            if section_id is None:
                taken.project = fields
            else:
                taken.sections[section_id] = fields

            try:
                with self._in_flight(project_id, taken):
                    if section_id is None:
                        await self.gateway.update_project(project_id, fields)
                    else:
                        await self.gateway.update_section(section_id, fields)
            except PromptStudioError as exc:
                self._restore(project_id, taken)
                self.has_unsaved_changes = True
                self._fail(exc, "Failed to save changes")
                raise

            self.last_saved_at = self._clock()
            self.has_unsaved_changes = self._has_pending()

    # ------------------------
    # Internals
    # ------------------------

    @asynccontextmanager
    async def _operation(self, failure_message: str):
        self.is_loading = True
        self.error = None
        try:
            yield
        except PromptStudioError as exc:
            self._fail(exc, failure_message)
            raise
        finally:
            self.is_loading = False

    def _fail(self, exc: PromptStudioError, fallback: str) -> None:
        self.error = exc.message or fallback
        log.error("%s: %s", fallback, exc.message)

    def _lock(self, project_id: str) -> asyncio.Lock:
        lock = self._locks.get(project_id)
        if lock is None:
            lock = self._locks[project_id] = asyncio.Lock()
        return lock

    @contextmanager
    def _in_flight(self, project_id: str, taken: Optional[PendingChanges]):
        """Registers edits being written so a concurrent reload keeps them."""
        if taken is None or taken.is_empty():
            yield
            return

        entries = self._writing.setdefault(project_id, [])
        entries.append(taken)
        try:
            yield
        finally:
            entries[:] = [entry for entry in entries if entry is not taken]
            if not entries:
                self._writing.pop(project_id, None)

    def _has_pending(self) -> bool:
        return any(not pending.is_empty() for pending in self.pending_changes.values())

    def _pending(self, project_id: str) -> PendingChanges:
        return self.pending_changes.setdefault(project_id, PendingChanges())

    def _restore(self, project_id: str, taken: Optional[PendingChanges]) -> None:
        if not taken or taken.is_empty():
            return
        self._pending(project_id).absorb(taken)

    def _renumber(self, project: Project) -> None:
        """Densify orders to 0..n-1, queueing every order that moved."""
        ordered = project.sorted_sections()
        for index, section in enumerate(ordered):
            if section.order != index:
                section.order = index
                self._pending(project.id).sections.setdefault(section.id, {})["order"] = index
        project.sections = ordered

    def _replace_projects(self, projects: List[Project]) -> None:
        self.projects = list(projects)
        for project in self.projects:
            self._renumber(project)

    async def _reload(self) -> None:
        """
        Replace memory with the server's view, then re-apply local edits the
        server may not have yet: first those still being written, then those
        still queued. A reload never drops unsaved typing.
        """
        projects = await self.gateway.list_projects()

        # Orders queued before the reload are superseded by the server's
        for pending in self.pending_changes.values():
            for fields in pending.sections.values():
                fields.pop("order", None)

        self._replace_projects(projects)

        for project in self.projects:
            for writing in self._writing.get(project.id, []):
                _apply(project, writing)
            pending = self.pending_changes.get(project.id)
            if pending is not None:
                _apply(project, pending, prune=True)
            self._renumber(project)

        for project_id, pending in list(self.pending_changes.items()):
            if self.get_project(project_id) is None or pending.is_empty():
                del self.pending_changes[project_id]

        if self.get_project(self.active_project_id) is None:
            self.active_project_id = self.projects[0].id if self.projects else None

        self.last_saved_at = self._clock()
        self.has_unsaved_changes = self._has_pending()


def _apply(project: Project, changes: PendingChanges, prune: bool = False) -> None:
    for name, value in changes.project.items():
        setattr(project, name, value)
    for section_id, fields in list(changes.sections.items()):
        section = project.find_section(section_id)
        if section is None:
            if prune:
                del changes.sections[section_id]
            continue
        for name, value in fields.items():
            if name != "order":
                setattr(section, name, value)


def _check_fields(fields: Dict[str, Any], allowed, kind: str) -> None:
    unknown = set(fields) - set(allowed)
    if unknown:
        raise ValueError(f"Unknown {kind} fields: {', '.join(sorted(unknown))}")
