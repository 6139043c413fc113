"""
Save triggers for a ProjectStore.

- Debounced autosave: one timer per entity (the project itself or one of
  its sections). Every edit cancels and re-arms that entity's timer; when
  it fires, all fields edited in the window go out as one update.
- Interval save: every few minutes, flush each project that holds
  unsaved edits.
- Keyboard shortcut: Ctrl/Cmd+S flushes the active project at once.
"""
import asyncio
import logging
from typing import Dict, Optional, Set, Tuple

from prompt_studio.config import AUTOSAVE_DEBOUNCE_SECONDS, AUTOSAVE_INTERVAL_SECONDS
from prompt_studio.exceptions import PromptStudioError
from .store import ProjectStore

log = logging.getLogger(__name__)

EntityKey = Tuple[str, Optional[str]]


class AutosaveController:
    def __init__(
        self,
        store: ProjectStore,
        *,
        debounce: float = AUTOSAVE_DEBOUNCE_SECONDS,
        interval: float = AUTOSAVE_INTERVAL_SECONDS,
    ):
        self.store = store
        self.debounce = debounce
        self.interval = interval

        self._timers: Dict[EntityKey, asyncio.TimerHandle] = {}
        self._tasks: Set[asyncio.Task] = set()
        self._interval_task: Optional[asyncio.Task] = None

    # ------------------------
    # Edits
    # ------------------------

    def edit_project(self, project_id: str, **fields) -> bool:
        if not self.store.update_project(project_id, **fields):
            return False
        self._arm((project_id, None))
        return True

    def edit_section(self, project_id: str, section_id: str, **fields) -> bool:
        if not self.store.update_section(project_id, section_id, **fields):
            return False
        self._arm((project_id, section_id))
        return True

    def _arm(self, key: EntityKey) -> None:
        handle = self._timers.pop(key, None)
        if handle is not None:
            handle.cancel()

        loop = asyncio.get_running_loop()
        self._timers[key] = loop.call_later(self.debounce, self._fire, key)

    def _fire(self, key: EntityKey) -> None:
        self._timers.pop(key, None)
        project_id, section_id = key
        self._spawn(self.store.persist_pending(project_id, section_id))

    @property
    def armed(self) -> int:
        return len(self._timers)

    # ------------------------
    # Explicit and periodic saves
    # ------------------------

    def save_now(self, project_id: Optional[str] = None) -> Optional[asyncio.Task]:
        project_id = project_id or self.store.active_project_id
        if project_id is None:
            return None

        # The flush carries every queued edit of the project
        for key in [k for k in self._timers if k[0] == project_id]:
            self._timers.pop(key).cancel()

        return self._spawn(self.store.save_project(project_id))

    def handle_shortcut(self, key: str, *, ctrl: bool = False, meta: bool = False) -> bool:
        """Returns True when the key press was consumed as a save."""
        if key.lower() != "s" or not (ctrl or meta):
            return False
        self.save_now()
        return True

    def start(self) -> None:
        if self._interval_task is None or self._interval_task.done():
            self._interval_task = asyncio.get_running_loop().create_task(self._run_interval())

    async def _run_interval(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            await self.save_if_unsaved()

    async def save_if_unsaved(self) -> bool:
        """Flush every project holding pending edits. True if any was saved."""
        if not self.store.has_unsaved_changes:
            return False

        dirty = [
            project_id
            for project_id, pending in self.store.pending_changes.items()
            if not pending.is_empty()
        ]
        saved = False
        for project_id in dirty:
            try:
                await self.store.save_project(project_id)
            except PromptStudioError as exc:
                log.warning("Interval save of %s failed: %s", project_id, exc.message)
                continue
            saved = True
        return saved

    # ------------------------
    # Lifecycle
    # ------------------------

    async def flush(self) -> None:
        """Fire every armed timer now and wait for all writes to settle."""
        for key in list(self._timers):
            self._timers.pop(key).cancel()
            project_id, section_id = key
            self._spawn(self.store.persist_pending(project_id, section_id))
        await self.wait()

    async def wait(self) -> None:
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def stop(self) -> None:
        if self._interval_task is not None:
            self._interval_task.cancel()
            try:
                await self._interval_task
            except asyncio.CancelledError:
                pass
            self._interval_task = None

        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()

        await self.wait()

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._finished)
        return task

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log.warning("Autosave failed: %s", exc)
