from typing import Optional
from prompt_studio.extensions import db
from prompt_studio.models.audit_log import AuditLog


def log_action(
    *,
    action: str,
    actor_id: Optional[str],
    entity_type: str,
    entity_id: Optional[str],
    project_id: Optional[str] = None,
    payload: dict | None = None,
) -> None:
    """
    Stage an audit row in the current transaction. Project entries are
    their own project.
    """
    if not actor_id or not entity_id:
        return

    if project_id is None and entity_type == "project":
        project_id = entity_id

    log = AuditLog()
    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.project_id = project_id
    log.payload = payload or {}

    db.session.add(log)
