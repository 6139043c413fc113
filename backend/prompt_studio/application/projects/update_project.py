from typing import Any, Dict
from prompt_studio.exceptions import UpdateError
from prompt_studio.application.queries import owned_project
from prompt_studio.domain.invariants.project import assert_project_fields
from prompt_studio.domain.lifecycle.project import assert_project_transition
from prompt_studio.normalizers.project import normalize_project
from prompt_studio.utils.audit import log_action
from prompt_studio.utils.identity import require_identity
from prompt_studio.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = ("name", "status", "global_prompt")


def update_project(
    *,
    user_id: str,
    project_id: str,
    data: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Update mutable fields on a project.

    Design rules:
    - Only whitelisted fields are mutable
    - A payload equal to the stored state is accepted (a flush resends
      every field) and still refreshes updated_at
    - Invariants always revalidated
    """
    require_identity(user_id)
    assert_project_fields(data)

    project = owned_project(user_id, project_id)

    if not project:
        raise UpdateError("Project not found", status_code=404)

    if "status" in data:
        assert_project_transition(from_status=project.status, to_status=data["status"])

    changed_fields: list[str] = []

    with transactional(UpdateError, "Failed to update project"):
        for field in ALLOWED_UPDATE_FIELDS:
            if field in data and getattr(project, field) != data[field]:
                setattr(project, field, data[field])
                changed_fields.append(field)

        project.touch()

        if changed_fields:
            log_action(
                action="project.update",
                actor_id=user_id,
                entity_type="project",
                entity_id=project.id,
                payload={"fields": changed_fields},
            )

    return normalize_project(project, include_sections=False)
