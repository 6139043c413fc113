from typing import List
from prompt_studio.exceptions import UpdateError
from prompt_studio.application.queries import owned_project, project_sections
from prompt_studio.models.section import Section
from prompt_studio.utils.audit import log_action
from prompt_studio.utils.identity import require_identity
from prompt_studio.utils.transaction import transactional


def reorder_sections(
    *,
    user_id: str,
    project_id: str,
    section_ids: List[str],
) -> None:
    """
    Assign ``order = index`` for each id, one update per id.

    Updates are scoped to the project, so ids of other projects' sections
    simply match nothing.
    """
    require_identity(user_id)

    if not isinstance(section_ids, list) or not all(isinstance(i, str) for i in section_ids):
        raise UpdateError("section_ids must be a list of ids")

    project = owned_project(user_id, project_id)
    if not project:
        raise UpdateError("Project not found", status_code=404)

    with transactional(UpdateError, "Failed to reorder sections"):
        for index, section_id in enumerate(section_ids):
            (
                project_sections(project.id)
                .filter(Section.id == section_id)
                .update({Section.order: index}, synchronize_session=False)
            )

        project.touch()

        log_action(
            action="section.reorder",
            actor_id=user_id,
            entity_type="project",
            entity_id=project.id,
            payload={"count": len(section_ids)},
        )
