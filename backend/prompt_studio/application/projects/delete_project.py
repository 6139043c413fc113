from prompt_studio.extensions import db
from prompt_studio.exceptions import UpdateError
from prompt_studio.application.queries import owned_project
from prompt_studio.utils.audit import log_action
from prompt_studio.utils.identity import require_identity
from prompt_studio.utils.transaction import transactional


def delete_project(
    *,
    user_id: str,
    project_id: str,
) -> None:
    """
    Hard-delete a project. Its sections go with it through the
    ``Project.sections`` delete-orphan cascade.

    Deleting an id the caller does not own (or that no longer exists) is a
    no-op, so a repeated delete is harmless.
    """
    require_identity(user_id)

    project = owned_project(user_id, project_id)

    if not project:
        return

    with transactional(UpdateError, "Failed to delete project"):
        db.session.delete(project)

        log_action(
            action="project.delete",
            actor_id=user_id,
            entity_type="project",
            entity_id=project_id,
        )
