from .list_projects import list_projects
from .get_project import get_project
from .create_project import create_project
from .update_project import update_project
from .delete_project import delete_project
from .duplicate_project import duplicate_project

__all__ = [
    "list_projects",
    "get_project",
    "create_project",
    "update_project",
    "delete_project",
    "duplicate_project",
]
