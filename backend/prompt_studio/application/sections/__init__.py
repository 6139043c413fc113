from .create_section import create_section
from .update_section import update_section
from .delete_section import delete_section
from .duplicate_section import duplicate_section
from .reorder_sections import reorder_sections

__all__ = [
    "create_section",
    "update_section",
    "delete_section",
    "duplicate_section",
    "reorder_sections",
]
