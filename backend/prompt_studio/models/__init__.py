from .user import User
from .project import Project
from .section import Section
from .audit_log import AuditLog

__all__ = ["User", "Project", "Section", "AuditLog"]
