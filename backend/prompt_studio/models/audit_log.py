# prompt_studio/models/audit_log.py
from sqlalchemy import event
from prompt_studio.extensions import db
from prompt_studio.utils.timestamps import iso
from .base import BaseModel


class AuditLog(BaseModel):
    """
    Append-only record of one mutation. Section entries also carry their
    project id so a project's full history is one indexed lookup.
    """
    __tablename__ = "audit_logs"

    __table_args__ = (
        db.Index("ix_audit_project_created", "project_id", "created_at"),
        db.Index("ix_audit_entity", "entity_type", "entity_id"),
    )

    actor_id = db.Column(db.String(36), nullable=False, index=True)
    action = db.Column(db.String(50), nullable=False)

    entity_type = db.Column(db.String(20), nullable=False)  # project | section
    entity_id = db.Column(db.String(36), nullable=False)
    project_id = db.Column(db.String(36), nullable=True)

    payload = db.Column(db.JSON, nullable=False, default=dict)

    @classmethod
    def project_history(cls, project_id):
        return (
            cls.query
            .filter_by(project_id=project_id)
            .order_by(cls.created_at.asc())
            .all()
        )

    def to_dict(self):
        return {
            "id": self.id,
            "actor_id": self.actor_id,
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "project_id": self.project_id,
            "payload": self.payload,
            "created_at": iso(self.created_at),
        }


@event.listens_for(AuditLog, "before_update")
@event.listens_for(AuditLog, "before_delete")
def prevent_audit_mutation(mapper, connection, target):
    raise RuntimeError("Audit logs are immutable")
