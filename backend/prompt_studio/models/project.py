from prompt_studio.extensions import db
from .base import BaseModel
from .owner_mixin import OwnerMixin

class Project(BaseModel, OwnerMixin):
    __tablename__ = 'projects'

    name = db.Column(db.String(200), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='draft', index=True)
    global_prompt = db.Column(db.Text, nullable=False, default='')

    owner = db.relationship("User", back_populates="projects")

    # Relationship to Sections (ordered, cascade deletes)
    sections = db.relationship(
        "Section",
        back_populates="project",
        order_by="Section.order",
        cascade="all, delete-orphan"
    )
