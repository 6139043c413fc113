from prompt_studio.extensions import db
from .base import BaseModel

class Section(BaseModel):
    __tablename__ = "sections"

    project_id = db.Column(
        db.String(36),
        db.ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    name = db.Column(db.String(200), nullable=False)
    type = db.Column(db.String(50), nullable=False)  # hero, features, ..., custom
    description = db.Column(db.Text, nullable=False, default='')
    image_url = db.Column(db.String(2048), nullable=True)
    image_description = db.Column(db.Text, nullable=True)
    style_notes = db.Column(db.Text, nullable=True)
    animation_notes = db.Column(db.Text, nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    project = db.relationship("Project", back_populates="sections")

    __table_args__ = (
        db.Index("idx_section_project_order", "project_id", "order"),
    )
