from werkzeug.security import generate_password_hash, check_password_hash
from prompt_studio.extensions import db
from prompt_studio.utils.timestamps import iso
from .base import BaseModel

class User(BaseModel):
    """Owner of projects. Identity behind every JWT."""
    __tablename__ = 'users'

    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)

    is_active = db.Column(db.Boolean, default=True)

    projects = db.relationship(
        "Project",
        back_populates="owner",
        cascade="all, delete-orphan"
    )

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "created_at": iso(self.created_at),
        }
