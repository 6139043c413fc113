from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt_identity
from prompt_studio.extensions import db
from prompt_studio.models.user import User

def active_user_required(fn):
    """
    Resolves the JWT identity to an active user and exposes its id as
    ``g.current_user_id``. Must sit below ``@jwt_required()``.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        identity = get_jwt_identity()
        if not identity:
            return jsonify({"error": "Unauthorized"}), 401

        user = db.session.get(User, identity)
        if not user or not user.is_active:
            return jsonify({"error": "Unauthorized"}), 401

        g.current_user_id = user.id
        return fn(*args, **kwargs)
    return wrapper
