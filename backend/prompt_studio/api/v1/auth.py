from flask import request, jsonify
from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError
from prompt_studio.extensions import db
from prompt_studio.models.user import User
from . import v1_bp


def _credentials():
    data = request.get_json(silent=True)
    if not data:
        return None, None, (jsonify({"error": "Invalid request body"}), 400)

    email = data.get("email")
    password = data.get("password")

    if not email or not password:
        return None, None, (jsonify({"error": "Email and password required"}), 400)

    return email.strip().lower(), password, None


@v1_bp.route("/auth/register", methods=["POST"])
def register():
    email, password, error = _credentials()
    if error:
        return error

    user = User()
    user.email = email
    user.set_password(password)

    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({"error": "Email already registered"}), 409

    return jsonify(user.to_dict()), 201


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    email, password, error = _credentials()
    if error:
        return error

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        return jsonify({"error": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "User account disabled"}), 403

    access_token = create_access_token(identity=user.id)

    return jsonify({"access_token": access_token}), 200
