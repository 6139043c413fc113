# prompt_studio/api/v1/sections.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from prompt_studio.application.sections import (
    update_section,
    delete_section,
    duplicate_section,
)
from prompt_studio.utils.decorators import active_user_required
from . import v1_bp


@v1_bp.route("/sections/<section_id>", methods=["PUT"])
@jwt_required()
@active_user_required
def update_section_route(section_id):
    data = request.get_json(silent=True) or {}

    section = update_section(user_id=g.current_user_id, section_id=section_id, data=data)
    return jsonify(section), 200

@v1_bp.route("/sections/<section_id>", methods=["DELETE"])
@jwt_required()
@active_user_required
def delete_section_route(section_id):
    delete_section(user_id=g.current_user_id, section_id=section_id)
    return jsonify({"message": "Section deleted successfully"}), 200

@v1_bp.route("/sections/<section_id>/duplicate", methods=["POST"])
@jwt_required()
@active_user_required
def duplicate_section_route(section_id):
    section = duplicate_section(user_id=g.current_user_id, section_id=section_id)
    return jsonify(section), 201
