# prompt_studio/api/v1/projects.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from prompt_studio.application.projects import (
    list_projects,
    get_project,
    create_project,
    update_project,
    delete_project,
    duplicate_project,
)
from prompt_studio.application.sections import create_section, reorder_sections
from prompt_studio.compiler import compile_markdown, build_json_export, export_filename
from prompt_studio.domain.entities import Project
from prompt_studio.utils.decorators import active_user_required
from . import v1_bp


# ------------------------
# Projects
# ------------------------

@v1_bp.route("/projects", methods=["GET"])
@jwt_required()
@active_user_required
def list_projects_route():
    return jsonify(list_projects(user_id=g.current_user_id))

@v1_bp.route("/projects", methods=["POST"])
@jwt_required()
@active_user_required
def create_project_route():
    data = request.get_json(silent=True) or {}

    project = create_project(user_id=g.current_user_id, name=data.get("name"))
    return jsonify(project), 201

@v1_bp.route("/projects/<project_id>", methods=["GET"])
@jwt_required()
@active_user_required
def get_project_route(project_id):
    project = get_project(user_id=g.current_user_id, project_id=project_id)
    if project is None:
        return jsonify({"error": "Project not found"}), 404
    return jsonify(project)

@v1_bp.route("/projects/<project_id>", methods=["PUT"])
@jwt_required()
@active_user_required
def update_project_route(project_id):
    data = request.get_json(silent=True) or {}

    project = update_project(user_id=g.current_user_id, project_id=project_id, data=data)
    return jsonify(project), 200

@v1_bp.route("/projects/<project_id>", methods=["DELETE"])
@jwt_required()
@active_user_required
def delete_project_route(project_id):
    delete_project(user_id=g.current_user_id, project_id=project_id)
    return jsonify({"message": "Project deleted successfully"}), 200

@v1_bp.route("/projects/<project_id>/duplicate", methods=["POST"])
@jwt_required()
@active_user_required
def duplicate_project_route(project_id):
    project = duplicate_project(user_id=g.current_user_id, project_id=project_id)
    return jsonify(project), 201

@v1_bp.route("/projects/<project_id>/export", methods=["GET"])
@jwt_required()
@active_user_required
def export_project_route(project_id):
    fmt = request.args.get("format", "markdown")
    if fmt not in ("markdown", "json"):
        return jsonify({"error": "format must be 'markdown' or 'json'"}), 400

    data = get_project(user_id=g.current_user_id, project_id=project_id)
    if data is None:
        return jsonify({"error": "Project not found"}), 404

    project = Project.from_wire(data)
    content = compile_markdown(project) if fmt == "markdown" else build_json_export(project)

    return jsonify({
        "filename": export_filename(project, fmt),
        "format": fmt,
        "content": content,
    })


# ------------------------
# Sections of a project
# ------------------------

@v1_bp.route("/projects/<project_id>/sections", methods=["POST"])
@jwt_required()
@active_user_required
def create_section_route(project_id):
    data = request.get_json(silent=True) or {}

    section = create_section(user_id=g.current_user_id, project_id=project_id, data=data)
    return jsonify(section), 201

@v1_bp.route("/projects/<project_id>/sections/reorder", methods=["POST"])
@jwt_required()
@active_user_required
def reorder_sections_route(project_id):
    data = request.get_json(silent=True) or {}

    reorder_sections(
        user_id=g.current_user_id,
        project_id=project_id,
        section_ids=data.get("section_ids"),
    )
    return jsonify({"message": "Sections reordered"}), 200
