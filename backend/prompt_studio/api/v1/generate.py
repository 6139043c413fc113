from flask import request, jsonify
from flask_jwt_extended import jwt_required
from prompt_studio.exceptions import GenerationError
from prompt_studio.services.generation import GenerationService
from prompt_studio.utils.decorators import active_user_required
from . import v1_bp


@v1_bp.route("/generate", methods=["POST"])
@jwt_required()
@active_user_required
def generate():
    data = request.get_json(silent=True) or {}
    prompt = data.get("prompt")

    if not prompt or not isinstance(prompt, str):
        raise GenerationError("Prompt is required", status_code=400)

    result = GenerationService.from_app().generate(prompt)
    return jsonify(result.to_dict()), 200
