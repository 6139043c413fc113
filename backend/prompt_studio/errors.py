from flask import jsonify, current_app
from prompt_studio.exceptions import PromptStudioError
from prompt_studio.extensions import jwt

def register_error_handlers(app):
    @app.errorhandler(PromptStudioError)
    def handle_prompt_studio_error(error):
        if error.status_code >= 500:
            current_app.logger.error(f"{type(error).__name__}: {error.message}")
        response = jsonify({"error": error.message})
        response.status_code = error.status_code
        return response

    @app.errorhandler(404)
    def handle_not_found(error):
        return jsonify({"error": "Not found"}), 404

def register_jwt_handlers():
    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return jsonify({"error": "Unauthorized"}), 401

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return jsonify({"error": "Unauthorized"}), 401

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return jsonify({"error": "Token has expired"}), 401
