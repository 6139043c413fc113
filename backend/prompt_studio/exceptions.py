class PromptStudioError(Exception):
    """
    Base class for every error that may cross the store / API boundary.

    Each error carries the HTTP status it maps to, so the Flask error
    handlers and the HTTP gateway can translate in both directions.
    """

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AuthError(PromptStudioError):
    status_code = 401


class FetchError(PromptStudioError):
    status_code = 500


class UpdateError(PromptStudioError):
    status_code = 400


class GenerationError(PromptStudioError):
    status_code = 500
