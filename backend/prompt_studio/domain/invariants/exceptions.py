from prompt_studio.exceptions import PromptStudioError


class InvariantViolation(PromptStudioError):
    status_code = 400
