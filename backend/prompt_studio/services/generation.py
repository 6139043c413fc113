"""
Generation endpoint side of the AI bridge.

Wraps the OpenAI Responses API: one call per request, the fixed Prompt
Architect instructions, the compiled prompt as user input. No retries.
"""
from typing import Any, Dict, Optional

from flask import current_app
from openai import OpenAI

from prompt_studio.domain.entities import GenerationResult
from prompt_studio.exceptions import GenerationError
from prompt_studio.prompts.system_prompt import SYSTEM_PROMPT


def _usage_dict(usage) -> Dict[str, Any]:
    if usage is None:
        return {}
    if isinstance(usage, dict):
        return usage
    if hasattr(usage, "model_dump"):
        return usage.model_dump()
    return dict(vars(usage))


class GenerationService:
    def __init__(
        self,
        model_name: str,
        *,
        timeout: float | None = None,
        client: Optional[Any] = None,
        instructions: str = SYSTEM_PROMPT,
    ):
        self.model_name = model_name
        self.instructions = instructions
        if client is None:
            client_kwargs: Dict[str, Any] = {"max_retries": 0}
            if timeout is not None:
                client_kwargs["timeout"] = timeout
            client = OpenAI(**client_kwargs)
        self._client = client

    @classmethod
    def from_app(cls, app=None) -> "GenerationService":
        app = app or current_app
        service = app.extensions.get("generation_service")
        if service is None:
            service = cls(
                app.config["OPENAI_MODEL"],
                timeout=app.config.get("OPENAI_TIMEOUT"),
            )
            app.extensions["generation_service"] = service
        return service

    def generate(self, prompt: str) -> GenerationResult:
        if not isinstance(prompt, str) or not prompt.strip():
            raise GenerationError("Prompt is required", status_code=400)

        try:
            resp = self._client.responses.create(
                model=self.model_name,
                instructions=self.instructions,
                input=[
                    {
                        "role": "user",
                        "content": [{"type": "input_text", "text": prompt}],
                    }
                ],
            )
        except Exception as exc:
            current_app.logger.error(f"Error in generate call: {exc!r}")
            raise GenerationError("Internal server error", status_code=500) from exc

        return GenerationResult(
            content=getattr(resp, "output_text", "") or "",
            model=getattr(resp, "model", None) or self.model_name,
            usage=_usage_dict(getattr(resp, "usage", None)),
        )
