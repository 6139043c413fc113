"""
Caller side of the AI bridge: posts a compiled prompt to the generation
endpoint and hands back the text untouched. One attempt per call.
"""
from prompt_studio.compiler import compile_markdown
from prompt_studio.domain.entities import GenerationResult, Project
from prompt_studio.exceptions import GenerationError
from .api_session import ApiSession


class GenerationClient:
    def __init__(self, base_url: str, token=None, **session_kwargs):
        self.api = ApiSession(base_url, token, **session_kwargs)

    async def generate(self, prompt: str) -> GenerationResult:
        if not isinstance(prompt, str) or not prompt.strip():
            raise GenerationError("Prompt is required", status_code=400)

        data = await self.api.request_async(
            "POST",
            "/generate",
            json={"prompt": prompt},
            error_cls=GenerationError,
            auth_error_cls=GenerationError,
            message="Failed to generate content",
        )
        if not isinstance(data, dict) or "content" not in data:
            raise GenerationError("Malformed generation response")

        return GenerationResult(
            content=data["content"],
            model=data.get("model") or "",
            usage=data.get("usage") or {},
        )

    async def generate_for(self, project: Project) -> GenerationResult:
        return await self.generate(compile_markdown(project))
