"""
Thin wrapper around a ``requests.Session`` shared by the HTTP gateway and
the generation client: base URL, bearer token, timeout, and translation of
transport and HTTP failures into domain errors.
"""
import asyncio
from typing import Any, Callable, Optional, Union

import requests

from prompt_studio.config import API_TIMEOUT_SECONDS
from prompt_studio.exceptions import AuthError, PromptStudioError

TokenSource = Union[str, Callable[[], Optional[str]], None]


class ApiSession:
    def __init__(
        self,
        base_url: str,
        token: TokenSource = None,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = API_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self._token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    def token(self) -> Optional[str]:
        if callable(self._token):
            return self._token()
        return self._token

    def require_token(self, auth_error_cls=AuthError) -> str:
        token = self.token()
        if not token:
            raise auth_error_cls("Not authenticated", status_code=401)
        return token

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        error_cls=PromptStudioError,
        message: str = "Request failed",
        auth_error_cls=AuthError,
        allow_missing: bool = False,
    ) -> Any:
        token = self.require_token(auth_error_cls)

        try:
            resp = self.session.request(
                method,
                f"{self.base_url}{path}",
                json=json,
                headers={"Authorization": f"Bearer {token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise error_cls(message) from exc

        if resp.status_code == 401:
            raise auth_error_cls(_error_message(resp, "Unauthorized"), status_code=401)

        if resp.status_code == 404 and allow_missing:
            return None

        if not resp.ok:
            raise error_cls(_error_message(resp, message), status_code=resp.status_code)

        if not resp.content:
            return None
        return resp.json()

    async def request_async(self, method: str, path: str, **kwargs) -> Any:
        return await asyncio.to_thread(self.request, method, path, **kwargs)


def _error_message(resp, fallback: str) -> str:
    try:
        body = resp.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return fallback
