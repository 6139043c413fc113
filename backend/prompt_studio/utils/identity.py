from typing import Optional
from prompt_studio.exceptions import AuthError


def require_identity(user_id: Optional[str], error_cls=AuthError) -> str:
    """
    Guards every gateway operation: no identity, no store access.
    """
    if not user_id:
        raise error_cls("Not authenticated", status_code=401)
    return user_id
