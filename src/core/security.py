from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from core.exception.exceptions import UnauthorizedException

security_scheme = HTTPBearer(auto_error=False)


# --- identity ---
# The bearer credential is the identity provider's opaque user key.
# Nothing here verifies it: a present key means "identified".
def get_current_user_id(
    auth_header: HTTPAuthorizationCredentials | None = Depends(security_scheme),
) -> str | None:
    if auth_header is None or not auth_header.credentials.strip():
        return None
    return auth_header.credentials.strip()


def get_required_user_id(
    user_id: str | None = Depends(get_current_user_id),
) -> str:
    if user_id is None:
        raise UnauthorizedException()
    return user_id
