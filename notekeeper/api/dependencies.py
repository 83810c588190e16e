"""Request Dependencies — principal extraction from the upstream auth gateway.

Invariants:
    - The principal id is an integer in [0, MAX_KEY] taken from the configured header
    - It is trusted as-is: token verification happened upstream
    - Missing or malformed header -> 401 before any manager runs
"""

from fastapi import HTTPException, Request, status

from notekeeper.config import get_settings
from notekeeper.core.domain_types import MAX_KEY, PrincipalId


def _unauthenticated(message: str) -> HTTPException:
    return HTTPException(
        status.HTTP_401_UNAUTHORIZED,
        detail={"error": {"code": "UNAUTHENTICATED", "message": message}},
    )


async def get_principal_id(request: Request) -> PrincipalId:
    """FastAPI dependency: verified principal id of the caller."""
    header = get_settings().principal_header
    raw = request.headers.get(header)
    if raw is None:
        raise _unauthenticated(f"missing {header} header")
    try:
        principal_id = int(raw.strip())
    except ValueError:
        raise _unauthenticated(f"malformed {header} header")
    if not 0 <= principal_id <= MAX_KEY:
        raise _unauthenticated(f"malformed {header} header")
    return PrincipalId(principal_id)
