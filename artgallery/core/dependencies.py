from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from artgallery.db.session import SessionLocal
from artgallery.core.auth_utils import decode_token
from artgallery.schemas.user import Principal

# auto_error=False so a missing header is a 401, not FastAPI's 403
security = HTTPBearer(auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Principal:
    """Verify the bearer token and return the caller's ``{id, nickname}``."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )

    payload = decode_token(credentials.credentials)

    return Principal(id=str(payload["sub"]), nickname=payload["nickname"])
