import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.orm import Session

from . import crud
from .database import get_db

logger = logging.getLogger(__name__)

AUTH_SCHEMES = ("token", "bearer")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Token"},
    )


def parse_authorization(header: Optional[str]) -> Optional[str]:
    """Extract the token from `Token <value>` or `Bearer <value>`."""
    scheme, value = get_authorization_scheme_param(header)
    value = value.strip()
    if scheme.lower() not in AUTH_SCHEMES or not value:
        return None
    return value


def validate_token(
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> int:
    """Resolve the calling user's id from the request credential.

    Protected routes depend on this; a 401 is raised before the handler
    runs when the credential is missing or unknown.
    """
    token = parse_authorization(authorization)
    if token is None:
        raise _unauthorized("Authentication required")

    user = crud.get_user_by_token(db, token)
    if user is None:
        logger.warning("Rejected request with unknown token")
        raise _unauthorized("Invalid token")
    return user.id
