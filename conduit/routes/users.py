import asyncio
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from .. import crud, schemas, security
from ..auth import validate_token
from ..database import get_db
from ..errors import UserConflictError, UserStoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])

INVALID_CREDENTIALS = "Invalid credentials"


@router.get(
    "/user",
    response_model=schemas.UserResponse,
    responses={
        401: {"model": schemas.MessageResponse},
        404: {"model": schemas.MessageResponse},
    },
)
def get_current_user(
    user_id: int = Depends(validate_token),
    db: Session = Depends(get_db),
):
    """Return the authenticated caller's own account."""
    user = crud.get_user_by_id(db, user_id)
    if user is None:
        # The token resolved but the row has since gone away.
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return {"user": {"email": user.email, "username": user.username, "token": user.token}}


@router.post(
    "/users",
    response_model=schemas.UserResponse,
    responses={
        400: {"model": schemas.MessageResponse},
        409: {"model": schemas.MessageResponse},
        500: {"model": schemas.MessageResponse},
    },
)
async def sign_up(payload: schemas.SignUpRequest, db: Session = Depends(get_db)):
    """Register a new account.

    The token and the password hash do not depend on each other, so both are
    produced concurrently before the single insert. The response is built
    from those values rather than re-reading the row.
    """
    fields = payload.user
    token, password_hash = await asyncio.gather(
        security.generate_token(),
        security.hash_string(fields.password),
    )

    try:
        await run_in_threadpool(
            crud.create_user,
            db,
            fields.username,
            fields.email,
            password_hash,
            token,
        )
    except UserConflictError:
        logger.warning("Sign-up rejected, duplicate username or email")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username or email already taken",
        )
    except UserStoreError:
        logger.exception("Sign-up failed in the user store")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error during user creation.",
        )

    return {"user": {"username": fields.username, "email": fields.email, "token": token}}


@router.post(
    "/users/login",
    response_model=schemas.UserResponse,
    responses={
        400: {"model": schemas.MessageResponse},
        401: {"model": schemas.MessageResponse},
    },
)
async def login(payload: schemas.LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for the account's token.

    An unknown email and a wrong password produce the same 401 body.
    """
    fields = payload.user
    user = await run_in_threadpool(crud.get_user_by_email, db, fields.email)
    if user is None:
        matched = await security.dummy_verify()
    else:
        matched = await security.string_is_a_match(fields.password, user.password)
    if user is None or not matched:
        logger.warning("Failed login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )

    return {"user": {"username": user.username, "token": user.token, "email": user.email}}


@router.put("/user")
async def update_user(payload: Any = Body(default=None)):
    # Passthrough: the body is echoed back and nothing is persisted.
    return payload


@router.get(
    "/profiles/{username}",
    response_model=schemas.ProfileResponse,
    responses={404: {"model": schemas.MessageResponse}},
)
def get_profile(username: str, db: Session = Depends(get_db)):
    profile = crud.get_profile(db, username)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return {"profile": {"username": profile.username, "bio": profile.bio, "image": profile.image}}
