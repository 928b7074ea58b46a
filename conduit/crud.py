import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from . import models
from .errors import UserConflictError, UserStoreError

logger = logging.getLogger(__name__)


def get_user_by_id(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def get_user_by_token(db: Session, token: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.token == token).first()


def get_profile(db: Session, username: str):
    """Return the public `(username, bio, image)` row for `username`, or None."""
    return (
        db.query(models.User.username, models.User.bio, models.User.image)
        .filter(models.User.username == username)
        .first()
    )


def create_user(
    db: Session,
    username: str,
    email: str,
    password_hash: str,
    token: str,
) -> models.User:
    """Insert a new user row.

    Raises:
        UserConflictError: if the username or email is already taken.
        UserStoreError: if the commit fails for any other reason.
    """
    user = models.User(
        username=username,
        email=email,
        password=password_hash,
        token=token,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise UserConflictError("Username or email already taken") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise UserStoreError("Database commit failed") from exc

    db.refresh(user)
    logger.info("Created user id=%s username=%s", user.id, user.username)
    return user
