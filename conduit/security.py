"""Credential utilities: password hashing, secure comparison, opaque tokens.

All helpers are coroutines. Hashing is deliberately slow, so the passlib
calls are pushed to Starlette's thread pool instead of blocking the loop.
"""

import secrets

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from .config import settings

pwd_context = CryptContext(schemes=settings.password_schemes, deprecated="auto")


async def hash_string(plaintext: str) -> str:
    return await run_in_threadpool(pwd_context.hash, plaintext)


async def string_is_a_match(plaintext: str, hashed: str) -> bool:
    if not hashed:
        return False
    try:
        return await run_in_threadpool(pwd_context.verify, plaintext, hashed)
    except ValueError:
        # Not a hash this context can identify.
        return False


async def dummy_verify() -> bool:
    """Spend the same work as a real verify when there is no stored hash."""
    return await run_in_threadpool(pwd_context.dummy_verify)


async def generate_token() -> str:
    return secrets.token_urlsafe(settings.token_bytes)
