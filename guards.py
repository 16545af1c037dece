"""Request guards.

Every protected route runs ``authenticate`` and then ``authorize``, in that
order. A failure in either raises and the route handler never runs.
"""
from typing import Iterable

from fastapi import Depends, Request

from errors import Forbidden, Unauthenticated
from models import Identity
from services.auth_service import decode_access_token, extract_token


def authenticate(request: Request) -> Identity:
    # A missing header is reported separately from a missing or unusable token
    if "authorization" not in request.headers:
        raise Unauthenticated("Invalid JWT")

    token = extract_token(request)
    if not token:
        raise Unauthenticated("Token missing")

    return decode_access_token(token)


def authorize(identity: Identity, allowed_roles: Iterable[str]) -> Identity:
    if identity.role not in allowed_roles:
        raise Forbidden("Access Denied")
    return identity


def require_roles(*roles: str):
    """Dependency that admits only the given roles.

    The role set is fixed at route registration time.
    """
    allowed = frozenset(roles)

    def guard(identity: Identity = Depends(authenticate)) -> Identity:
        return authorize(identity, allowed)

    return guard
