import math
from errors import InternalError, NotFound
from services.auth_service import public_user
import logging

logger = logging.getLogger(__name__)


def _matches(user_data, needle):
    return (
        needle in (user_data.get("name") or "").lower()
        or needle in (user_data.get("phoneNumber") or "").lower()
    )


def list_users(store, page=1, limit=25, search="", role=""):
    """One page of users, newest first.

    ``search`` matches a case-insensitive substring of the name or the phone
    number. ``role`` restricts to one role when set.
    """
    try:
        users = store.users.find(role=role) if role else store.users.all()
    except Exception as e:
        logger.error(f"Error fetching users: {str(e)}")
        raise InternalError(str(e))

    if search:
        needle = search.lower()
        users = [u for u in users if _matches(u, needle)]

    users.sort(key=lambda u: u["createdAt"], reverse=True)
    start = (page - 1) * limit
    return {
        "users": [public_user(u) for u in users[start:start + limit]],
        "totalPages": math.ceil(len(users) / limit),
        "currentPage": page,
    }


def toggle_user_active(store, user_id):
    # Read-modify-write; concurrent toggles are not serialized
    try:
        user_data = store.users.get(user_id)
    except Exception as e:
        raise InternalError(str(e))
    if not user_data:
        raise NotFound("User not found")

    is_active = not user_data.get("isActive", True)
    try:
        store.users.update(user_id, {"isActive": is_active})
    except Exception as e:
        logger.error(f"Error updating user {user_id}: {str(e)}")
        raise InternalError(str(e))
    return is_active
