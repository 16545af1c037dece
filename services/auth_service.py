from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
from fastapi import Request
from config import settings
from errors import Conflict, InternalError, InvalidCredentials, Unauthenticated
from models import Identity
import logging

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    if not isinstance(password, str) or len(password) == 0:
        raise ValueError("Password must be a non-empty string")
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(user_id: str, role: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "role": role,
        "iat": now,
        "exp": now + timedelta(days=settings.JWT_EXPIRES_DAYS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Identity:
    try:
        claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise Unauthenticated("Token Expired")
    except jwt.InvalidTokenError:
        raise Unauthenticated("Invalid Token")

    if not claims.get("id") or not claims.get("role"):
        raise Unauthenticated("Invalid Token")
    return Identity(id=str(claims["id"]), role=str(claims["role"]))


def extract_token(request: Request) -> str | None:
    """Cookie first, then the second word of the Authorization header."""
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if token:
        return token
    parts = request.headers.get("Authorization", "").split(" ")
    if len(parts) > 1 and parts[1]:
        return parts[1]
    return None


def public_user(user_data):
    """User record without the password hash"""
    return {k: v for k, v in user_data.items() if k != "password"}


def create_account(store, name, phone_number, password, role, conflict_message="User already exists"):
    """Create a user after checking phone uniqueness; returns the public record."""
    try:
        existing = store.users.find_one(phoneNumber=phone_number)
    except Exception as e:
        logger.error(f"Error looking up user by phone: {str(e)}")
        raise InternalError(str(e))
    if existing:
        raise Conflict(conflict_message)

    user_data = {
        "name": name,
        "phoneNumber": phone_number,
        "password": hash_password(password),
        "role": role,
        "isActive": True,
        "createdAt": datetime.now(timezone.utc),
    }
    try:
        user_data["id"] = store.users.insert(user_data)
    except Exception as e:
        logger.error(f"Error saving user document: {str(e)}")
        raise InternalError(str(e))

    logger.info(f"Created {role} account: {user_data['id']}")
    return public_user(user_data)


def login_user(store, phone_number, password):
    """Verify credentials and return (token, public user record)."""
    try:
        user_data = store.users.find_one(phoneNumber=phone_number)
    except Exception as e:
        logger.error(f"Error looking up user by phone: {str(e)}")
        raise InternalError(str(e))

    if not user_data:
        logger.warning("Login failed: unknown phone number")
        raise InvalidCredentials("Invalid User")
    if not verify_password(password, user_data.get("password", "")):
        logger.warning(f"Login failed: wrong password for {user_data['id']}")
        raise InvalidCredentials("Invalid Password")

    token = create_access_token(user_data["id"], user_data["role"])
    logger.info(f"User logged in: {user_data['id']}")
    return token, public_user(user_data)


def bootstrap_director_if_needed(store):
    """Create the first director from settings when none exists yet.

    Runs at startup. Does nothing unless both BOOTSTRAP_DIRECTOR_PHONE and
    BOOTSTRAP_DIRECTOR_PASSWORD are set, or when any director is already stored.
    """
    phone_number = settings.BOOTSTRAP_DIRECTOR_PHONE.strip()
    password = settings.BOOTSTRAP_DIRECTOR_PASSWORD
    if not phone_number or not password:
        return None

    if store.users.find_one(role="director") or store.users.find_one(phoneNumber=phone_number):
        return None

    user_data = {
        "name": settings.BOOTSTRAP_DIRECTOR_NAME,
        "phoneNumber": phone_number,
        "password": hash_password(password),
        "role": "director",
        "isActive": True,
        "createdAt": datetime.now(timezone.utc),
    }
    user_data["id"] = store.users.insert(user_data)
    logger.info(f"Bootstrapped director account: {user_data['id']}")
    return public_user(user_data)
