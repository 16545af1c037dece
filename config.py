from typing import List

from pydantic_settings import BaseSettings
from pydantic import ConfigDict

class Settings(BaseSettings):
    PORT: int = 3001
    DATABASE_URL: str = ""
    FIREBASE_CREDENTIALS: str = "credentials.json"
    FIRESTORE_DATABASE_ID: str = "(default)"

    JWT_SECRET: str = "dev-only-change-me-before-deploying"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_DAYS: int = 7

    # Cookie checked before the Authorization header
    AUTH_COOKIE_NAME: str = "jwt_token"
    AUTH_COOKIE_SECURE: bool = False

    BCRYPT_ROUNDS: int = 10
    CORS_ORIGINS: List[str] = ["*"]

    # First director, created at startup when both are set
    BOOTSTRAP_DIRECTOR_NAME: str = "Director"
    BOOTSTRAP_DIRECTOR_PHONE: str = ""
    BOOTSTRAP_DIRECTOR_PASSWORD: str = ""

    model_config = ConfigDict(env_file='.env', extra='ignore')

settings = Settings()
