# forum/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Forum API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # CORS origins for frontend
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Database (single SQLite file by default)
    database_url: str = os.getenv("DATABASE_URL", "sqlite://forum.db")
    # Local development only: create missing tables on startup. Deployments run `aerich upgrade`.
    db_generate_schemas: bool = _flag("DB_GENERATE_SCHEMAS")

    # Sessions / tokens
    jwt_secret: str = os.getenv("JWT_SECRET", "dev-secret-change-me-before-deploying-this")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

    # Argon2 time cost, fixed for every stored hash
    password_hash_rounds: int = int(os.getenv("PASSWORD_HASH_ROUNDS", "3"))

    # Default admin created on first run (skipped when ADMIN_PASSWORD is unset)
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@example.com")
    admin_password: str | None = os.getenv("ADMIN_PASSWORD")

    # Seed subjects, inserted once when the subjects table is empty
    default_subjects: list[str] = [
        "Mathematics",
        "Science",
        "History",
        "English",
        "Programming",
        "Other",
    ]

settings = Settings()  # Instantiate configuration
