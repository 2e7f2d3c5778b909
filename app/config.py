import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Process configuration, read from the environment (and .env) at startup."""

    def __init__(self):
        self.database_url = os.getenv("DATABASE", "sqlite:///./filedrop.db")
        self.secret_key = os.getenv("SECRET_KEY", "change-me")
        self.algorithm = os.getenv("ALGORITHM", "HS256")
        self.access_token_expire_minutes = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
        self.storage_dir = os.getenv("STORAGE_DIR", "uploads")
        self.port = int(os.getenv("PORT", "5000"))
        self.cors_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
        self.bcrypt_rounds = int(os.getenv("BCRYPT_ROUNDS", "12"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def token_ttl(self) -> timedelta:
        return timedelta(minutes=self.access_token_expire_minutes)
