import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    def __init__(self):
        self.PROJECT_NAME = "Lockbox API"
        self.PROJECT_VERSION = "1.0.0"

        # Database
        self.POSTGRES_USER = os.getenv("POSTGRES_USER", "lockbox")
        self.POSTGRES_PASSWORD = os.getenv("POSTGRES_PASSWORD", "lockbox")
        self.POSTGRES_DB = os.getenv("POSTGRES_DB", "lockbox")
        self.POSTGRES_HOST = os.getenv("POSTGRES_HOST", "localhost")
        self.POSTGRES_PORT = os.getenv("POSTGRES_PORT", "5432")

        self.DATABASE_URL = os.getenv("DATABASE_URL") or (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )
        self.DB_ECHO = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")

        # JWT
        self.JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "INSECURE_DEFAULT_KEY_PLEASE_CHANGE_ME")
        self.JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
        self.ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))

        # Password hashing
        self.BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 12))

        # Vaults
        self.DEFAULT_VAULT_NAME = os.getenv("DEFAULT_VAULT_NAME", "My Vault")

        # CORS
        self.CORS_ORIGINS = self._split_csv(os.getenv("CORS_ORIGINS", "*"))

    @staticmethod
    def _split_csv(value: str) -> list[str]:
        """Turn a comma separated env value into a list, dropping blanks."""
        return [part.strip() for part in value.split(",") if part.strip()]


settings = Settings()
