# inventory_api/core/config.py
import os


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    API_V1_STR: str = os.getenv("API_V1_STR", "/api/v1")
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Inventory Backend")
    VERSION: str = "1.0.0"

    # Base de datos
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./data/inventory.db")

    # JWT
    SECRET_KEY: str = os.getenv("SECRET_KEY", "super-secret-key-cambia-en-produccion")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "10080"))
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # CORS
    CORS_ORIGINS: list = [
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
    ]

    # Inventario
    EXPIRING_WINDOW_DAYS: int = int(os.getenv("EXPIRING_WINDOW_DAYS", "10"))
    DASHBOARD_MONTHS: int = int(os.getenv("DASHBOARD_MONTHS", "6"))
    RECENT_TRANSACTIONS_LIMIT: int = int(os.getenv("RECENT_TRANSACTIONS_LIMIT", "5"))

    # Environment
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = _get_bool("DEBUG", False)
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


settings = Settings()
