import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "StayEase")
    # Core settings
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-me")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development").lower()
    DEBUG: bool = _as_bool(os.getenv("DEBUG", "false"))

    # Auth & Session
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "stayease_session")
    SESSION_MAX_AGE_DAYS: int = int(os.getenv("SESSION_MAX_AGE_DAYS", "30"))
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # Database ("sqlite://" keeps everything in memory)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./stayease.db")

    # Listing search
    PAGE_SIZE: int = int(os.getenv("PAGE_SIZE", "9"))
    MAX_PAGE_SIZE: int = int(os.getenv("MAX_PAGE_SIZE", "100"))

    # Reviews
    REVIEW_MIN_LENGTH: int = int(os.getenv("REVIEW_MIN_LENGTH", "5"))
    REVIEW_MAX_LENGTH: int = int(os.getenv("REVIEW_MAX_LENGTH", "500"))

    # Demo data bootstrap
    SEED_DEMO_DATA: bool = _as_bool(os.getenv("SEED_DEMO_DATA", "true"))
    DEMO_HOST_LOGIN: str = os.getenv("DEMO_HOST_LOGIN", "demo-host")
    DEMO_HOST_EMAIL: str = os.getenv("DEMO_HOST_EMAIL", "host@stayease.local")
    DEMO_HOST_PASSWORD: str = os.getenv("DEMO_HOST_PASSWORD", "demo12345")

    # Browser client origins, comma separated
    CORS_ORIGINS: list[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = _as_bool(os.getenv("RATE_LIMIT_ENABLED", "true"))
    RATE_LIMIT_AUTH: str = os.getenv("RATE_LIMIT_AUTH", "10/minute")
    RATE_LIMIT_WAITLIST: str = os.getenv("RATE_LIMIT_WAITLIST", "5/minute")

settings = Settings()
