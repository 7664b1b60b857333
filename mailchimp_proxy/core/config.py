# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Centralised settings — read from env vars once."""
import os


def _mailchimp_base_url(api_key: str) -> str:
    # API keys end with the data-center suffix, e.g. "abc123-us6".
    dc = api_key.rsplit("-", 1)[1] if "-" in api_key else "us1"
    return f"https://{dc}.api.mailchimp.com/3.0"


class Settings:
    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "mailchimp-proxy")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8000"))
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./mailchimp.db")
    MAILCHIMP_API_KEY: str = os.getenv("MAILCHIMP_API_KEY", "")
    MAILCHIMP_BASE_URL: str = os.getenv(
        "MAILCHIMP_BASE_URL", _mailchimp_base_url(os.getenv("MAILCHIMP_API_KEY", ""))
    )
    MAILCHIMP_TIMEOUT: float = float(os.getenv("MAILCHIMP_TIMEOUT", "10.0"))
    CORS_ORIGINS: list = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))


settings = Settings()
