"""Application configuration loaded from environment variables.

Provides type-safe access to configuration with sensible defaults.
Production defaults are restrictive for security.
"""

import os
from pathlib import Path


def get_cors_origins() -> list[str]:
    """Get allowed CORS origins from environment.

    Environment variable: CORS_ORIGINS (comma-separated)
    Default: localhost ports 3000-3005 for development
    """
    default_origins = ",".join(f"http://localhost:{port}" for port in range(3000, 3006))
    origins_str = os.getenv("CORS_ORIGINS", default_origins)
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


def get_cors_allow_credentials() -> bool:
    """Get CORS allow_credentials setting.

    Environment variable: CORS_ALLOW_CREDENTIALS
    Default: true for development
    """
    return os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"


# Restricted HTTP methods - only what the API actually uses
CORS_ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]

# Restricted headers - only what's needed for the API
CORS_ALLOWED_HEADERS = [
    "Accept",
    "Accept-Language",
    "Content-Type",
    "X-Requested-With",
]


def is_production() -> bool:
    """Check if running in production environment."""
    return os.getenv("ENVIRONMENT", "development").lower() == "production"


def get_log_level() -> str:
    """Get root log level name.

    Environment variable: LOG_LEVEL
    Default: INFO
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_seed_path() -> Path | None:
    """Get optional card file imported once at startup.

    Environment variable: LEDGER_SEED_PATH
    Default: unset (ledger starts empty)
    """
    value = os.getenv("LEDGER_SEED_PATH", "").strip()
    return Path(value).expanduser() if value else None


def get_max_box() -> int:
    """Get highest Leitner box used when grading answers as correct/incorrect.

    Environment variable: LEITNER_MAX_BOX
    Default: 5

    Raises:
        ValueError: If the value is not a non-negative integer
    """
    raw = os.getenv("LEITNER_MAX_BOX", "5")
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"Invalid LEITNER_MAX_BOX: '{raw}'. Must be an integer") from None
    if value < 0:
        raise ValueError(f"Invalid LEITNER_MAX_BOX: {value}. Must be >= 0")
    return value
