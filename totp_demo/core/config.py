# Centralised application configuration
# (environment variables, constants, timeouts).

import os

def env_int(name: str, default: int, minimum: int = 1) -> int:
    # Fail at startup rather than on the first request
    value = int(os.getenv(name, str(default)))
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value

class Settings:
    APP_NAME = "TOTP Demo"
    ISSUER = os.getenv("TOTP_ISSUER", "totp-issuer@example.com")
    HOST = os.getenv("TOTP_HOST", "0.0.0.0")
    PORT = env_int("TOTP_PORT", 8899)
    TIMEOUT_SECONDS = env_int("TOTP_TIMEOUT_SECONDS", 15)

    ACCOUNT_PREFIX = "account-"
    ACCOUNT_NAME_LENGTH = env_int("ACCOUNT_NAME_LENGTH", 10)

    QR_WIDTH = env_int("QR_WIDTH", 256)
    QR_HEIGHT = env_int("QR_HEIGHT", 256)

    # Accepted steps either side of the current one (30s each)
    VALID_WINDOW = env_int("TOTP_VALID_WINDOW", 1, minimum=0)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    EVENT_LOG_FILE = os.getenv("EVENT_LOG_FILE", "events.csv")

settings = Settings()
