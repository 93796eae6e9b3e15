import os

from dotenv import load_dotenv

from remix.errors import ConfigError

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_setting(name: str, default: str) -> int:
    raw = os.environ.get(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _log_level_setting(name: str, default: str) -> str:
    raw = os.environ.get(name, default).upper()
    if raw not in LOG_LEVELS:
        raise ConfigError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return raw


class Config:
    def __init__(self):
        # Document context
        self.DOCUMENT_ORIGIN = os.environ.get("DOCUMENT_ORIGIN", "https://www.amazon.com")
        self.MAX_LISTINGS = _int_setting("MAX_LISTINGS", "100")

        # Error tracking
        self.SENTRY_DSN = os.environ.get("SENTRY_DSN", "")
        self.ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

        # Application settings
        self.DEBUG = os.environ.get("DEBUG", "false").lower() == "true"
        self.LOG_LEVEL = _log_level_setting("LOG_LEVEL", "INFO")

    @property
    def has_sentry(self) -> bool:
        return bool(self.SENTRY_DSN)

# Create an instance
config = Config()
