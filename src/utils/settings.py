"""Runtime settings read from the Lambda environment."""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Application settings with conservative defaults."""

    environment: str = "dev"
    log_level: str = "INFO"

    # Uploads larger than this are rejected before parsing (10 MiB).
    max_import_bytes: int = 10 * 1024 * 1024

    # Reported for accounts that have no transactions yet.
    default_currency: str = "USD"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            max_import_bytes=int(
                os.environ.get("MAX_IMPORT_BYTES", str(10 * 1024 * 1024))
            ),
            default_currency=os.environ.get("DEFAULT_CURRENCY", "USD"),
        )
