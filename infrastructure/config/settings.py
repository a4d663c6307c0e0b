"""
Environment-specific deployment settings.

Small defaults for development; prod gets more memory and a longer timeout.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings for the API stack."""

    environment: str = "dev"
    aws_region: str = "eu-west-2"
    log_level: str = "INFO"

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 15

    # Bulk import limit passed through to the function (10 MiB).
    max_import_bytes: int = 10 * 1024 * 1024

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("AWS_REGION", "eu-west-2")
        log_level = os.environ.get("LOG_LEVEL", "INFO")

        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                log_level=log_level,
                lambda_memory_mb=512,
                lambda_timeout_seconds=30,
            )

        return cls(environment=env, aws_region=region, log_level=log_level)
