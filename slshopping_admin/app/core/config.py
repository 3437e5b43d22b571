"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the console can be
started locally without any configuration.  In a production deployment
you should override these via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "SL Shopping Admin")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "slshopping.db")

    # Directory where uploaded product images are stored.  It is served
    # under ``/uploads`` by the application.
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")

    # Upper bound for an uploaded product image, in bytes.
    max_image_size: int = int(os.getenv("MAX_IMAGE_SIZE", str(1024 * 1024)))

    allowed_image_types: List[str] = field(
        default_factory=lambda: _split_csv(
            os.getenv("ALLOWED_IMAGE_TYPES", "image/jpeg,image/png,image/gif")
        )
    )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
