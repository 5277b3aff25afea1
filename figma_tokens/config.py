"""Importer configuration models."""

import os
from typing import Any

from pydantic import BaseModel, Field, validator

from .tokens_logging import get_logger

logger = get_logger()

DEFAULT_API_URL = "https://api.figma.com/v1"

# The pages tokens are extracted from, keyed by token category
PAGE_NAMES: dict[str, str] = {
    "breakpoints": "Breakpoints",
    "colours": "Colours",
    "grids": "Grids",
    "icons": "Icons",
    "radii": "Radii",
    "shadows": "Shadows",
    "sizes": "Sizes",
    "spacing": "Spacing",
    "typography": "Typography",
}


class ImporterConfig(BaseModel):
    """Settings for one token import, with validation."""

    # Figma access
    access_token: str = Field(default="")
    file_key: str = Field(default="")
    version: str | None = Field(default=None)
    api_url: str = Field(default=DEFAULT_API_URL)

    # Conversion
    base_font_size: float = Field(default=16.0, gt=0)

    # Icon rendering
    icon_format: str = Field(default="svg")
    icon_scale: float = Field(default=1, gt=0, le=4)

    # Page lookup
    page_names: dict[str, str] = Field(default_factory=lambda: dict(PAGE_NAMES))

    @validator("page_names")
    def validate_page_names(cls, v: Any) -> dict[str, str]:
        missing = [key for key in PAGE_NAMES if key not in v]
        if missing:
            raise ValueError(f"Missing page names for: {', '.join(missing)}")
        return v

    @validator("api_url")
    def validate_api_url(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_env(cls, **overrides: Any) -> "ImporterConfig":
        """Create config from environment variables, then explicit overrides."""
        values: dict[str, Any] = {}
        env_vars = {
            "access_token": os.environ.get("FIGMA_ACCESS_TOKEN"),
            "file_key": os.environ.get("FIGMA_FILE_KEY"),
            "version": os.environ.get("FIGMA_FILE_VERSION"),
            "api_url": os.environ.get("FIGMA_API_URL"),
        }
        for key, value in env_vars.items():
            if value is not None:
                values[key] = value
        if values:
            logger.debug(f"Applied {len(values)} environment variables")

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
