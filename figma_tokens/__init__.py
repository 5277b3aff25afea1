"""Design token import from Figma files.

This package extracts design tokens (breakpoints, colours, radii, shadows,
sizes, spacing, typography, grid and text styles, icons) from a Figma file
and normalizes them into a token object for a styling system.

Main components:
- models: Typed views of the Figma document tree and style registry
- tree: Node search within pages
- units: Pixel, color and shadow conversions to CSS values
- extractors: One extractor per token category
- tokens: The extracted token set
- importer: Orchestrates a complete import
"""

from .config import PAGE_NAMES, ImporterConfig
from .errors import (
    DocumentServiceError,
    ErrorCategory,
    IconOptimizationError,
    MissingFontsError,
    MissingPagesError,
    TokenImportError,
)
from .importer import TokenImporter, extract_tokens, import_tokens, import_tokens_sync
from .reporter import ErrorReporter
from .tokens import GridVariant, TextVariant, Tokens, Typography
from .tokens_logging import get_logger, setup_logging

__all__ = [
    # Import
    "TokenImporter",
    "import_tokens",
    "import_tokens_sync",
    "extract_tokens",
    # Config
    "ImporterConfig",
    "PAGE_NAMES",
    # Tokens
    "Tokens",
    "Typography",
    "GridVariant",
    "TextVariant",
    # Errors
    "ErrorReporter",
    "ErrorCategory",
    "TokenImportError",
    "MissingPagesError",
    "MissingFontsError",
    "IconOptimizationError",
    "DocumentServiceError",
    # Logging
    "setup_logging",
    "get_logger",
]
