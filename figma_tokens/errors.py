"""Structured error types for the token importer.

Every failure that aborts an import is a ``TokenImportError`` carrying a
category, a human-readable message and an actionable suggestion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Categories of import errors for organization and handling."""

    DOCUMENT = "document"  # Required pages or nodes missing from the file
    TYPOGRAPHY = "typography"  # Required font roles missing
    ICONS = "icons"  # Icon rendering or optimization failures
    SERVICE = "service"  # Figma API, network issues
    CONFIGURATION = "configuration"  # Missing token, invalid config


@dataclass
class TokenImportError(Exception):
    """Base class for structured import errors with recovery suggestions.

    Attributes:
        category: Error category for grouping.
        message: Human-readable error message.
        suggestion: Optional actionable recovery suggestion.
        details: Optional additional details dict.
    """

    category: ErrorCategory
    message: str
    suggestion: str | None = None
    details: dict[str, Any] | None = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Initialize the exception with the message."""
        super().__init__(self.message)

    def format(self, use_color: bool = True) -> str:
        """Render the error as a block of terminal lines.

        List details, such as the missing pages or font roles, are joined
        on one line: ``  pages: Radii, Sizes``.
        """

        def paint(text: str, code: str) -> str:
            return f"\033[{code}m{text}\033[0m" if use_color else text

        lines = [f"{paint('Error:', '91')} {self.message}"]
        if self.suggestion:
            lines.append(f"{paint('Suggestion:', '96')} {self.suggestion}")
        for key, value in (self.details or {}).items():
            if isinstance(value, list | tuple):
                value = ", ".join(str(item) for item in value)
            lines.append(paint(f"  {key}: {value}", "2"))
        return "\n".join(lines)

    def __str__(self) -> str:
        """Plain rendering, without color codes."""
        return self.format(use_color=False)


class MissingPagesError(TokenImportError):
    """Raised when one or more required pages are absent from the file."""

    def __init__(self, page_names: list[str]):
        quoted = ", ".join(f'"{name}"' for name in page_names)
        super().__init__(
            category=ErrorCategory.DOCUMENT,
            message=f"Unable to find required page(s) in the file: {quoted}",
            suggestion="Please check that these pages exist in the Figma file.",
            details={"pages": page_names},
        )


class MissingFontsError(TokenImportError):
    """Raised when the "body" or "heading" font role is not defined."""

    def __init__(self, roles: list[str], prefix: str = "font-"):
        names = ", ".join(f'"{prefix}{role}"' for role in roles)
        super().__init__(
            category=ErrorCategory.TYPOGRAPHY,
            message=f"Required font(s) not found in \"Typography\" page: {', '.join(roles)}",
            suggestion=f"Please add text element(s) named {names}.",
            details={"roles": roles},
        )


class IconOptimizationError(TokenImportError):
    """Raised when an icon's SVG markup cannot be optimized."""

    def __init__(self, icon_name: str, reason: str):
        super().__init__(
            category=ErrorCategory.ICONS,
            message=f"Error optimising SVG for icon \"{icon_name}\": {reason}",
            suggestion="Check that the icon component renders to valid SVG in Figma.",
            details={"icon": icon_name},
        )


class DocumentServiceError(TokenImportError):
    """Raised when the Figma API or an image download fails."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        suggestion: str | None = None,
    ):
        details: dict[str, Any] = {}
        if url:
            details["url"] = url
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            category=ErrorCategory.SERVICE,
            message=message,
            suggestion=suggestion
            or "Check the access token, file key and your network connection.",
            details=details or None,
        )


class ConfigurationError(TokenImportError):
    """Error in importer settings."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            category=ErrorCategory.CONFIGURATION,
            message=message,
            suggestion=suggestion
            or "Set FIGMA_ACCESS_TOKEN and FIGMA_FILE_KEY or pass them explicitly.",
        )
