"""Token import orchestrator.

Coordinates a complete import:
- Fetch the Figma file once
- Resolve one page per token category (aborting if any is missing)
- Run every extractor against its page
- Assemble the Tokens object
"""

import asyncio
import time

from .api import FigmaClient
from .config import ImporterConfig
from .errors import ConfigurationError, MissingPagesError
from .extractors import (
    get_breakpoints,
    get_colours,
    get_font_families,
    get_font_sizes,
    get_grid_styles,
    get_icons,
    get_letter_spacing,
    get_line_heights,
    get_radii,
    get_shadows,
    get_sizes,
    get_spacing,
    get_text_styles,
)
from .models import FigmaFile, FigmaNode
from .reporter import ErrorReporter
from .svg import SVGOptimizer
from .tokens import Tokens, Typography
from .tokens_logging import get_logger
from .tree import find_page

logger = get_logger()


class TokenImporter:
    """Imports design tokens from one Figma file."""

    def __init__(
        self,
        config: ImporterConfig,
        reporter: ErrorReporter | None = None,
        client: FigmaClient | None = None,
        optimizer: SVGOptimizer | None = None,
    ):
        """Initialize the importer.

        Args:
            config: Importer settings (token, file key, version, pages).
            reporter: Receives user-facing errors. Prints to stderr by default.
            client: Figma API client. Created from config when omitted.
            optimizer: SVG optimizer for icons.
        """
        self.config = config
        self.reporter = reporter or ErrorReporter()
        self.optimizer = optimizer or SVGOptimizer()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> FigmaClient:
        """Lazy-initialized Figma API client."""
        if self._client is None:
            if not self.config.access_token:
                raise ConfigurationError("Missing Figma access token")
            self._client = FigmaClient(self.config.access_token, base_url=self.config.api_url)
        return self._client

    def resolve_pages(self, document: FigmaNode) -> dict[str, FigmaNode]:
        """Find the page for every token category.

        Raises:
            MissingPagesError: If any page is missing. Every missing page is
                reported before raising.
        """
        pages: dict[str, FigmaNode] = {}
        missing: list[str] = []
        for key, page_name in self.config.page_names.items():
            canvas = find_page(document, page_name)
            if canvas is None:
                self.reporter.report(
                    f'Unable to find a page with the name "{page_name}" in the file.',
                    "- Please check that this page exists in the Figma file.",
                )
                missing.append(page_name)
                continue
            pages[key] = canvas

        if missing:
            raise MissingPagesError(missing)
        return pages

    async def extract(self, file: FigmaFile) -> Tokens:
        """Extract all tokens from an already fetched file."""
        pages = self.resolve_pages(file.document)
        base = self.config.base_font_size

        typography = Typography(
            fonts=get_font_families(pages["typography"], self.reporter),
            font_sizes=get_font_sizes(pages["typography"], base),
            line_heights=get_line_heights(pages["typography"], base),
            letter_spacing=get_letter_spacing(pages["typography"]),
        )
        tokens = Tokens(
            breakpoints=get_breakpoints(pages["breakpoints"], base),
            colours=get_colours(pages["colours"], file.styles),
            grid_styles=get_grid_styles(pages["grids"], file.styles, base),
            radii=get_radii(pages["radii"], base),
            shadows=get_shadows(pages["shadows"], file.styles),
            sizes=get_sizes(pages["sizes"], base),
            spacing=get_spacing(pages["spacing"], base),
            typography=typography,
            text_styles=get_text_styles(pages["typography"], file.styles, base),
        )
        tokens.icons = await get_icons(
            self.client,
            self.config.file_key,
            pages["icons"],
            reporter=self.reporter,
            optimizer=self.optimizer,
            image_format=self.config.icon_format,
            scale=self.config.icon_scale,
        )
        return tokens

    async def run(self) -> Tokens:
        """Fetch the file and extract its tokens.

        Raises:
            TokenImportError: On any abort condition; no partial token set
                is returned.
        """
        if not self.config.file_key:
            raise ConfigurationError("Missing Figma file key")

        start_time = time.time()
        try:
            file = await self.client.get_file(self.config.file_key, self.config.version)
            logger.info(f'Fetched "{file.name}" ({self.config.file_key})')
            tokens = await self.extract(file)
        finally:
            if self._owns_client and self._client is not None:
                await self._client.aclose()
                self._client = None

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Imported {tokens.total_tokens} tokens in {duration_ms:.0f}ms",
            extra={"duration_ms": duration_ms, "token_count": tokens.total_tokens},
        )
        return tokens

    def run_sync(self) -> Tokens:
        """Synchronous wrapper for run()."""
        return asyncio.run(self.run())


async def import_tokens(
    access_token: str,
    file_key: str,
    version: str | None = None,
    *,
    config: ImporterConfig | None = None,
    reporter: ErrorReporter | None = None,
    client: FigmaClient | None = None,
    optimizer: SVGOptimizer | None = None,
) -> Tokens:
    """Convenience function to import tokens from a Figma file.

    Args:
        access_token: Figma personal access token.
        file_key: Key of the Figma file.
        version: Optional file version; the latest version when omitted.
        config: Optional base settings; token, key and version override it.

    Returns:
        The extracted Tokens.
    """
    base = config or ImporterConfig()
    importer_config = base.copy(
        update={"access_token": access_token, "file_key": file_key, "version": version}
    )
    importer = TokenImporter(
        importer_config, reporter=reporter, client=client, optimizer=optimizer
    )
    return await importer.run()


async def extract_tokens(
    file: FigmaFile,
    client: FigmaClient,
    file_key: str,
    *,
    config: ImporterConfig | None = None,
    reporter: ErrorReporter | None = None,
    optimizer: SVGOptimizer | None = None,
) -> Tokens:
    """Extract tokens from an already fetched file.

    The file is not modified, so extracting twice yields equal tokens.
    ``client`` is only used to render icons.
    """
    importer_config = (config or ImporterConfig()).copy(update={"file_key": file_key})
    importer = TokenImporter(
        importer_config, reporter=reporter, client=client, optimizer=optimizer
    )
    return await importer.extract(file)


def import_tokens_sync(
    access_token: str, file_key: str, version: str | None = None, **kwargs
) -> Tokens:
    """Synchronous wrapper for import_tokens()."""
    return asyncio.run(import_tokens(access_token, file_key, version, **kwargs))


__all__ = [
    "TokenImporter",
    "extract_tokens",
    "import_tokens",
    "import_tokens_sync",
]
