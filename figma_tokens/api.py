"""Figma REST API client used to fetch files and render icons."""

from typing import Any

import aiohttp

from .config import DEFAULT_API_URL
from .errors import DocumentServiceError
from .models import FigmaFile
from .tokens_logging import get_logger

logger = get_logger("api")

DEFAULT_TIMEOUT = 60.0

_STATUS_HINTS = {
    401: "Invalid Figma access token. Check FIGMA_ACCESS_TOKEN.",
    403: "Access denied. The token has no permission to view this file.",
    404: "File or version not found. Check the file key and version.",
    429: "Rate limit exceeded. Please wait before importing again.",
}


class FigmaClient:
    """Async client for the two Figma endpoints the importer needs.

    Example:
        >>> async with FigmaClient(token) as client:
        ...     file = await client.get_file("AbC123")
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: aiohttp.ClientSession | None = None,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session

    @property
    def session(self) -> aiohttp.ClientSession:
        """Lazy-initialized HTTP session, created inside the running loop."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={
                    "X-Figma-Token": self.access_token,
                    "Accept": "application/json",
                },
            )
        return self._session

    async def __aenter__(self) -> "FigmaClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()

    async def _get(
        self, url: str, params: dict[str, str] | None = None, as_json: bool = True
    ) -> Any:
        try:
            async with self.session.get(url, params=params) as response:
                response.raise_for_status()
                if as_json:
                    return await response.json(content_type=None)
                return await response.text()
        except aiohttp.ClientResponseError as e:
            raise DocumentServiceError(
                f"Figma API returned status {e.status}",
                url=url,
                status_code=e.status,
                suggestion=_STATUS_HINTS.get(e.status),
            ) from e
        except TimeoutError as e:
            raise DocumentServiceError("Request to Figma timed out", url=url) from e
        except aiohttp.ClientError as e:
            raise DocumentServiceError(f"Request to Figma failed: {e}", url=url) from e

    async def get_file(self, file_key: str, version: str | None = None) -> FigmaFile:
        """Fetch a file's document tree and style registry.

        Args:
            file_key: The file key from the Figma URL.
            version: Optional version id; the latest version when omitted.

        Returns:
            The parsed FigmaFile.
        """
        params = {"version": version} if version else None
        logger.debug(f"Fetching file {file_key} (version: {version or 'latest'})")
        data = await self._get(f"{self.base_url}/files/{file_key}", params)
        return FigmaFile.from_dict(data)

    async def get_images(
        self,
        file_key: str,
        ids: list[str],
        format: str = "svg",
        scale: float = 1,
    ) -> dict[str, str | None]:
        """Render nodes to images in a single batched request.

        Returns:
            Mapping of node id to image URL. The URL is None for nodes
            Figma failed to render.
        """
        url = f"{self.base_url}/images/{file_key}"
        params = {"ids": ",".join(ids), "format": format, "scale": str(scale)}
        data = await self._get(url, params)
        if data.get("err"):
            raise DocumentServiceError(f"Figma failed to render images: {data['err']}", url=url)
        return data.get("images") or {}

    async def fetch_text(self, url: str) -> str:
        """Download a rendered image (e.g. SVG markup) as text."""
        return await self._get(url, as_json=False)
