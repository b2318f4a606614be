"""Async HTTP retrieval and decoding of remote images."""

from __future__ import annotations

import asyncio
import logging
from io import BytesIO

import httpx
from PIL import Image, UnidentifiedImageError

from colortally.config.settings import Settings
from colortally.imgproc.color_extract import PixelGrid

logger = logging.getLogger(__name__)


class ImageFetchError(RuntimeError):
    """Raised when an image URL cannot be retrieved or decoded."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class ImageFetcher:
    """Downloads images over HTTP(S) and decodes them into pixel grids."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._client = httpx.AsyncClient(
            timeout=settings.request_timeout,
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
            transport=transport,
        )

    async def __aenter__(self) -> ImageFetcher:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def fetch_bytes(self, url: str) -> bytes:
        """Return the response body for ``url``."""

        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise ImageFetchError(url, f"Timed out fetching image: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise ImageFetchError(
                url,
                f"Server returned HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ImageFetchError(url, f"{type(exc).__name__}: {exc}") from exc
        logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return response.content

    async def fetch_pixels(self, url: str) -> PixelGrid:
        """Fetch ``url`` and decode it into an RGB pixel grid."""

        body = await self.fetch_bytes(url)
        return await asyncio.to_thread(self._decode, url, body)

    @staticmethod
    def _decode(url: str, body: bytes) -> PixelGrid:
        try:
            with Image.open(BytesIO(body)) as img:
                return PixelGrid.from_image(img)
        except UnidentifiedImageError as exc:
            raise ImageFetchError(url, "Response is not a supported image format") from exc
        except Image.DecompressionBombError as exc:
            raise ImageFetchError(url, f"Image rejected: {exc}") from exc
        except (OSError, ValueError) as exc:
            raise ImageFetchError(url, f"Failed to decode image: {exc}") from exc
