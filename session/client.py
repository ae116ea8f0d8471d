"""HTTP client for communicating with the conversion service."""

import asyncio
import uuid
from typing import Optional, Sequence

import httpx

from common.constants import (
    CONVERT_ENDPOINT,
    HEADER_PROCESSED_IMAGES,
    HEADER_REQUEST_ID,
    HEADER_SKIPPED_FILES,
    HEADER_TOTAL_FILES,
    UPLOAD_FIELD_NAME,
)
from common.logging_config import get_logger
from session.exceptions import TransportError
from session.models import ConversionStats, FileEntry
from session.schemas import ConversionErrorResponse

logger = get_logger(__name__)


class ConverterClient:
    """Async HTTP client for the conversion service. One attempt per request, no retries."""

    def __init__(self, base_url: str, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize converter client.

        Args:
            base_url: Service base URL (e.g., "http://localhost:8000")
            timeout: Request timeout in seconds, None to wait indefinitely
            transport: Optional transport override (testing)
        """
        self.base_url = base_url.rstrip('/')
        self.session = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport
        )
        logger.info(f"Initialized ConverterClient [base_url={self.base_url}]")

    def build_multipart(self, entries: Sequence[FileEntry]) -> list:
        """
        Build multipart file parts, one per entry, in selection order.

        Content is read here, at submission time, with blocking reads;
        post_files calls this from a worker thread.

        Args:
            entries: Selected files

        Returns:
            List of (field_name, (filename, content)) tuples for httpx
        """
        parts = []
        total = len(entries)
        for index, entry in enumerate(entries, start=1):
            logger.debug(
                f"Adding file {index}/{total}: {entry.name} ({entry.size / 1024 / 1024:.2f} MB)"
            )
            parts.append((UPLOAD_FIELD_NAME, (entry.name, entry.read())))
        return parts

    async def post_files(self, entries: Sequence[FileEntry],
                         request_id: Optional[str] = None) -> httpx.Response:
        """
        POST the files to the conversion endpoint as a single multipart body.

        Args:
            entries: Selected files, sent in order under one shared field
            request_id: Correlation ID sent as X-Request-ID (generated if None)

        Returns:
            HTTP response with the body fully read

        Raises:
            TransportError: If the service is unreachable or the request times out
            OSError: If a selected file can no longer be read
        """
        request_id = request_id or str(uuid.uuid4())
        files = await asyncio.to_thread(self.build_multipart, entries)

        logger.debug(
            f"Making request: POST {CONVERT_ENDPOINT} with {len(files)} file(s) [request_id={request_id}]"
        )
        try:
            response = await self.session.post(
                CONVERT_ENDPOINT,
                files=files,
                headers={HEADER_REQUEST_ID: request_id}
            )
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: POST {CONVERT_ENDPOINT} error={e!r} [request_id={request_id}]")
            raise TransportError(
                f"Request to the conversion service at {self.base_url} timed out. "
                f"The server may be overloaded.\n\nError: {e}"
            ) from e
        except httpx.TransportError as e:
            logger.error(f"Network error: POST {CONVERT_ENDPOINT} error={e!r} [request_id={request_id}]")
            raise TransportError(
                f"Failed to connect to the conversion service at {self.base_url}. "
                f"Make sure the backend is running.\n\nError: {e}"
            ) from e

        logger.debug(
            f"Response received: POST {CONVERT_ENDPOINT} status={response.status_code} [request_id={request_id}]"
        )
        return response

    def describe_error(self, response: httpx.Response) -> str:
        """
        Map a failed response to a user-facing message.

        Uses the server's error text when the body carries one; any other body
        falls back to a generic message.

        Args:
            response: Non-success HTTP response

        Returns:
            User-friendly error message
        """
        detail = None
        try:
            detail = ConversionErrorResponse.model_validate_json(response.content).message()
        except ValueError:  # includes pydantic ValidationError
            logger.debug(f"Unparseable error body (status={response.status_code})")

        if detail:
            return f"Conversion failed: {detail}"
        return f"Conversion failed: Unknown error (HTTP {response.status_code})"

    def parse_stats(self, headers: httpx.Headers) -> ConversionStats:
        """Read informational processed/total/skipped counts from response headers."""
        return ConversionStats.from_headers(
            headers,
            HEADER_PROCESSED_IMAGES,
            HEADER_TOTAL_FILES,
            HEADER_SKIPPED_FILES,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.session.aclose()
