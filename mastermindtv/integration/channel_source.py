"""
Remote channel document source.

Fetches the channel list published at the origin URL (a JSON array served
as plain text) and converts it into ChannelRecord instances. Knows nothing
about caching or filtering.
"""

import json
import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class OriginError(Exception):
    """The origin could not be reached or returned an unusable document."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.original_error = original_error


class ChannelRecord(BaseModel):
    """One channel entry from the origin document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    name: str
    group: Optional[str] = None
    logo: Optional[str] = None
    url: Optional[str] = None

    @field_validator("group", "logo", "url", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty strings as absent values."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def genres(self) -> list[str]:
        return [self.group] if self.group else []


class ChannelSource:
    """
    Single-shot client for the origin channel document.

    No retries: every failure surfaces immediately as OriginError and the
    caller decides what to do with it.
    """

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._http_client = http_client

    async def fetch(self) -> list[ChannelRecord]:
        """Fetch and parse the channel document."""
        logger.info(f"Fetching channels from URL: {self.url}")

        if self._http_client is not None:
            response = await self._get(self._http_client)
        else:
            client_kwargs: dict[str, Any] = {}
            if self.timeout is not None:
                client_kwargs["timeout"] = self.timeout
            async with httpx.AsyncClient(**client_kwargs) as client:
                response = await self._get(client)

        if not response.is_success:
            raise OriginError(
                f"Failed to fetch: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        return parse_channels(response.text)

    async def _get(self, client: httpx.AsyncClient) -> httpx.Response:
        try:
            return await client.get(self.url, follow_redirects=True)
        except httpx.HTTPError as e:
            raise OriginError(f"Failed to fetch: {e!s}", original_error=e) from e


def parse_channels(text: str) -> list[ChannelRecord]:
    """
    Parse the origin document into records, preserving document order.

    Entries that cannot be converted are skipped. A non-empty document in
    which no entry converts is rejected as malformed.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integers and runaway nesting
        raise OriginError(f"Invalid channel document: {e}", original_error=e) from e

    if not isinstance(data, list):
        raise OriginError(
            f"Invalid channel document: expected a JSON array, got {type(data).__name__}"
        )

    records: list[ChannelRecord] = []
    for index, item in enumerate(data):
        try:
            records.append(ChannelRecord.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Skipping channel entry {index}: {e.error_count()} validation error(s)")

    if data and not records:
        raise OriginError("Invalid channel document: no usable channel entries")

    return records
