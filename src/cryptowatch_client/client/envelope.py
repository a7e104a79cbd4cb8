"""Response envelope handling shared by every endpoint.

Every API response is wrapped as ``{"result": ...}`` on success or
``{"error": "..."}`` on failure. This is the only place HTTP status codes are
interpreted.
"""

import logging
import math
from datetime import datetime
from typing import Any

import httpx
from pydantic import ValidationError

from cryptowatch_client.config import ClientConfig
from cryptowatch_client.errors import APIError, DecodeError, RateLimitError, TransportError
from cryptowatch_client.models import Allowance

logger = logging.getLogger(__name__)


def minutes_until_reset(
    retry_after: str | None = None, now: datetime | None = None
) -> int:
    """Estimate minutes until the request allowance resets.

    Uses the ``Retry-After`` header (in seconds) when the API sends one,
    otherwise assumes the allowance resets at the top of the hour.
    """
    if retry_after is not None:
        seconds = retry_after.strip()
        if seconds.isascii() and seconds.isdigit():
            return math.ceil(int(seconds) / 60)
    if now is None:
        now = datetime.now()
    return 60 - now.minute


def unwrap(response: httpx.Response) -> tuple[Any, Allowance | None]:
    """Classify a response and extract its ``result`` payload.

    Args:
        response: A fully-read HTTP response.

    Returns:
        Tuple of (result payload, allowance or None when not reported).

    Raises:
        DecodeError: If the body is not a JSON object, or a 200 body has no result.
        RateLimitError: If the status is 429.
        APIError: For any other non-200 status.
    """
    try:
        body = response.json()
    except ValueError as e:
        raise DecodeError(f"Response body is not valid JSON: {e}") from e

    if not isinstance(body, dict):
        raise DecodeError(
            f"Expected a JSON object at the top level, got {type(body).__name__}"
        )

    if response.status_code == 429:
        reset = minutes_until_reset(response.headers.get("Retry-After"))
        logger.warning(f"Rate limited (429), allowance resets in ~{reset}m")
        raise RateLimitError(reset)

    if response.status_code != 200:
        message = body.get("error")
        if not isinstance(message, str):
            message = f"unknown API error, status {response.status_code}"
        raise APIError(message, response.status_code)

    if "result" not in body:
        raise DecodeError("Response envelope has no 'result' field")

    allowance = None
    if isinstance(body.get("allowance"), dict):
        try:
            allowance = Allowance.model_validate(body["allowance"])
        except ValidationError as e:
            logger.warning(f"Ignoring malformed allowance in envelope: {e}")
        else:
            logger.debug(
                f"Allowance: cost={allowance.cost} remaining={allowance.remaining}"
            )

    return body["result"], allowance


class ApiRequester:
    """Issues GET requests against the configured base URL.

    Attributes:
        config: The immutable client configuration.
        last_allowance: Allowance reported by the most recent successful call.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the requester.

        Args:
            config: Client configuration (base URL, timeout, user agent).
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config
        headers = {"User-Agent": config.user_agent} if config.user_agent else None
        self.http = httpx.AsyncClient(
            timeout=config.timeout, headers=headers, transport=transport
        )
        self.last_allowance: Allowance | None = None

    def url(self, path: str) -> str:
        return self.config.base_url + path.lstrip("/")

    async def get(self, path: str) -> Any:
        """GET ``path`` and return the unwrapped ``result`` payload.

        Raises:
            TransportError: On connection, DNS, timeout or read failures.
        """
        url = self.url(path)
        logger.debug(f"GET {url}")
        try:
            response = await self.http.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        result, allowance = unwrap(response)
        if allowance is not None:
            self.last_allowance = allowance
        return result

    async def close(self) -> None:
        await self.http.aclose()
