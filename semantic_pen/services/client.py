"""SemanticPen API client.

This module sends article requests to the SemanticPen API and turns the
responses into typed models or classified SemanticPenError exceptions.
"""

import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx

from semantic_pen.config import Configuration
from semantic_pen.errors import (
    APIError,
    AuthenticationError,
    NetworkError,
    RateLimitError,
    SemanticPenError,
    ValidationError,
)
from semantic_pen.models.schemas import GenerateArticleResponse, GetArticleResponse


logger = logging.getLogger(__name__)

USER_AGENT = "semantic-pen-python-sdk/1.0.0"

ARTICLES_PATH = "/api/articles"

ResponseT = TypeVar("ResponseT", GenerateArticleResponse, GetArticleResponse)


class SemanticPenClient:
    """Async client for the SemanticPen article API.

    The client holds no per-request state, so several requests may be awaited
    concurrently on one instance. Use it as an async context manager, or call
    aclose() when done, to release pooled connections.

    Example:
        async with SemanticPenClient.from_api_key("your-api-key") as client:
            response = await client.generate_article("artificial intelligence")
            article = await client.get_article(response.first_article_id)
    """

    def __init__(
        self,
        configuration: Configuration,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Create a client.

        Args:
            configuration: API key, base URL and timeout to use
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.configuration = configuration
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(configuration.timeout),
            headers={
                "Authorization": f"Bearer {configuration.api_key}",
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT,
            },
            transport=transport,
        )

    @classmethod
    def from_api_key(cls, api_key: str) -> "SemanticPenClient":
        """Create a client for the production API with the default timeout."""
        return cls(Configuration(api_key=api_key))

    async def __aenter__(self) -> "SemanticPenClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def generate_article(
        self,
        target_keyword: str,
        project_name: Optional[str] = None,
    ) -> GenerateArticleResponse:
        """Start generating an article for a keyword.

        Args:
            target_keyword: Keyword the article should target (surrounding whitespace is stripped)
            project_name: Optional project to file the article under

        Returns:
            GenerateArticleResponse with the ids of the created articles

        Raises:
            ValidationError: If the keyword is blank, or the API rejects the input
            SemanticPenError: Any other classified failure
        """
        keyword = target_keyword.strip()
        if not keyword:
            raise ValidationError("Target keyword cannot be empty")

        body: Dict[str, Any] = {"target_keyword": keyword}
        if project_name is not None:
            body["project_name"] = project_name

        return await self._request("POST", ARTICLES_PATH, GenerateArticleResponse, body=body)

    async def get_article(self, article_id: str) -> GetArticleResponse:
        """Fetch the status and content of an article.

        Args:
            article_id: Identifier returned by generate_article

        Returns:
            GetArticleResponse whose article is None if the API did not return one

        Raises:
            ValidationError: If the id is blank
            SemanticPenError: Any other classified failure
        """
        if not article_id.strip():
            raise ValidationError("Article ID cannot be empty")

        return await self._request("GET", f"{ARTICLES_PATH}/{article_id}", GetArticleResponse)

    async def _request(
        self,
        method: str,
        path: str,
        response_type: Type[ResponseT],
        body: Optional[Dict[str, Any]] = None,
    ) -> ResponseT:
        """Send one request and decode its response."""
        try:
            url = httpx.URL(self.configuration.base_url).join(path)
        except httpx.InvalidURL as e:
            raise NetworkError("Invalid URL", cause=e) from e

        content = None
        if body is not None:
            try:
                content = json.dumps(body, allow_nan=False).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise ValidationError("Failed to encode request body") from e

        logger.debug(f"{method} {url}")

        try:
            response = await self._http.request(method, url, content=content)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise NetworkError(f"Network request failed: {e}", cause=e) from e

        _raise_for_status(response)

        try:
            return response_type.from_dict(response.json())
        except (TypeError, ValueError) as e:
            logger.warning(f"Could not decode {response_type.__name__}: {e}")
            raise APIError(
                f"Failed to decode response: {e}",
                status_code=response.status_code,
            ) from e


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the SemanticPenError matching a non-2xx response.

    Args:
        response: Completed HTTP response
    """
    status = response.status_code
    if 200 <= status <= 299:
        return

    error: SemanticPenError
    if status == 401:
        error = AuthenticationError(status_code=status)
    elif status == 429:
        error = RateLimitError(
            status_code=status,
            retry_after=_parse_retry_after(response.headers.get("Retry-After")),
        )
    elif 400 <= status <= 499:
        error = ValidationError(_parse_error_message(response) or "Client error", status_code=status)
    elif 500 <= status <= 599:
        error = APIError(_parse_error_message(response) or "Server error", status_code=status)
    else:
        error = NetworkError(f"Unexpected status code: {status}", status_code=status)

    logger.warning(f"HTTP {status} -> {error.error_code}: {error.message}")
    raise error


def _parse_error_message(response: httpx.Response) -> Optional[str]:
    """Extract the "message" (or "error") string from a JSON error body.

    Returns:
        The message, or None if the body is not a JSON object carrying one
    """
    try:
        data = json.loads(response.content)
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None

    for field in ("message", "error"):
        value = data.get(field)
        if isinstance(value, str):
            return value

    return None


def _parse_retry_after(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None
