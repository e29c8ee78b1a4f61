"""
SemanticPen SDK for Python

Generate AI-written articles with the SemanticPen API.

Example:
    >>> from semantic_pen import SemanticPenClient
    >>>
    >>> async with SemanticPenClient.from_api_key("your-api-key") as client:
    ...     response = await client.generate_article(
    ...         "artificial intelligence",
    ...         project_name="My Blog",
    ...     )
    ...     result = await client.get_article(response.first_article_id)
    ...     if result.article:
    ...         print(result.article.status, result.article.progress)
"""

import logging

from .config import Configuration, load_config
from .errors import (
    SemanticPenError,
    ValidationError,
    AuthenticationError,
    RateLimitError,
    APIError,
    NetworkError,
)
from .models import Article, GenerateArticleResponse, GetArticleResponse
from .services import SemanticPenClient, monitor_article

# Applications decide where library logs go; stay silent until they do
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    "Configuration",
    "load_config",
    "SemanticPenClient",
    "monitor_article",
    "Article",
    "GenerateArticleResponse",
    "GetArticleResponse",
    "SemanticPenError",
    "ValidationError",
    "AuthenticationError",
    "RateLimitError",
    "APIError",
    "NetworkError",
]
