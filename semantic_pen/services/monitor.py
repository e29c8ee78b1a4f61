"""Article progress monitor.

This module polls the API until an article finishes. The client itself never
polls; this is the caller-side loop used by the command-line tool.
"""

import asyncio
import logging
from typing import Callable, Optional

from semantic_pen.models.schemas import Article
from semantic_pen.services.client import SemanticPenClient


logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 5.0
DEFAULT_MAX_ATTEMPTS = 60


async def monitor_article(
    client: SemanticPenClient,
    article_id: str,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    on_progress: Optional[Callable[[Article], None]] = None,
) -> Optional[Article]:
    """Poll an article until it is completed or has failed.

    Errors raised by the client propagate unchanged; nothing is retried.

    Args:
        client: Client used for the lookups
        article_id: Article to watch
        poll_interval: Seconds to wait between lookups
        max_attempts: Maximum number of lookups before giving up
        on_progress: Called with the article after every lookup

    Returns:
        The finished (completed or failed) Article, the last seen Article if
        max_attempts ran out, or None if the article was not found
    """
    article = None
    for attempt in range(1, max_attempts + 1):
        response = await client.get_article(article_id)
        article = response.article

        if article is None:
            logger.info(f"Article {article_id} not found")
            return None

        logger.debug(f"Article {article_id} attempt {attempt}: {article.status} {article.progress}%")
        if on_progress is not None:
            on_progress(article)

        if article.is_completed or article.has_failed:
            return article

        if attempt < max_attempts:
            await asyncio.sleep(poll_interval)

    logger.info(f"Gave up on article {article_id} after {max_attempts} attempts")
    return article
