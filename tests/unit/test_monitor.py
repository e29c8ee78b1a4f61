"""Unit tests for the article progress monitor."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from semantic_pen.errors import RateLimitError
from semantic_pen.models.schemas import Article, GetArticleResponse
from semantic_pen.services.monitor import monitor_article


# Mark all tests as async
pytestmark = pytest.mark.anyio


def article_response(status: str, progress: int) -> GetArticleResponse:
    return GetArticleResponse(article=Article(
        id="abc",
        status=status,
        progress=progress,
        target_keyword="python",
    ))


class TestMonitorArticle:
    """Tests for polling an article until it finishes."""

    async def test_polls_until_completed(self):
        client = MagicMock()
        client.get_article = AsyncMock(side_effect=[
            article_response("pending", 0),
            article_response("processing", 50),
            article_response("completed", 100),
        ])
        seen = []

        with patch("semantic_pen.services.monitor.asyncio.sleep", AsyncMock()) as mock_sleep:
            article = await monitor_article(
                client, "abc", poll_interval=5, on_progress=lambda a: seen.append(a.progress)
            )

        assert article.is_completed
        assert seen == [0, 50, 100]
        assert client.get_article.await_count == 3
        assert mock_sleep.await_count == 2
        mock_sleep.assert_awaited_with(5)

    async def test_stops_on_failure(self):
        client = MagicMock()
        client.get_article = AsyncMock(side_effect=[
            article_response("processing", 10),
            article_response("failed", 10),
        ])

        with patch("semantic_pen.services.monitor.asyncio.sleep", AsyncMock()):
            article = await monitor_article(client, "abc")

        assert article.has_failed
        assert client.get_article.await_count == 2

    async def test_not_found(self):
        client = MagicMock()
        client.get_article = AsyncMock(return_value=GetArticleResponse(article=None))

        article = await monitor_article(client, "abc")

        assert article is None
        assert client.get_article.await_count == 1

    async def test_gives_up_after_max_attempts(self):
        client = MagicMock()
        client.get_article = AsyncMock(return_value=article_response("processing", 30))

        with patch("semantic_pen.services.monitor.asyncio.sleep", AsyncMock()) as mock_sleep:
            article = await monitor_article(client, "abc", max_attempts=3)

        assert article.is_in_progress
        assert client.get_article.await_count == 3
        assert mock_sleep.await_count == 2

    async def test_errors_propagate(self):
        client = MagicMock()
        client.get_article = AsyncMock(side_effect=RateLimitError(retry_after=2.0))

        with pytest.raises(RateLimitError):
            await monitor_article(client, "abc")

        assert client.get_article.await_count == 1
