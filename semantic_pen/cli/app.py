"""semantic_pen - command-line tool

This module wraps SemanticPenClient in a click CLI with two commands:
"generate" starts an article and follows its progress, "get" prints an
existing article.
"""

import asyncio
from typing import Optional

import click

from semantic_pen.config import (
    API_KEY_ENV,
    BASE_URL_ENV,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    TIMEOUT_ENV,
    Configuration,
)
from semantic_pen.errors import (
    APIError,
    AuthenticationError,
    NetworkError,
    RateLimitError,
    SemanticPenError,
    ValidationError,
)
from semantic_pen.logging_config import setup_logging, logger
from semantic_pen.models.schemas import Article
from semantic_pen.services.client import SemanticPenClient
from semantic_pen.services.monitor import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_POLL_INTERVAL,
    monitor_article,
)


CONTENT_PREVIEW_LENGTH = 200

ERROR_LABELS = {
    ValidationError: "Validation Error",
    AuthenticationError: "Authentication Error",
    RateLimitError: "Rate Limit Error",
    APIError: "API Error",
    NetworkError: "Network Error",
}


def print_article(article: Article) -> None:
    """Print the details of an article, with a short content preview."""
    click.echo("Article Details:")
    click.echo(f"   ID: {article.id}")
    click.echo(f"   Title: {article.title or 'No title'}")
    click.echo(f"   Target Keyword: {article.target_keyword}")
    click.echo(f"   Project: {article.project_name or 'No project'}")
    click.echo(f"   Status: {article.status}")
    click.echo(f"   Progress: {article.progress}%")

    if article.created_at:
        click.echo(f"   Created: {article.created_at.isoformat()}")
    if article.updated_at:
        click.echo(f"   Updated: {article.updated_at.isoformat()}")

    if article.content:
        click.echo("---")
        click.echo("Content Preview:")
        click.echo(article.content[:CONTENT_PREVIEW_LENGTH])
        remaining = len(article.content) - CONTENT_PREVIEW_LENGTH
        if remaining > 0:
            click.echo(f"... ({remaining} more characters)")


def report_error(error: SemanticPenError) -> None:
    label = ERROR_LABELS.get(type(error), "Error")
    click.echo(f"{label}: {error.message}", err=True)
    if isinstance(error, RateLimitError) and error.retry_after is not None:
        click.echo(f"   Retry after: {error.retry_after} seconds", err=True)


async def run_generate(
    config: Configuration,
    keyword: str,
    project_name: Optional[str],
    wait: bool,
    poll_interval: float,
    max_attempts: int,
) -> int:
    async with SemanticPenClient(config) as client:
        try:
            response = await client.generate_article(keyword, project_name=project_name)
            click.echo(f"Generation request sent: {response.message}")

            article_id = response.first_article_id
            if article_id is None:
                click.echo("No article ID received", err=True)
                return 1

            click.echo(f"Article ID: {article_id}")
            if not wait:
                return 0

            click.echo("Monitoring article progress...")
            article = await monitor_article(
                client,
                article_id,
                poll_interval=poll_interval,
                max_attempts=max_attempts,
                on_progress=lambda a: click.echo(f"Progress: {a.progress}% | Status: {a.status}"),
            )
        except SemanticPenError as e:
            report_error(e)
            return 1

    if article is None:
        click.echo("Article not found", err=True)
        return 1
    if article.has_failed:
        click.echo(f"Article generation failed (status: {article.status})", err=True)
        return 1
    if not article.is_completed:
        click.echo("Timeout: article generation is taking longer than expected", err=True)
        return 1

    click.echo("Article completed")
    print_article(article)
    return 0


async def run_get(config: Configuration, article_id: str) -> int:
    async with SemanticPenClient(config) as client:
        try:
            response = await client.get_article(article_id)
        except SemanticPenError as e:
            report_error(e)
            return 1

    if response.article is None:
        click.echo("Article not found", err=True)
        return 1

    print_article(response.article)
    return 0


@click.group()
@click.option(
    "--api-key",
    envvar=API_KEY_ENV,
    default=None,
    help=f"SemanticPen API key (defaults to ${API_KEY_ENV})"
)
@click.option(
    "--base-url",
    envvar=BASE_URL_ENV,
    default=DEFAULT_BASE_URL,
    help="Base URL of the SemanticPen API"
)
@click.option(
    "--timeout",
    envvar=TIMEOUT_ENV,
    type=float,
    default=DEFAULT_TIMEOUT,
    help="Request timeout in seconds"
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Log level for messages written to stderr"
)
@click.pass_context
def main(ctx: click.Context, api_key: Optional[str], base_url: str, timeout: float, log_level: str) -> None:
    """Generate and retrieve SemanticPen articles."""
    setup_logging(log_level)
    ctx.obj = {"api_key": api_key, "base_url": base_url, "timeout": timeout}


def build_config(ctx: click.Context) -> Configuration:
    """Build the client configuration from the group options, exiting on bad input.

    Called from the subcommands so that "--help" works without an API key.
    """
    settings = ctx.obj
    if not settings["api_key"]:
        click.echo(f"Error: {API_KEY_ENV} environment variable not set", err=True)
        click.echo(f"   Please set your API key: export {API_KEY_ENV}='your-api-key'", err=True)
        ctx.exit(1)

    try:
        return Configuration(**settings)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@main.command()
@click.argument("keyword")
@click.argument("project_name", required=False)
@click.option(
    "--poll-interval",
    type=float,
    default=DEFAULT_POLL_INTERVAL,
    help="Seconds between progress checks"
)
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_ATTEMPTS,
    help="Maximum number of progress checks"
)
@click.option(
    "--wait/--no-wait",
    default=True,
    help="Follow the article until it completes"
)
@click.pass_context
def generate(
    ctx: click.Context,
    keyword: str,
    project_name: Optional[str],
    poll_interval: float,
    max_attempts: int,
    wait: bool,
) -> None:
    """Generate an article for KEYWORD, optionally under PROJECT_NAME."""
    config = build_config(ctx)
    logger.info(f"Generating article for keyword: {keyword}")
    exit_code = asyncio.run(
        run_generate(config, keyword, project_name, wait, poll_interval, max_attempts)
    )
    raise SystemExit(exit_code)


@main.command()
@click.argument("article_id")
@click.pass_context
def get(ctx: click.Context, article_id: str) -> None:
    """Print the article identified by ARTICLE_ID."""
    config = build_config(ctx)
    logger.info(f"Retrieving article: {article_id}")
    exit_code = asyncio.run(run_get(config, article_id))
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
