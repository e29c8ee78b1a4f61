"""Data models for semantic_pen."""

from .schemas import (
    Article,
    GenerateArticleResponse,
    GetArticleResponse,
    COMPLETED_STATUSES,
    IN_PROGRESS_STATUSES,
    FAILED_STATUSES,
)

__all__ = [
    "Article",
    "GenerateArticleResponse",
    "GetArticleResponse",
    "COMPLETED_STATUSES",
    "IN_PROGRESS_STATUSES",
    "FAILED_STATUSES",
]
