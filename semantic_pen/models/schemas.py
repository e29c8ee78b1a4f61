"""Data models for semantic_pen.

This module defines the article and response structures returned by the
SemanticPen API, and decodes them from the service's snake_case JSON.
Decoding raises ValueError or TypeError when a payload does not match the
expected shape.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional


# Status vocabularies reported by the service. A status may match none of them.
COMPLETED_STATUSES = frozenset({"completed", "complete", "finished", "done"})
IN_PROGRESS_STATUSES = frozenset({"pending", "queued", "processing", "in_progress", "generating"})
FAILED_STATUSES = frozenset({"failed", "error", "cancelled"})


def _required(data: Dict[str, Any], key: str, kind: type) -> Any:
    if key not in data or data[key] is None:
        raise ValueError(f"Missing required field: {key}")
    return _check_type(key, data[key], kind)


def _optional(data: Dict[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    if value is None:
        return None
    return _check_type(key, value, kind)


def _check_type(key: str, value: Any, kind: type) -> Any:
    # bool is an int subclass; JSON true/false must not pass as a number
    if kind is int and isinstance(value, bool):
        raise TypeError(f"Field {key} must be {kind.__name__}, got bool")
    if not isinstance(value, kind):
        raise TypeError(f"Field {key} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _parse_timestamp(data: Dict[str, Any], key: str) -> Optional[datetime]:
    """Parse an optional ISO-8601 timestamp field.

    Args:
        data: JSON object holding the field
        key: Field name

    Returns:
        datetime if present, None if absent or null
    """
    value = _optional(data, key, str)
    if value is None:
        return None

    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(f"Field {key} is not an ISO-8601 date: {value!r}")


def _ensure_object(data: Any, name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{name} must be a JSON object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class Article:
    """Represents an article generation job and its result."""

    id: str
    status: str
    progress: int
    target_keyword: str
    title: Optional[str] = None
    content: Optional[str] = None
    project_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.status.lower() in COMPLETED_STATUSES

    @property
    def is_in_progress(self) -> bool:
        return self.status.lower() in IN_PROGRESS_STATUSES

    @property
    def has_failed(self) -> bool:
        return self.status.lower() in FAILED_STATUSES

    @classmethod
    def from_dict(cls, data: Any) -> "Article":
        data = _ensure_object(data, "article")
        return cls(
            id=_required(data, "id", str),
            status=_required(data, "status", str),
            progress=_required(data, "progress", int),
            target_keyword=_required(data, "target_keyword", str),
            title=_optional(data, "title", str),
            content=_optional(data, "content", str),
            project_name=_optional(data, "project_name", str),
            created_at=_parse_timestamp(data, "created_at"),
            updated_at=_parse_timestamp(data, "updated_at"),
        )


@dataclass(frozen=True)
class GenerateArticleResponse:
    """Result of an article generation request."""

    success: bool
    message: str
    article_ids: Optional[List[str]] = None
    article_id: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def has_article_ids(self) -> bool:
        return bool(self.article_ids)

    @property
    def first_article_id(self) -> Optional[str]:
        """First created article id, falling back to the single article_id field."""
        if self.article_ids:
            return self.article_ids[0]
        return self.article_id

    @property
    def all_article_ids(self) -> List[str]:
        return list(self.article_ids or [])

    @classmethod
    def from_dict(cls, data: Any) -> "GenerateArticleResponse":
        data = _ensure_object(data, "response")

        article_ids = _optional(data, "article_ids", list)
        if article_ids is not None:
            article_ids = [
                _check_type(f"article_ids[{index}]", value, str)
                for index, value in enumerate(article_ids)
            ]

        return cls(
            success=_required(data, "success", bool),
            message=_required(data, "message", str),
            article_ids=article_ids,
            article_id=_optional(data, "article_id", str),
            error_code=_optional(data, "error_code", str),
        )


@dataclass(frozen=True)
class GetArticleResponse:
    """Result of an article lookup. article is None when the article was not found."""

    article: Optional[Article] = None

    @classmethod
    def from_dict(cls, data: Any) -> "GetArticleResponse":
        data = _ensure_object(data, "response")
        article_data = data.get("article")
        if article_data is None:
            return cls(article=None)
        return cls(article=Article.from_dict(article_data))
