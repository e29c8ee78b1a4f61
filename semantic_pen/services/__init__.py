"""Services for semantic_pen."""

from .client import SemanticPenClient
from .monitor import monitor_article

__all__ = [
    "SemanticPenClient",
    "monitor_article",
]
