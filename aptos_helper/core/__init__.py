"""Core message-handling logic: rate limiting, addresses and knowledge lookup."""

from aptos_helper.core.address import format_address, is_valid_address
from aptos_helper.core.knowledge import (
    KNOWLEDGE_BASE,
    KnowledgeCategory,
    KnowledgeEntry,
    KnowledgeResponder,
)
from aptos_helper.core.rate_limiter import RateLimiter

__all__ = [
    "format_address",
    "is_valid_address",
    "KNOWLEDGE_BASE",
    "KnowledgeCategory",
    "KnowledgeEntry",
    "KnowledgeResponder",
    "RateLimiter",
]
