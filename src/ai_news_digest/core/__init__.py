"""Core configuration, constants and error types.

Import what you need from `ai_news_digest.core.config`,
`ai_news_digest.core.constants` and `ai_news_digest.core.errors`.
"""

__all__ = ["config", "constants", "errors"]
