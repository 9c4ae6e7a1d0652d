"""Feed retrieval."""

__all__ = ["feed_fetcher"]
