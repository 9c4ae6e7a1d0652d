"""Push delivery and the daily job entry point."""

__all__ = ["digest_job", "line_push"]
