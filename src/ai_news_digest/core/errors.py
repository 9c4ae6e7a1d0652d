from __future__ import annotations


class DigestError(Exception):
    """Base class for failures that abort a digest run."""


class ConfigurationError(DigestError):
    pass


class FeedFetchError(DigestError):
    """A single feed could not be retrieved or parsed; never escapes the fetcher."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class GenerationError(DigestError):
    pass


class DeliveryError(DigestError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"LINE push 失敗：{status_code} {body}")
        self.status_code = status_code
        self.body = body
