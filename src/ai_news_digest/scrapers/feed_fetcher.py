from __future__ import annotations

import calendar
import datetime
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional, Sequence

import feedparser
import requests

from ai_news_digest.core.errors import FeedFetchError
from ai_news_digest.models.candidate import FeedSource, RawEntry
from ai_news_digest.processing.types import ParseFunc

logger = logging.getLogger(__name__)

HttpGetFunc = Callable[..., Any]


def _struct_time_to_iso(value: Any) -> str:
    # feedparser 的 *_parsed 欄位是 UTC struct_time
    if not value:
        return ""
    try:
        ts = calendar.timegm(value)
        return datetime.datetime.fromtimestamp(ts, tz=datetime.timezone.utc).isoformat()
    except (TypeError, ValueError, OverflowError, OSError):
        return ""


def _get(entry: Any, key: str) -> Any:
    if hasattr(entry, "get"):
        return entry.get(key)
    return getattr(entry, key, None)


def _text(entry: Any, key: str) -> str:
    value = _get(entry, key)
    return value if isinstance(value, str) else ""


def entry_to_raw(entry: Any, source_label: str) -> RawEntry:
    """feedparser entry → RawEntry（不做驗證，交給 normalizer）。"""
    iso_date = _struct_time_to_iso(_get(entry, "published_parsed")) or _struct_time_to_iso(
        _get(entry, "updated_parsed")
    )
    return RawEntry(
        title=_text(entry, "title"),
        link=_text(entry, "link"),
        guid=_text(entry, "id"),
        iso_date=iso_date,
        pub_date=_text(entry, "published") or _text(entry, "updated"),
        source_label=source_label,
    )


class FeedFetcher:
    def __init__(
        self,
        *,
        http_get: Optional[HttpGetFunc] = None,
        feed_parser: ParseFunc = feedparser.parse,
        max_workers: int = 4,
        max_entries_per_feed: int = 100,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self._http_get = http_get or requests.get
        self._feed_parser = feed_parser
        self._max_workers = max(1, max_workers)
        self._max_entries_per_feed = max_entries_per_feed
        self._log = log or logger

    def fetch_source(self, source: FeedSource) -> list[RawEntry]:
        try:
            resp = self._http_get(
                source.url,
                headers={"User-Agent": source.user_agent},
                timeout=source.timeout_sec,
            )
        except requests.RequestException as e:
            raise FeedFetchError(source.url, f"{type(e).__name__}: {e}") from e
        if not resp.ok:
            raise FeedFetchError(source.url, f"HTTP {resp.status_code}")

        feed = self._feed_parser(resp.content)
        entries = list(feed.get("entries") or [])
        if feed.get("bozo") and not entries:
            reason = feed.get("bozo_exception") or "malformed feed"
            raise FeedFetchError(source.url, f"parse error: {reason}")

        feed_meta = feed.get("feed") or {}
        source_label = (feed_meta.get("title") or "").strip()
        return [entry_to_raw(entry, source_label) for entry in entries[: self._max_entries_per_feed]]

    def _fetch_isolated(self, source: FeedSource) -> list[RawEntry]:
        # 單一來源失敗只記警告，該來源本次視為 0 筆
        try:
            entries = self.fetch_source(source)
        except Exception as e:
            self._log.warning("RSS 讀取失敗：%s %s", source.url, e)
            return []
        self._log.info("RSS 讀取完成：%s（%d 筆）", source.url, len(entries))
        return entries

    def fetch_all(self, sources: Sequence[FeedSource]) -> list[RawEntry]:
        if not sources:
            return []
        worker_count = min(self._max_workers, len(sources))
        with ThreadPoolExecutor(max_workers=worker_count) as executor:
            results = list(executor.map(self._fetch_isolated, sources))
        merged: list[RawEntry] = []
        for entries in results:
            merged.extend(entries)
        return merged
