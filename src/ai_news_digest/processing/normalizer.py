from __future__ import annotations

import datetime
from typing import Iterable

from ai_news_digest.models.candidate import Candidate, RawEntry
from ai_news_digest.utils import is_absolute_http_url, parse_datetime_utc


class CandidateNormalizer:
    def __init__(
        self,
        *,
        lookback_hours: int = 24,
    ) -> None:
        self.lookback_hours = lookback_hours
        self._lookback = datetime.timedelta(hours=lookback_hours)

    def window_start(self, now: datetime.datetime) -> datetime.datetime:
        return now - self._lookback

    @staticmethod
    def resolve_link(entry: RawEntry) -> str:
        return (entry.link or "").strip() or (entry.guid or "").strip()

    @staticmethod
    def resolve_published(entry: RawEntry) -> datetime.datetime | None:
        # isoDate 優先；有值但解析失敗就直接捨棄，不退回 pubDate
        iso_date = (entry.iso_date or "").strip()
        if iso_date:
            return parse_datetime_utc(iso_date)
        pub_date = (entry.pub_date or "").strip()
        if pub_date:
            return parse_datetime_utc(pub_date)
        return None

    def normalize_entry(self, entry: RawEntry, since: datetime.datetime) -> Candidate | None:
        link = self.resolve_link(entry)
        if not link or not is_absolute_http_url(link):
            return None
        published_at = self.resolve_published(entry)
        if published_at is None or published_at < since:
            return None
        return Candidate(
            title=(entry.title or "").strip(),
            link=link,
            published_at=published_at,
            source_label=(entry.source_label or "").strip(),
        )

    def normalize(self, entries: Iterable[RawEntry], now: datetime.datetime) -> list[Candidate]:
        """24 小時視窗只在此算一次，所有來源共用同一個起點。"""
        since = self.window_start(now)
        out: list[Candidate] = []
        for entry in entries:
            candidate = self.normalize_entry(entry, since)
            if candidate is not None:
                out.append(candidate)
        return out
