from __future__ import annotations

import datetime
from typing import Sequence

from ai_news_digest.core.config import (
    FEED_FETCH_MAX_WORKERS,
    LOOKBACK_HOURS,
    MAX_ENTRIES_PER_FEED,
    TOP_LIMIT,
)
from ai_news_digest.models.candidate import Candidate, FeedSource
from ai_news_digest.processing.dedupe import DedupeEngine
from ai_news_digest.processing.filters import CandidateFilter
from ai_news_digest.processing.normalizer import CandidateNormalizer
from ai_news_digest.processing.selection import select_candidates
from ai_news_digest.processing.types import LogFunc, NowFunc
from ai_news_digest.scrapers.feed_fetcher import FeedFetcher


class CurationPipeline:
    def __init__(
        self,
        *,
        fetcher: FeedFetcher,
        normalizer: CandidateNormalizer,
        dedupe_engine: DedupeEngine,
        candidate_filter: CandidateFilter,
        logger: LogFunc,
        top_limit: int = TOP_LIMIT,
        now_provider: NowFunc | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._normalizer = normalizer
        self._dedupe_engine = dedupe_engine
        self._candidate_filter = candidate_filter
        self._log = logger
        self._top_limit = top_limit
        self._now_provider = now_provider or (
            lambda: datetime.datetime.now(datetime.timezone.utc)
        )

    def curate(self, sources: Sequence[FeedSource]) -> list[Candidate]:
        """抓取 → 24h 視窗 → 去重 → 相關性/URL 把關 → 取前 N 條（最新在前）。"""
        now = self._now_provider()
        self._log(f"新聞收集開始（{len(sources)} 個來源）")
        raw_entries = self._fetcher.fetch_all(sources)
        self._log(f"RSS 收集完成：{len(raw_entries)} 筆")

        recent = self._normalizer.normalize(raw_entries, now)
        uniq = self._dedupe_engine.dedupe(recent)
        kept = self._candidate_filter.apply(uniq)
        selected = select_candidates(kept, self._top_limit)
        self._log(
            f"候選整理完成：近{self._normalizer.lookback_hours}小時 {len(recent)} 筆、"
            f"去重後 {len(uniq)} 筆、篩選後 {len(kept)} 筆、最終 {len(selected)} 筆"
        )
        return selected


def build_default_fetcher() -> FeedFetcher:
    return FeedFetcher(
        max_workers=FEED_FETCH_MAX_WORKERS,
        max_entries_per_feed=MAX_ENTRIES_PER_FEED,
    )


def build_default_pipeline(*, logger: LogFunc) -> CurationPipeline:
    return CurationPipeline(
        fetcher=build_default_fetcher(),
        normalizer=CandidateNormalizer(lookback_hours=LOOKBACK_HOURS),
        dedupe_engine=DedupeEngine(),
        candidate_filter=CandidateFilter(),
        logger=logger,
        top_limit=TOP_LIMIT,
    )
