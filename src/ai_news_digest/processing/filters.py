from __future__ import annotations

import re
from typing import Iterable, Sequence
from urllib.parse import urlparse

from ai_news_digest.core.constants import (
    ARTICLE_PATH_PATTERNS,
    ARTICLE_SEGMENT_PATTERNS,
    BAD_URL_HOSTS,
    RELEVANCE_KEYWORDS_CJK,
    RELEVANCE_KEYWORDS_LATIN,
)
from ai_news_digest.models.candidate import Candidate


def compile_relevance_pattern(
    latin_keywords: Sequence[str],
    cjk_keywords: Sequence[str],
) -> re.Pattern[str]:
    """英文關鍵字要求前後不是英數字（避免 said 命中 ai），中文關鍵字整詞出現即可。"""
    alternatives: list[str] = []
    latin = sorted({k.lower() for k in latin_keywords if k}, key=len, reverse=True)
    if latin:
        alternatives.append(
            r"(?<![a-z0-9])(?:" + "|".join(re.escape(k) for k in latin) + r")(?![a-z0-9])"
        )
    cjk = sorted({k for k in cjk_keywords if k}, key=len, reverse=True)
    if cjk:
        alternatives.append("(?:" + "|".join(re.escape(k) for k in cjk) + ")")
    if not alternatives:
        return re.compile(r"(?!x)x")
    return re.compile("|".join(alternatives), flags=re.IGNORECASE)


def compile_segment_patterns(patterns: Sequence[str]) -> list[re.Pattern[str]]:
    return [re.compile(p) for p in patterns]


_RELEVANCE_RE = compile_relevance_pattern(RELEVANCE_KEYWORDS_LATIN, RELEVANCE_KEYWORDS_CJK)
_ARTICLE_PATH_RES = compile_segment_patterns(ARTICLE_PATH_PATTERNS)
_ARTICLE_SEGMENT_RES = compile_segment_patterns(ARTICLE_SEGMENT_PATTERNS)


def is_relevant_title(title: str, pattern: re.Pattern[str] = _RELEVANCE_RE) -> bool:
    if not title:
        return False
    return pattern.search(title) is not None


def looks_like_article_path(
    path: str,
    *,
    path_patterns: Sequence[re.Pattern[str]] = _ARTICLE_PATH_RES,
    segment_patterns: Sequence[re.Pattern[str]] = _ARTICLE_SEGMENT_RES,
) -> bool:
    if not path:
        return False
    if any(p.search(path) for p in path_patterns):
        return True
    segments = [seg for seg in path.split("/") if seg]
    return any(p.fullmatch(seg) for seg in segments for p in segment_patterns)


def is_good_article_url(
    url: str,
    *,
    bad_hosts: Iterable[str] = BAD_URL_HOSTS,
    path_patterns: Sequence[re.Pattern[str]] = _ARTICLE_PATH_RES,
    segment_patterns: Sequence[re.Pattern[str]] = _ARTICLE_SEGMENT_RES,
) -> bool:
    """拒絕搜尋頁/首頁/示範網址，只放行「像單篇文章」的路徑。"""
    if not url:
        return False
    try:
        parsed = urlparse(url.strip())
        host = (parsed.hostname or "").lower().rstrip(".")
    except ValueError:
        return False
    if parsed.scheme not in {"http", "https"} or not host:
        return False
    if host in set(bad_hosts):
        return False
    return looks_like_article_path(
        parsed.path or "",
        path_patterns=path_patterns,
        segment_patterns=segment_patterns,
    )


class CandidateFilter:
    def __init__(
        self,
        *,
        relevance_pattern: re.Pattern[str] = _RELEVANCE_RE,
        bad_hosts: Iterable[str] = BAD_URL_HOSTS,
        path_patterns: Sequence[re.Pattern[str]] = _ARTICLE_PATH_RES,
        segment_patterns: Sequence[re.Pattern[str]] = _ARTICLE_SEGMENT_RES,
    ) -> None:
        self._relevance_pattern = relevance_pattern
        self._bad_hosts = {h.lower() for h in bad_hosts}
        self._path_patterns = list(path_patterns)
        self._segment_patterns = list(segment_patterns)

    def is_relevant(self, candidate: Candidate) -> bool:
        return is_relevant_title(candidate.title, self._relevance_pattern)

    def has_good_url(self, candidate: Candidate) -> bool:
        return is_good_article_url(
            candidate.link,
            bad_hosts=self._bad_hosts,
            path_patterns=self._path_patterns,
            segment_patterns=self._segment_patterns,
        )

    def accepts(self, candidate: Candidate) -> bool:
        return self.is_relevant(candidate) and self.has_good_url(candidate)

    def apply(self, candidates: Iterable[Candidate]) -> list[Candidate]:
        # 不相關或網址不像文章是常態，直接略過不逐筆記錄
        return [c for c in candidates if self.accepts(c)]
