from __future__ import annotations

from typing import Iterable

from ai_news_digest.models.candidate import Candidate


class DedupeEngine:
    """標題+連結（小寫）相同即視為同一則，保留排序後最先出現者。

    同一則新聞常原封不動出現在多個 feed；兩篇不同文章剛好同標題同連結
    的情況可以接受被合併。
    """

    @staticmethod
    def build_dedupe_key(candidate: Candidate) -> str:
        return f"{candidate.title.lower()}|{candidate.link.lower()}"

    @staticmethod
    def sort_newest_first(candidates: Iterable[Candidate]) -> list[Candidate]:
        # sorted 是穩定排序，同時間者維持輸入順序
        return sorted(candidates, key=lambda c: c.published_at, reverse=True)

    def dedupe(self, candidates: Iterable[Candidate]) -> list[Candidate]:
        seen: set[str] = set()
        uniq: list[Candidate] = []
        for candidate in self.sort_newest_first(candidates):
            key = self.build_dedupe_key(candidate)
            if key in seen:
                continue
            seen.add(key)
            uniq.append(candidate)
        return uniq
