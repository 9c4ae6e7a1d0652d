from __future__ import annotations

from typing import Sequence

from ai_news_digest.models.candidate import Candidate


def select_candidates(candidates: Sequence[Candidate], limit: int = 20) -> list[Candidate]:
    """最新在前，最多 limit 條；再往下挑 5–8 條是生成端的工作。"""
    if limit <= 0:
        return []
    ordered = sorted(candidates, key=lambda c: c.published_at, reverse=True)
    return ordered[:limit]
