import datetime

from ai_news_digest.models.candidate import Candidate
from ai_news_digest.processing.selection import select_candidates

BASE = datetime.datetime(2024, 5, 10, 12, 0, tzinfo=datetime.timezone.utc)


def test_selector_caps_and_orders_newest_first() -> None:
    candidates = [
        Candidate(f"AI {i}", f"https://a.tw/{i}", BASE - datetime.timedelta(minutes=i * 7 % 30), "src")
        for i in range(30)
    ]
    picked = select_candidates(candidates, 20)
    assert len(picked) == 20
    times = [c.published_at for c in picked]
    assert times == sorted(times, reverse=True)


def test_selector_returns_all_when_under_limit() -> None:
    candidates = [Candidate("AI", "https://a.tw/1", BASE, "src")]
    assert select_candidates(candidates, 20) == candidates
    assert select_candidates(candidates, 0) == []
