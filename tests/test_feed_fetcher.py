import logging
import time

import feedparser
import requests

from ai_news_digest.models.candidate import FeedSource
from ai_news_digest.scrapers.feed_fetcher import FeedFetcher, entry_to_raw

_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title> 科技新報 </title>
    <link>https://technews.tw/</link>
    <item>
      <title>OpenAI 推出新模型</title>
      <link>https://technews.tw/2024/05/10/openai-new-model/</link>
      <guid isPermaLink="false">technews-1</guid>
      <pubDate>Fri, 10 May 2024 08:00:00 +0000</pubDate>
    </item>
    <item>
      <title>沒有日期的文章</title>
      <link>https://technews.tw/2024/05/10/no-date-story/</link>
    </item>
  </channel>
</rss>
""".encode("utf-8")


class _Resp:
    def __init__(self, status_code: int = 200, content: bytes = b"") -> None:
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self.content = content
        self.text = content.decode("utf-8", "ignore")


def _source(url: str) -> FeedSource:
    return FeedSource(url=url, user_agent="TestBot/1.0", timeout_sec=12)


def test_fetch_source_parses_real_rss_payload() -> None:
    fetcher = FeedFetcher(http_get=lambda url, **kwargs: _Resp(content=_RSS))
    entries = fetcher.fetch_source(_source("https://technews.tw/feed/"))
    assert len(entries) == 2
    first, second = entries
    assert first.title == "OpenAI 推出新模型"
    assert first.link == "https://technews.tw/2024/05/10/openai-new-model/"
    assert first.guid == "technews-1"
    assert first.iso_date == "2024-05-10T08:00:00+00:00"
    assert first.source_label == "科技新報"
    assert second.iso_date == ""
    assert second.pub_date == ""


def test_fetch_source_sends_user_agent_and_timeout() -> None:
    calls = []

    def _get(url, **kwargs):
        calls.append((url, kwargs))
        return _Resp(content=_RSS)

    FeedFetcher(http_get=_get).fetch_source(_source("https://technews.tw/feed/"))
    [(url, kwargs)] = calls
    assert url == "https://technews.tw/feed/"
    assert kwargs["headers"] == {"User-Agent": "TestBot/1.0"}
    assert kwargs["timeout"] == 12


def test_failing_sources_are_isolated(caplog) -> None:
    def _get(url, **kwargs):
        if "timeout" in url:
            raise requests.Timeout("read timed out")
        if "down" in url:
            return _Resp(status_code=503)
        if "broken" in url:
            return _Resp(content=b"<html><body>not a feed")
        return _Resp(content=_RSS)

    fetcher = FeedFetcher(http_get=_get, max_workers=4)
    sources = [
        _source("https://timeout.example/feed"),
        _source("https://down.example/feed"),
        _source("https://broken.example/feed"),
        _source("https://technews.tw/feed/"),
    ]
    with caplog.at_level(logging.WARNING):
        entries = fetcher.fetch_all(sources)

    assert [e.link for e in entries] == [
        "https://technews.tw/2024/05/10/openai-new-model/",
        "https://technews.tw/2024/05/10/no-date-story/",
    ]
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 3
    assert any("timeout.example" in w for w in warnings)


def test_fetch_all_respects_entry_cap_and_handles_no_sources() -> None:
    feed = {"feed": {"title": "Big"}, "entries": [{"title": f"AI {i}", "link": f"https://a.tw/{i}"} for i in range(10)]}
    fetcher = FeedFetcher(
        http_get=lambda url, **kwargs: _Resp(content=b"x"),
        feed_parser=lambda _content: feed,
        max_entries_per_feed=3,
    )
    assert fetcher.fetch_all([]) == []
    assert len(fetcher.fetch_all([_source("https://a.tw/feed")])) == 3


def test_entry_to_raw_prefers_published_then_updated() -> None:
    updated = time.strptime("2024-05-10 09:30:00", "%Y-%m-%d %H:%M:%S")
    entry = feedparser.FeedParserDict(
        title="Gemini update",
        id="https://blog.example/?p=9",
        updated="Fri, 10 May 2024 09:30:00 GMT",
        updated_parsed=updated,
    )
    raw = entry_to_raw(entry, "Blog")
    assert raw.link == ""
    assert raw.guid == "https://blog.example/?p=9"
    assert raw.iso_date == "2024-05-10T09:30:00+00:00"
    assert raw.pub_date == "Fri, 10 May 2024 09:30:00 GMT"


def test_entry_to_raw_drops_out_of_range_timestamp_only() -> None:
    entry = feedparser.FeedParserDict(
        title="AI 新聞",
        link="https://technews.tw/2024/05/10/odd-date-story/",
        published="Fri, 10 May 99999999 08:00:00 GMT",
        published_parsed=time.struct_time((99999999, 5, 10, 8, 0, 0, 4, 131, 0)),
    )
    raw = entry_to_raw(entry, "科技新報")
    assert raw.iso_date == ""
    assert raw.link == "https://technews.tw/2024/05/10/odd-date-story/"
    assert raw.pub_date == "Fri, 10 May 99999999 08:00:00 GMT"
