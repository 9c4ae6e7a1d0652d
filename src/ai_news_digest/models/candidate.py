from __future__ import annotations

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class FeedSource:
    url: str
    user_agent: str
    timeout_sec: float = 12.0


@dataclass(frozen=True)
class RawEntry:
    # feed 回傳的原始欄位，全部可能為空字串
    title: str = ""
    link: str = ""
    guid: str = ""
    iso_date: str = ""
    pub_date: str = ""
    source_label: str = ""


@dataclass(frozen=True)
class Candidate:
    title: str
    link: str
    published_at: datetime.datetime
    source_label: str

