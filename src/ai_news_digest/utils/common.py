from __future__ import annotations

import datetime
import email.utils
from urllib.parse import urlparse

_TW = datetime.timezone(datetime.timedelta(hours=8))  # Asia/Taipei（無夏令時間）


def parse_datetime_utc(value: str, *, default_tz: datetime.tzinfo | None = None) -> datetime.datetime | None:
    """ISO-8601 或 RFC-2822 字串轉成 UTC datetime，無法解析時回傳 None。"""
    if not value:
        return None
    try:
        dt = datetime.datetime.fromisoformat(value)
    except ValueError:
        try:
            dt = email.utils.parsedate_to_datetime(value)
        except (TypeError, ValueError, IndexError):
            return None
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=default_tz or datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def is_absolute_http_url(value: str) -> bool:
    if not value:
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.hostname)


def format_tw_date(moment: datetime.datetime | None = None) -> str:
    """台北時間的日期標題，例如 2024年05月10日。"""
    moment = moment or datetime.datetime.now(datetime.timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=datetime.timezone.utc)
    local = moment.astimezone(_TW)
    return f"{local.year:04d}年{local.month:02d}月{local.day:02d}日"
