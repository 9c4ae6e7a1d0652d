from ai_news_digest.utils.common import (
    format_tw_date,
    is_absolute_http_url,
    parse_datetime_utc,
)

__all__ = [
    "format_tw_date",
    "is_absolute_http_url",
    "parse_datetime_utc",
]
