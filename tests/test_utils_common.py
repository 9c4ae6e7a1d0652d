import datetime

from ai_news_digest.utils import format_tw_date, is_absolute_http_url, parse_datetime_utc


def test_parse_datetime_utc_accepts_iso_and_rfc2822() -> None:
    expected = datetime.datetime(2024, 5, 10, 8, 0, tzinfo=datetime.timezone.utc)
    assert parse_datetime_utc("2024-05-10T08:00:00Z") == expected
    assert parse_datetime_utc("2024-05-10T16:00:00+08:00") == expected
    assert parse_datetime_utc("Fri, 10 May 2024 08:00:00 GMT") == expected


def test_parse_datetime_utc_rejects_garbage() -> None:
    assert parse_datetime_utc("") is None
    assert parse_datetime_utc("yesterday-ish") is None


def test_is_absolute_http_url() -> None:
    assert is_absolute_http_url("https://technews.tw/2024/05/10/x/") is True
    assert is_absolute_http_url("/2024/05/10/x/") is False
    assert is_absolute_http_url("ftp://example.org/file") is False


def test_format_tw_date_uses_taipei_day() -> None:
    late_utc = datetime.datetime(2024, 5, 10, 20, 30, tzinfo=datetime.timezone.utc)
    assert format_tw_date(late_utc) == "2024年05月11日"
