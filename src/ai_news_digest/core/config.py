from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from ai_news_digest.core.errors import ConfigurationError
from ai_news_digest.models.candidate import FeedSource

_repo_root = Path(__file__).resolve().parents[3]
load_dotenv(dotenv_path=_repo_root / ".env")


def _parse_csv_env(name: str) -> list[str]:
    """CSV 形式的環境變數轉成清單。"""
    raw = os.getenv(name, "").strip()
    if not raw:
        return []
    return [x.strip() for x in raw.split(",") if x.strip()]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ==========================================
# 新聞來源（可修改）
# ==========================================

DEFAULT_FEED_URLS = [
    # 英文主流 / AI
    "https://www.theverge.com/rss/index.xml",
    "https://techcrunch.com/tag/artificial-intelligence/feed/",
    "https://www.cnbc.com/id/19854910/device/rss/rss.html",  # CNBC Tech
    "https://www.theguardian.com/uk/technology/rss",
    "https://feeds.arstechnica.com/arstechnica/index",
    "https://www.technologyreview.com/feed/",  # MIT Tech Review
    "https://www.zdnet.com/topic/artificial-intelligence/rss.xml",
    # 中文
    "https://www.ithome.com.tw/rss",
    "https://technews.tw/feed/",  # 科技新報
]

FEED_USER_AGENT = os.getenv(
    "FEED_USER_AGENT",
    "LisMeet-AI-NewsBot/1.0 (+https://lis-meet-ai-63bj7nm.gamma.site)",
)
FEED_TIMEOUT_SEC = _env_float("FEED_TIMEOUT_SEC", 12.0)
FEED_FETCH_MAX_WORKERS = _env_int("FEED_FETCH_MAX_WORKERS", 4)
MAX_ENTRIES_PER_FEED = _env_int("MAX_ENTRIES_PER_FEED", 100)

FEED_URLS = _parse_csv_env("FEED_URLS") or DEFAULT_FEED_URLS
FEED_SOURCES = [
    FeedSource(url=url, user_agent=FEED_USER_AGENT, timeout_sec=FEED_TIMEOUT_SEC)
    for url in FEED_URLS
]

# ==========================================
# 候選篩選
# ==========================================

LOOKBACK_HOURS = _env_int("LOOKBACK_HOURS", 24)
TOP_LIMIT = 20  # 候選上限，交給模型再挑 5–8 條

DIGEST_TITLE = os.getenv("DIGEST_TITLE", "Li's Meet AI Studio每日重要快訊")

# ==========================================
# Gemini / LINE
# ==========================================

GEMINI_API_BASE = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_TIMEOUT_SEC = _env_int("GEMINI_TIMEOUT_SEC", 60)
GEMINI_MAX_RETRIES = _env_int("GEMINI_MAX_RETRIES", 2)
GEMINI_RETRY_BACKOFF_SEC = _env_float("GEMINI_RETRY_BACKOFF_SEC", 1.5)
GEMINI_MAX_OUTPUT_TOKENS = _env_int("GEMINI_MAX_OUTPUT_TOKENS", 1024)

LINE_PUSH_URL = os.getenv("LINE_PUSH_URL", "https://api.line.me/v2/bot/message/push")
LINE_TIMEOUT_SEC = _env_int("LINE_TIMEOUT_SEC", 15)


@dataclass(frozen=True)
class Settings:
    """執行期機密設定。啟動時讀一次，各能力第一次使用時才檢查是否缺漏。"""

    gemini_api_key: str = ""
    line_channel_access_token: str = ""
    line_group_id: str = ""

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip(),
            line_channel_access_token=os.getenv("LINE_CHANNEL_ACCESS_TOKEN", "").strip(),
            line_group_id=os.getenv("LINE_GROUP_ID", "").strip(),
        )

    def missing(self) -> list[str]:
        names = {
            "GEMINI_API_KEY": self.gemini_api_key,
            "LINE_CHANNEL_ACCESS_TOKEN": self.line_channel_access_token,
            "LINE_GROUP_ID": self.line_group_id,
        }
        return [name for name, value in names.items() if not value]

    def require_gemini_api_key(self) -> str:
        if not self.gemini_api_key:
            raise ConfigurationError("缺少 GEMINI_API_KEY")
        return self.gemini_api_key

    def require_line_credentials(self) -> tuple[str, str]:
        if not self.line_channel_access_token or not self.line_group_id:
            raise ConfigurationError("缺少 LINE_CHANNEL_ACCESS_TOKEN 或 LINE_GROUP_ID")
        return self.line_channel_access_token, self.line_group_id
