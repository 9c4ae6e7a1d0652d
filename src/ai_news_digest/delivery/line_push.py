from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import requests

from ai_news_digest.core.constants import LINE_TEXT_MAX_CHARS
from ai_news_digest.core.errors import DeliveryError

logger = logging.getLogger(__name__)


def fit_line_text(text: str, max_chars: int = LINE_TEXT_MAX_CHARS) -> str:
    # LINE 單則文字訊息上限 5000 字；優先在條目之間的空行截斷，避免切斷網址
    if len(text) <= max_chars:
        return text
    tail = "\n\n…"
    cut = text.rfind("\n\n", 0, max_chars - len(tail) + 1)
    if cut > 0:
        return text[:cut].rstrip() + tail
    return text[: max_chars - 1] + "…"


class LinePushClient:
    def __init__(
        self,
        *,
        access_token: str,
        to: str,
        push_url: str,
        timeout_sec: int = 15,
        http_post: Optional[Callable[..., Any]] = None,
    ) -> None:
        self._access_token = access_token
        self._to = to
        self._push_url = push_url
        self._timeout_sec = timeout_sec
        self._http_post = http_post or requests.post

    def build_payload(self, text: str) -> dict[str, Any]:
        return {"to": self._to, "messages": [{"type": "text", "text": fit_line_text(text)}]}

    def push_text(self, text: str) -> None:
        try:
            resp = self._http_post(
                self._push_url,
                headers={
                    "Authorization": f"Bearer {self._access_token}",
                    "Content-Type": "application/json; charset=utf-8",
                },
                json=self.build_payload(text),
                timeout=self._timeout_sec,
            )
        except requests.RequestException as e:
            raise DeliveryError(0, f"{type(e).__name__}: {e}") from e
        if not resp.ok:
            logger.error("LINE push 失敗：%s %s", resp.status_code, resp.text)
            raise DeliveryError(resp.status_code, resp.text)
