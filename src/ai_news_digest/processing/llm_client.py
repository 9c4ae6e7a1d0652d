from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional

import requests

from ai_news_digest.core.errors import GenerationError

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = {429, 500, 502, 503, 504}


def extract_gemini_text(payload: dict[str, Any]) -> str:
    # Gemini REST 回應只取第一個 candidate 的文字
    try:
        parts = payload["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return ""
    texts = [p.get("text", "") for p in parts if isinstance(p, dict)]
    return "".join(t for t in texts if isinstance(t, str)).strip()


class GeminiClient:
    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        api_base: str,
        timeout_sec: int = 60,
        max_retries: int = 2,
        retry_backoff_sec: float = 1.5,
        max_output_tokens: int = 1024,
        temperature: float = 0.4,
        http_post: Optional[Callable[..., Any]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._api_base = api_base.rstrip("/")
        self._timeout_sec = timeout_sec
        self._max_attempts = max(1, max_retries + 1)
        self._retry_backoff_sec = retry_backoff_sec
        self._max_output_tokens = max_output_tokens
        self._temperature = temperature
        self._http_post = http_post or requests.post
        self._sleep = sleep

    @property
    def endpoint(self) -> str:
        return f"{self._api_base}/models/{self._model}:generateContent"

    def _backoff(self, attempt: int) -> None:
        self._sleep(self._retry_backoff_sec * (2 ** (attempt - 1)))

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ],
            "generationConfig": {
                "temperature": self._temperature,
                "maxOutputTokens": self._max_output_tokens,
            },
        }

    def generate_text(self, prompt: str) -> str:
        """回傳模型輸出的純文字；沒有可用文字時丟 GenerationError。"""
        request_payload = self.build_payload(prompt)
        last_err = ""
        for attempt in range(1, self._max_attempts + 1):
            try:
                resp = self._http_post(
                    self.endpoint,
                    headers={"x-goog-api-key": self._api_key, "Content-Type": "application/json"},
                    json=request_payload,
                    timeout=self._timeout_sec,
                )
            except requests.RequestException as e:
                last_err = f"{type(e).__name__}: {e}"
                if attempt < self._max_attempts:
                    self._backoff(attempt)
                    continue
                break

            if not resp.ok:
                last_err = f"{resp.status_code} {resp.text}"
                if resp.status_code in _RETRYABLE_STATUS and attempt < self._max_attempts:
                    self._backoff(attempt)
                    continue
                break

            try:
                data = resp.json()
            except ValueError:
                last_err = "Gemini 回應 JSON 解析失敗"
                if attempt < self._max_attempts:
                    self._backoff(attempt)
                    continue
                break

            text = extract_gemini_text(data)
            if text:
                return text
            last_err = "Gemini 無內容回傳"
            if attempt < self._max_attempts:
                self._backoff(attempt)
                continue

        logger.error("Gemini 呼叫失敗：%s", last_err)
        raise GenerationError(f"Gemini 呼叫失敗：{last_err}")
