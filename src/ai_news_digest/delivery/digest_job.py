from __future__ import annotations

import argparse
import datetime
import logging
from typing import Callable, Optional, Sequence

from ai_news_digest.core.config import (
    DIGEST_TITLE,
    FEED_SOURCES,
    GEMINI_API_BASE,
    GEMINI_MAX_OUTPUT_TOKENS,
    GEMINI_MAX_RETRIES,
    GEMINI_MODEL,
    GEMINI_RETRY_BACKOFF_SEC,
    GEMINI_TIMEOUT_SEC,
    LINE_PUSH_URL,
    LINE_TIMEOUT_SEC,
    Settings,
)
from ai_news_digest.core.errors import DigestError
from ai_news_digest.delivery.line_push import LinePushClient
from ai_news_digest.models.candidate import FeedSource
from ai_news_digest.processing.llm_client import GeminiClient
from ai_news_digest.processing.pipeline import CurationPipeline, build_default_pipeline
from ai_news_digest.processing.prompts import DigestRequestBuilder
from ai_news_digest.processing.types import LogFunc

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[Settings], GeminiClient]
PusherFactory = Callable[[Settings], LinePushClient]


def _log(message: str) -> None:
    ts = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {message}")


def build_gemini_client(settings: Settings) -> GeminiClient:
    return GeminiClient(
        api_key=settings.require_gemini_api_key(),
        model=GEMINI_MODEL,
        api_base=GEMINI_API_BASE,
        timeout_sec=GEMINI_TIMEOUT_SEC,
        max_retries=GEMINI_MAX_RETRIES,
        retry_backoff_sec=GEMINI_RETRY_BACKOFF_SEC,
        max_output_tokens=GEMINI_MAX_OUTPUT_TOKENS,
    )


def build_line_client(settings: Settings) -> LinePushClient:
    access_token, group_id = settings.require_line_credentials()
    return LinePushClient(
        access_token=access_token,
        to=group_id,
        push_url=LINE_PUSH_URL,
        timeout_sec=LINE_TIMEOUT_SEC,
    )


def run_daily_digest(
    *,
    settings: Settings,
    pipeline: CurationPipeline,
    request_builder: DigestRequestBuilder,
    sources: Sequence[FeedSource],
    logger: LogFunc,
    generator_factory: GeneratorFactory = build_gemini_client,
    pusher_factory: PusherFactory = build_line_client,
    dry_run: bool = False,
    now: Optional[datetime.datetime] = None,
) -> str:
    """候選整理 → （備援訊息 | 產生快訊）→ 推送，回傳實際送出的文字。

    設定缺漏在各能力第一次使用時才檢查：沒有候選新聞時不需要 Gemini 金鑰。
    """
    candidates = pipeline.curate(sources)

    def _deliver(text: str) -> None:
        if dry_run:
            print(text)
            return
        pusher_factory(settings).push_text(text)

    if not candidates:
        message = request_builder.fallback_message(now)
        _deliver(message)
        logger("已送出備援訊息（無候選新聞）")
        return message

    request = request_builder.build(candidates, now)
    logger(f"Gemini 產生快訊（候選 {request.candidate_count} 條）")
    message = generator_factory(settings).generate_text(request.prompt)
    _deliver(message)
    logger("✅ 已推送到群組" if not dry_run else "✅ dry-run 完成，未推送")
    return message


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-news-digest",
        description="近 24 小時 AI 新聞 → Gemini 快訊 → LINE 群組推送",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="只印出快訊內容，不推送到 LINE",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = Settings.from_env()
    missing = settings.missing()
    if missing:
        logger.info("尚未設定：%s（用到時才會報錯）", ", ".join(missing))

    try:
        _log("程式開始")
        run_daily_digest(
            settings=settings,
            pipeline=build_default_pipeline(logger=_log),
            request_builder=DigestRequestBuilder(digest_title=DIGEST_TITLE),
            sources=FEED_SOURCES,
            logger=_log,
            dry_run=args.dry_run,
        )
    except DigestError as e:
        logger.error("❌ 執行失敗：%s", e)
        return 1
    except Exception:
        logger.exception("❌ 執行失敗（未預期錯誤）")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
