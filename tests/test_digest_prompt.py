import datetime

import pytest

from ai_news_digest.models.candidate import Candidate
from ai_news_digest.processing.prompts import DigestRequestBuilder

TODAY = datetime.datetime(2024, 5, 10, 1, 0, tzinfo=datetime.timezone.utc)


def _candidates() -> list[Candidate]:
    return [
        Candidate("OpenAI 推出新模型", "https://technews.tw/2024/05/10/openai-new-model/", TODAY, "科技新報"),
        Candidate("Gemini {beta} update", "https://www.ithome.com.tw/news/162345", TODAY, "iThome"),
    ]


def test_render_candidates_numbers_title_and_source_link() -> None:
    rendered = DigestRequestBuilder.render_candidates(_candidates())
    assert rendered == (
        "1. OpenAI 推出新模型\n來源：https://technews.tw/2024/05/10/openai-new-model/\n"
        "2. Gemini {beta} update\n來源：https://www.ithome.com.tw/news/162345"
    )


def test_build_embeds_heading_candidates_and_rules() -> None:
    builder = DigestRequestBuilder(digest_title="AI 每日快訊")
    request = builder.build(_candidates(), TODAY)
    assert request.heading == "🌟 AI 每日快訊｜2024年05月10日 🌟"
    assert request.candidate_count == 2
    assert request.heading in request.prompt
    assert "2. Gemini {beta} update" in request.prompt
    assert "5到8條" in request.prompt
    assert "20~30字" in request.prompt
    assert "只能使用候選新聞清單" in request.prompt


def test_build_rejects_empty_candidates() -> None:
    with pytest.raises(ValueError):
        DigestRequestBuilder(digest_title="AI 每日快訊").build([], TODAY)


def test_fallback_message_has_heading_and_notice() -> None:
    message = DigestRequestBuilder(digest_title="AI 每日快訊").fallback_message(TODAY)
    assert message == "🌟 AI 每日快訊｜2024年05月10日 🌟\n\n（目前無法取得近24小時 AI 新聞，請稍後再試）"
