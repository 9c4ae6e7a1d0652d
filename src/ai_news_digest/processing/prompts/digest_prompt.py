"""Prompt template for the daily AI digest."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Sequence

from ai_news_digest.core.constants import (
    CANDIDATE_LINE_TEMPLATE,
    DIGEST_TOPIC_TAG_EXAMPLES,
    FALLBACK_NOTICE,
)
from ai_news_digest.models.candidate import Candidate
from ai_news_digest.utils import format_tw_date

DIGEST_PROMPT_TEMPLATE = """你是 AI 新聞編輯。請從下方候選新聞挑出「5到8條」最重要、與 AI 直接相關的消息，
以「繁體中文」寫成每日快訊。必須嚴格遵守【格式】與【規則】，不可杜撰。

【候選新聞（近24小時，只能從這份清單挑選）】
{candidates}

【格式（嚴格遵守）】
{heading}

1️⃣ 【關鍵詞】一句摘要（20~30字，講清楚新進展或影響）
來源：完整URL

2️⃣ 【關鍵詞】一句摘要（20~30字）
來源：完整URL

…（共5~8條；每條之間空一行）

【規則】
- 只能使用候選新聞清單的內容，不得加入清單外的消息，也不要推測。
- 每條 20–30 字、一句話講完，不用分號，也不要把兩句接在一起。
- 序號使用 1️⃣ 2️⃣ 3️⃣… 這類表情數字。
- 【關鍵詞】2~6 字，例如：{tag_examples}。
- 來源必須是該條新聞「單篇文章的完整 URL」，原樣照抄，不要首頁、搜尋頁或示範網址，也不要超連結語法。
- 只輸出純文字，保留每條之間的空行，不要前言或附註。"""


@dataclass(frozen=True)
class DigestRequest:
    heading: str
    prompt: str
    candidate_count: int


class DigestRequestBuilder:
    def __init__(self, *, digest_title: str) -> None:
        self._digest_title = digest_title

    def heading(self, today: datetime.datetime | None = None) -> str:
        return f"🌟 {self._digest_title}｜{format_tw_date(today)} 🌟"

    @staticmethod
    def render_candidates(candidates: Sequence[Candidate]) -> str:
        return "\n".join(
            CANDIDATE_LINE_TEMPLATE.format(index=i, title=c.title, link=c.link)
            for i, c in enumerate(candidates, start=1)
        )

    def build(self, candidates: Sequence[Candidate], today: datetime.datetime | None = None) -> DigestRequest:
        if not candidates:
            raise ValueError("candidates must not be empty; use fallback_message() instead")
        heading = self.heading(today)
        prompt = DIGEST_PROMPT_TEMPLATE.format(
            candidates=self.render_candidates(candidates),
            heading=heading,
            tag_examples=" ".join(DIGEST_TOPIC_TAG_EXAMPLES),
        )
        return DigestRequest(heading=heading, prompt=prompt.strip(), candidate_count=len(candidates))

    def fallback_message(self, today: datetime.datetime | None = None) -> str:
        # 沒有候選新聞時不呼叫模型，直接推這段
        return f"{self.heading(today)}\n\n{FALLBACK_NOTICE}"
