"""Prompt templates."""

from ai_news_digest.processing.prompts.digest_prompt import (
    DIGEST_PROMPT_TEMPLATE,
    DigestRequest,
    DigestRequestBuilder,
)

__all__ = ["DIGEST_PROMPT_TEMPLATE", "DigestRequest", "DigestRequestBuilder"]
