"""Candidate curation pipeline and generation request building."""

__all__ = [
    "dedupe",
    "filters",
    "llm_client",
    "normalizer",
    "pipeline",
    "prompts",
    "selection",
    "types",
]
