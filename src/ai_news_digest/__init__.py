"""Daily AI news digest: RSS curation → Gemini → LINE push."""

__version__ = "0.1.0"
