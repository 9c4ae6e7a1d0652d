"""Typed models for feed entries and digest candidates."""

from .candidate import Candidate, FeedSource, RawEntry

__all__ = ["Candidate", "FeedSource", "RawEntry"]
