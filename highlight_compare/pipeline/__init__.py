"""Pipeline orchestration."""

from .runner import HighlightComparisonPipeline

__all__ = ["HighlightComparisonPipeline"]
