"""
Highlight Compare - find which language hints GitHub highlights differently.

Renders one snippet under many fenced-block language hints in a single
Markdown API call, extracts the highlighted block for every hint and groups
hints whose highlighting is structurally identical.

Main Components:
- Comparison: Request builder, fragment extractor, canonicalizer, grouping
- Markup: Element/Text tree, HTML parsing and serialization
- GitHub: Linguist language catalog and Markdown rendering client
- Pipeline: Orchestrates a full comparison

Usage:
    from highlight_compare import HighlightComparisonPipeline, Language

    pipeline = HighlightComparisonPipeline([
        Language(name="JavaScript", alias="js"),
        Language(name="TypeScript", alias="ts"),
    ])
    report = pipeline.run('console.log("hello")')
"""

__version__ = "0.1.0"

from .schemas import (
    Language,
    LanguageResult,
    GroupedResult,
    ComparisonReport,
)

from .comparison import (
    generate_markdown,
    extract_language_results,
    parse_rendered_markup,
    canonicalize,
    canonicalize_markup,
    group_results,
)

from .pipeline import HighlightComparisonPipeline

__all__ = [
    # Pipeline
    "HighlightComparisonPipeline",

    # Schemas
    "Language",
    "LanguageResult",
    "GroupedResult",
    "ComparisonReport",

    # Comparison
    "generate_markdown",
    "extract_language_results",
    "parse_rendered_markup",
    "canonicalize",
    "canonicalize_markup",
    "group_results",
]
