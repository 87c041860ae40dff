"""
Pipeline runner that orchestrates a highlighting comparison.

This module coordinates:
1. Building the combined Markdown request
2. Rendering it through the GitHub Markdown API
3. Extracting the highlighted block for every language hint
4. Grouping hints with identical highlighting
"""

import logging
from typing import List, Optional

from highlight_compare.comparison import (
    generate_markdown,
    group_results,
    parse_rendered_markup,
    sort_by_group_size,
)
from highlight_compare.github.client import MarkdownRenderClient
from highlight_compare.schemas import ComparisonReport, Language

logger = logging.getLogger(__name__)


class HighlightComparisonPipeline:
    """Renders one text under many language hints and groups the results."""

    def __init__(self, languages: List[Language], client: Optional[MarkdownRenderClient] = None):
        """
        Initialize the pipeline.

        Args:
            languages: Language hints to render under
            client: Rendering client (anonymous default client if None)
        """
        self.languages = list(languages)
        self.client = client or MarkdownRenderClient()

    def default_status(self) -> str:
        return f"Loaded {len(self.languages)} languages. Provide some text to see highlighting."

    def run(self, text: str) -> ComparisonReport:
        """
        Render ``text`` and group the language hints by highlighting.

        Args:
            text: Code to compare; surrounding whitespace is stripped

        Returns:
            ComparisonReport with groups sorted by size
        """
        text = text.strip()
        if not text:
            return ComparisonReport(
                groups=[],
                total_languages=len(self.languages),
                highlighted_count=0,
                status_message=self.default_status(),
            )

        markdown = generate_markdown(text, self.languages)
        logger.info(f"Rendering {len(self.languages)} language hints")
        html = self.client.render(markdown)
        return self.compare_rendered(html)

    def compare_rendered(self, html: str) -> ComparisonReport:
        """
        Extract and group an already rendered document.

        Args:
            html: Rendered HTML of a request built by generate_markdown()

        Returns:
            ComparisonReport with groups sorted by size
        """
        results = parse_rendered_markup(html)
        groups = sort_by_group_size(group_results(results))

        # Offline comparisons may not know the requested language list
        total = len(self.languages) or len(results)
        if results:
            status = f"Showing {len(results)}/{total} languages with highlighting"
        else:
            status = f"None of the {total} languages highlighted this code"

        logger.info(status)
        return ComparisonReport(
            groups=groups,
            total_languages=total,
            highlighted_count=len(results),
            status_message=status,
        )
