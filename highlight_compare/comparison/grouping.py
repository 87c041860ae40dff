"""
Group language hints by identical canonical highlighting.
"""

import logging
from typing import Dict, Iterable, List

from highlight_compare.comparison.canonicalizer import canonicalize_markup
from highlight_compare.schemas import GroupedResult, LanguageResult

logger = logging.getLogger(__name__)


def group_results(results: Iterable[LanguageResult]) -> List[GroupedResult]:
    """
    Partition results into equivalence classes of their canonical markup.

    Groups appear in order of their first member; each group keeps the
    original markup of that first member as its representative.

    Args:
        results: Extracted results, in document order

    Returns:
        GroupedResult list in first-appearance order
    """
    grouped: Dict[str, GroupedResult] = {}
    order: List[str] = []

    for result in results:
        key = canonicalize_markup(result.code_block_markup)
        if key not in grouped:
            grouped[key] = GroupedResult(lang_names=[], code_block_markup=result.code_block_markup)
            order.append(key)
        grouped[key].lang_names.append(result.lang_name)

    logger.debug(f"Grouped results into {len(order)} distinct renderings")
    return [grouped[key] for key in order]


def sort_by_group_size(groups: List[GroupedResult]) -> List[GroupedResult]:
    """Largest groups first; ties keep first-appearance order."""
    return sorted(groups, key=lambda group: len(group.lang_names), reverse=True)
