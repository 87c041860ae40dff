"""
Pydantic schemas for highlight comparison.

Architecture:
- Language: One language hint (Linguist name + fence alias)
- LanguageResult: Highlighted block extracted for one marker heading
- GroupedResult: Language hints whose blocks canonicalize identically
- ComparisonReport: Complete pipeline output
"""

from pydantic import BaseModel, Field
from typing import List


# ============================================================================
# INPUT SCHEMAS
# ============================================================================

class Language(BaseModel):
    """A language hint to render the input text under."""
    name: str = Field(description="Linguist language name (used in the marker heading)")
    alias: str = Field(
        default="",
        description="Fence info string; the name is used when empty"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "JavaScript",
                "alias": "js"
            }
        }


# ============================================================================
# EXTRACTION SCHEMAS
# ============================================================================

class LanguageResult(BaseModel):
    """
    Highlighted code block located for one marker heading.

    Only built when the block contains at least one class-bearing element,
    i.e. the hint actually produced highlighting.
    """
    lang_name: str = Field(description="Language name taken from the marker heading")
    code_block_markup: str = Field(description="Serialized HTML of the highlighted block")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "lang_name": "Ruby",
                "code_block_markup": (
                    '<div class="highlight highlight-source-ruby">'
                    '<pre><span class="pl-k">puts</span> "test"</pre></div>'
                )
            }
        }


class GroupedResult(BaseModel):
    """
    Language hints that render identically.

    ``code_block_markup`` is the original markup of the first member, never
    the canonical form.
    """
    lang_names: List[str] = Field(
        default_factory=list,
        description="Member language names in first-appearance order"
    )
    code_block_markup: str = Field(description="Representative (original) markup")

    class Config:
        json_schema_extra = {
            "example": {
                "lang_names": ["4D", "C++", "F#"],
                "code_block_markup": '<div class="highlight highlight-source-4dm"><pre>code</pre></div>'
            }
        }


# ============================================================================
# OUTPUT SCHEMAS
# ============================================================================

class ComparisonReport(BaseModel):
    """Result of rendering one text under every requested language hint."""
    groups: List[GroupedResult] = Field(
        default_factory=list,
        description="Groups ordered by member count (descending), ties in first-appearance order"
    )
    total_languages: int = Field(description="Number of language hints requested")
    highlighted_count: int = Field(description="Number of hints that produced highlighting")
    status_message: str = Field(description="Human-readable summary line")
