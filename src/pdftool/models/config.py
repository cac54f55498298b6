"""Configuration model for document structure recovery.

The heading heuristics rely on a handful of policy constants that were never
tuned against a labeled corpus. They are collected here so documents with an
unusual shape (long identifiers, verse, tables of short cells) can be
re-calibrated without code changes.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pdftool.config.defaults import STRUCTURE_DEFAULTS


class StructureConfig(BaseModel):
    """Heuristic constants used by the structure recovery pipeline.

    Attributes:
        min_median_length: Heading detection runs only when the median
            body-line length is strictly greater than this value.
        min_heading_length: Shortest trimmed line that may become a heading.
        max_page_number_digits: Longest standalone digit run treated as a
            page-number artifact.
        heading_marker: Character repeated once per heading level.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_median_length: int = Field(
        default=STRUCTURE_DEFAULTS["min_median_length"],
        ge=0,
        description="Median body-line length that must be exceeded",
    )
    min_heading_length: int = Field(
        default=STRUCTURE_DEFAULTS["min_heading_length"],
        ge=1,
        description="Minimum heading length in characters",
    )
    max_page_number_digits: int = Field(
        default=STRUCTURE_DEFAULTS["max_page_number_digits"],
        ge=1,
        description="Maximum digits in a standalone page number",
    )
    heading_marker: str = Field(
        default=STRUCTURE_DEFAULTS["heading_marker"],
        description="Heading marker character",
    )

    @field_validator("heading_marker")
    @classmethod
    def validate_heading_marker(cls, v: str) -> str:
        """Validate heading_marker is a single non-whitespace character."""
        if len(v) != 1 or v.isspace():
            raise ValueError("heading_marker must be a single non-whitespace character")
        return v
