"""Data models for document structure recovery and page selection.

Key models:
- LineClass: Content-only classification of a single extracted line
- Line: One immutable entry of the raw line stream
- ClassifiedLine: A line together with its class and heading level
- PageSelection: Canonical, strictly increasing set of 1-based page numbers
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LineClass(str, Enum):
    """Classification of an extracted text line.

    Attributes:
        BLANK: Empty line or a page-break control character
        PAGE_NUMBER: Standalone short digit run left over from pagination
        LIST_ITEM: Numbered, lettered or bulleted list entry
        BODY_CANDIDATE: Anything else; may later be promoted to a heading
    """

    BLANK = "blank"
    PAGE_NUMBER = "page_number"
    LIST_ITEM = "list_item"
    BODY_CANDIDATE = "body_candidate"


@dataclass(frozen=True)
class Line:
    """A single line of extracted text.

    Attributes:
        index: Zero-based position in the line stream
        raw: Line content exactly as extracted
    """

    index: int
    raw: str

    @property
    def text(self) -> str:
        """Line content with surrounding whitespace removed."""
        return self.raw.strip()


@dataclass(frozen=True)
class ClassifiedLine:
    """A line with its classification and heading level.

    Attributes:
        line: The underlying extracted line
        line_class: Content-based classification
        heading_level: 0 for non-headings, 1 for top-level, 2 for sub-level
    """

    line: Line
    line_class: LineClass
    heading_level: int = 0

    @property
    def text(self) -> str:
        """Trimmed line content."""
        return self.line.text

    @property
    def is_heading(self) -> bool:
        """Whether the line was promoted to a heading."""
        return self.heading_level > 0


class PageSelection(BaseModel):
    """Canonical page selection produced by page range parsing.

    Pages are 1-based, strictly increasing and free of duplicates. The
    selection knows nothing about the target document, so pages past the end
    of a document are only detected when the selection is applied.

    Example:
        >>> selection = PageSelection(pages=(1, 3, 4))
        >>> selection.to_zero_based()
        [0, 2, 3]
    """

    model_config = ConfigDict(frozen=True)

    pages: tuple[int, ...] = Field(
        default=(), description="Strictly increasing 1-based page numbers"
    )

    @field_validator("pages")
    @classmethod
    def validate_pages(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Validate pages are positive and strictly increasing."""
        for page in v:
            if page < 1:
                raise ValueError(f"page numbers must be >= 1 (got {page})")
        for prev, page in zip(v, v[1:], strict=False):
            if page <= prev:
                raise ValueError("pages must be strictly increasing without duplicates")
        return v

    def to_zero_based(self) -> list[int]:
        """Return page indices for consumers that count from 0."""
        return [page - 1 for page in self.pages]

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __contains__(self, page: object) -> bool:
        return page in self.pages
