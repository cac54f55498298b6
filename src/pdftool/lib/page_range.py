"""Page selection parsing.

Turns a user-supplied expression such as ``"1,3-5,8"`` into a canonical
PageSelection. The parser knows nothing about the target document: pages past
the end of a PDF are rejected later by ``extract_pdf_pages``.
"""

import re

from pdftool.lib.errors import (
    InvalidPageNumberError,
    InvalidRangeBoundError,
    InvertedRangeError,
    NonPositivePageError,
)
from pdftool.models.structure import PageSelection

# Unsigned decimal with an optional leading plus sign
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

# Largest page number accepted, the range of an unsigned 32-bit integer
MAX_PAGE_NUMBER = 2**32 - 1


def _parse_unsigned(token: str) -> int | None:
    """Parse an unsigned 32-bit decimal integer, returning None if invalid."""
    if not _UNSIGNED_INT.fullmatch(token):
        return None
    value = int(token)
    if value > MAX_PAGE_NUMBER:
        return None
    return value


def _parse_range(token: str) -> range:
    """Expand a ``start-end`` token into an inclusive range of pages.

    Args:
        token: Trimmed token containing at least one hyphen

    Returns:
        Inclusive page range

    Raises:
        InvalidRangeBoundError: If either bound is not an integer
        NonPositivePageError: If either bound is zero
        InvertedRangeError: If start exceeds end
    """
    start_text, end_text = (part.strip() for part in token.split("-", 1))

    start = _parse_unsigned(start_text)
    if start is None:
        raise InvalidRangeBoundError(start_text, "start")
    end = _parse_unsigned(end_text)
    if end is None:
        raise InvalidRangeBoundError(end_text, "end")

    if start == 0:
        raise NonPositivePageError(start_text)
    if end == 0:
        raise NonPositivePageError(end_text)
    if start > end:
        raise InvertedRangeError(start, end)

    return range(start, end + 1)


def parse_page_range(expression: str) -> PageSelection:
    """Parse a page selection expression.

    Tokens are comma separated. Each is either a single page number or an
    inclusive ``start-end`` range; surrounding whitespace is ignored. The
    result is sorted and deduplicated.

    Args:
        expression: Selection such as ``"1,3-5,8"``

    Returns:
        Canonical page selection

    Raises:
        InvalidPageNumberError: If a single-page token is not an integer
        InvalidRangeBoundError: If a range bound is not an integer
        NonPositivePageError: If any page or bound is zero
        InvertedRangeError: If a range starts after it ends

    Example:
        >>> parse_page_range("1,3-5,8").pages
        (1, 3, 4, 5, 8)
    """
    pages: set[int] = set()

    for raw_token in expression.split(","):
        token = raw_token.strip()
        if "-" in token:
            pages.update(_parse_range(token))
            continue

        page = _parse_unsigned(token)
        if page is None:
            raise InvalidPageNumberError(token)
        if page == 0:
            raise NonPositivePageError(token)
        pages.add(page)

    return PageSelection(pages=tuple(sorted(pages)))
