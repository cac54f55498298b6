"""Content-only classification of extracted text lines.

Each line is labelled from its own text, with no cross-line context:

- BLANK: empty after trimming, or a lone form feed left by a page break
- PAGE_NUMBER: a standalone run of ASCII digits, at most
  ``max_page_number_digits`` long
- LIST_ITEM: ``12)``/``12.``/``12:``, ``a)``/``a.``, or a leading bullet
- BODY_CANDIDATE: everything else

Checks run in that order, so every line belongs to exactly one class.
"""

from pdftool.models.config import StructureConfig
from pdftool.models.structure import ClassifiedLine, Line, LineClass

BULLET_GLYPHS = frozenset({"-", "*", "•", "–"})
NUMBER_TERMINATORS = frozenset({")", ".", ":"})
LETTER_TERMINATORS = frozenset({")", "."})


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def is_page_number(text: str, max_digits: int) -> bool:
    """Check whether trimmed text is a standalone page number."""
    return _is_ascii_digits(text) and len(text) <= max_digits


def is_list_item(text: str) -> bool:
    """Check whether a line starts like a list entry.

    Recognizes a digit run followed by ``)``, ``.`` or ``:`` (``3)``,
    ``12.``), a single ASCII letter followed by ``)`` or ``.`` (``a)``),
    and bullet glyphs (``-``, ``*``, ``•``, ``–``).

    Args:
        text: Line text; leading whitespace is ignored

    Returns:
        True if the line looks like a list item.
    """
    text = text.lstrip()
    if not text:
        return False

    first = text[0]
    if _is_ascii_digits(first):
        rest = text.lstrip("0123456789")
        if rest[:1] in NUMBER_TERMINATORS:
            return True
    if first.isascii() and first.isalpha() and len(text) > 1:
        if text[1] in LETTER_TERMINATORS:
            return True
    return first in BULLET_GLYPHS


def classify_line(text: str, config: StructureConfig | None = None) -> LineClass:
    """Classify a single line of extracted text.

    Args:
        text: Raw or trimmed line content
        config: Heuristic settings, defaults to StructureConfig()

    Returns:
        The line's class.
    """
    if config is None:
        config = StructureConfig()

    # strip() also removes form feeds, so page-break lines come out empty
    trimmed = text.strip()
    if not trimmed:
        return LineClass.BLANK
    if is_page_number(trimmed, config.max_page_number_digits):
        return LineClass.PAGE_NUMBER
    if is_list_item(trimmed):
        return LineClass.LIST_ITEM
    return LineClass.BODY_CANDIDATE


def split_lines(raw_text: str) -> list[Line]:
    """Split a text blob into the indexed line stream.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line. Form feeds stay inside the
    line they start, since extraction tools prefix the first line of each new
    page with a page-break character. A single trailing line break does not
    produce an extra empty line.

    Args:
        raw_text: Decoded extracted text

    Returns:
        Lines in stream order.
    """
    if not raw_text:
        return []
    normalized = raw_text.replace("\r\n", "\n").replace("\r", "\n")
    if normalized.endswith("\n"):
        normalized = normalized[:-1]
    return [Line(index=i, raw=raw) for i, raw in enumerate(normalized.split("\n"))]


def classify_lines(
    raw_text: str, config: StructureConfig | None = None
) -> list[ClassifiedLine]:
    """Split and classify every line of a text blob.

    Heading levels are left at 0; see ``assign_heading_levels``.

    Args:
        raw_text: Decoded extracted text
        config: Heuristic settings, defaults to StructureConfig()

    Returns:
        Classified lines in stream order.
    """
    if config is None:
        config = StructureConfig()
    return [
        ClassifiedLine(line=line, line_class=classify_line(line.raw, config))
        for line in split_lines(raw_text)
    ]
