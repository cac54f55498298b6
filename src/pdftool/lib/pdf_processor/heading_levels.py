"""Heading level assignment from line-length statistics.

Extracted text carries no font information, so headings are inferred from
shape alone: a heading is short relative to the document's own body text and
is set off by a blank line above it.

The decision needs the median length of every body line before any single
line can be judged, so the whole stream is buffered and processed in two
passes.
"""

from dataclasses import replace

from pdftool.lib.logging_config import get_logger
from pdftool.models.config import StructureConfig
from pdftool.models.structure import ClassifiedLine, LineClass

logger = get_logger(__name__)


def _median_length(lengths: list[int]) -> int:
    """Return the lower median of a non-empty list of lengths."""
    ordered = sorted(lengths)
    return ordered[(len(ordered) - 1) // 2]


def compute_heading_threshold(
    lines: list[ClassifiedLine], config: StructureConfig | None = None
) -> int:
    """Compute the maximum length a heading may have in this document.

    The threshold is half the median body-line length. Documents whose median
    does not exceed ``min_median_length`` are made of short fragments (lists,
    tables, verse) where brevity says nothing about headings, so detection is
    disabled by returning 0.

    Args:
        lines: Classified line stream
        config: Heuristic settings, defaults to StructureConfig()

    Returns:
        Heading length threshold, or 0 when detection is disabled.
    """
    if config is None:
        config = StructureConfig()

    corpus = [
        len(line.text)
        for line in lines
        if line.line_class is LineClass.BODY_CANDIDATE
    ]
    if not corpus:
        logger.debug("No body lines, heading detection disabled")
        return 0

    median_len = _median_length(corpus)
    if median_len <= config.min_median_length:
        logger.debug(
            "Median body-line length %d <= %d, heading detection disabled",
            median_len,
            config.min_median_length,
        )
        return 0

    threshold = median_len // 2
    logger.debug(
        "Median body-line length %d over %d lines, heading threshold %d",
        median_len,
        len(corpus),
        threshold,
    )
    return threshold


def assign_heading_levels(
    lines: list[ClassifiedLine], config: StructureConfig | None = None
) -> list[ClassifiedLine]:
    """Assign heading levels to a classified line stream.

    A body line becomes a heading when its trimmed length lies in
    ``[min_heading_length, threshold]`` and it is the first line or follows a
    blank one. Headings no longer than half the threshold get level 1, the
    rest level 2. Every other line gets level 0.

    Args:
        lines: Classified line stream
        config: Heuristic settings, defaults to StructureConfig()

    Returns:
        New list of lines with heading levels set.
    """
    if config is None:
        config = StructureConfig()

    threshold = compute_heading_threshold(lines, config)
    result: list[ClassifiedLine] = []

    for i, line in enumerate(lines):
        level = 0
        if threshold and line.line_class is LineClass.BODY_CANDIDATE:
            length = len(line.text)
            preceded_by_blank = i == 0 or lines[i - 1].line_class is LineClass.BLANK
            if config.min_heading_length <= length <= threshold and preceded_by_blank:
                level = 1 if length <= threshold // 2 else 2
        result.append(replace(line, heading_level=level))

    return result
