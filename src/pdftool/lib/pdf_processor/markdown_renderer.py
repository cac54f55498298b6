"""Render a classified line stream as Markdown.

Source line breaks are kept as they are; paragraphs are not reflowed. The
renderer only drops pagination noise, collapses blank runs and marks
headings.
"""

import re

from pdftool.models.config import StructureConfig
from pdftool.models.structure import ClassifiedLine, LineClass

_BLANK_RUN = re.compile(r"\n{3,}")


def collapse_blank_lines(text: str) -> str:
    """Collapse every run of two or more blank lines into one.

    Idempotent: applying it to its own output changes nothing.
    """
    return _BLANK_RUN.sub("\n\n", text)


def render_markdown(
    lines: list[ClassifiedLine], config: StructureConfig | None = None
) -> str:
    """Render classified lines as Markdown text.

    - Blank lines and page breaks become a single blank separator, never
      emitted before the first content line
    - Page-number lines are dropped
    - Headings are written as ``## Title`` with a blank line on each side
    - List items and body lines are written trimmed, one per line

    Args:
        lines: Classified lines with heading levels assigned
        config: Heuristic settings, defaults to StructureConfig()

    Returns:
        Markdown text ending in exactly one newline.
    """
    if config is None:
        config = StructureConfig()

    output: list[str] = []
    prev_blank = False

    for line in lines:
        if line.line_class is LineClass.BLANK:
            if not prev_blank and output:
                output.append("")
                prev_blank = True
            continue

        # Page numbers leave prev_blank untouched so the blanks around them merge
        if line.line_class is LineClass.PAGE_NUMBER:
            continue

        prev_blank = False
        if line.is_heading:
            if output and output[-1] != "":
                output.append("")
            output.append(f"{config.heading_marker * line.heading_level} {line.text}")
            output.append("")
        else:
            output.append(line.text)

    text = collapse_blank_lines("\n".join(output))
    return text.strip() + "\n"
