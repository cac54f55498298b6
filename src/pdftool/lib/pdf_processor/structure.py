"""Document structure recovery from plain extracted text.

Runs the full pipeline: split into lines, classify each line, assign heading
levels from document-wide statistics, then render Markdown. Every input,
including the empty string, produces well-formed output.
"""

from pdftool.lib.logging_config import get_logger
from pdftool.lib.pdf_processor.heading_levels import assign_heading_levels
from pdftool.lib.pdf_processor.line_classifier import classify_lines
from pdftool.lib.pdf_processor.markdown_renderer import render_markdown
from pdftool.models.config import StructureConfig

logger = get_logger(__name__)


def recover_structure(raw_text: str, config: StructureConfig | None = None) -> str:
    """Convert raw extracted text into structured Markdown.

    Args:
        raw_text: Decoded output of a text extraction tool
        config: Heuristic settings, defaults to StructureConfig()

    Returns:
        Markdown text ending in exactly one newline.

    Example:
        >>> recover_structure("Intro\\n\\n1\\n").strip()
        'Intro'
    """
    if config is None:
        config = StructureConfig()

    lines = assign_heading_levels(classify_lines(raw_text, config), config)
    headings = sum(1 for line in lines if line.is_heading)
    logger.debug("Recovered %d headings from %d lines", headings, len(lines))

    return render_markdown(lines, config)
