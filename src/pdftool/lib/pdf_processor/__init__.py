"""PDF text processing utilities for pdftool.

This package turns the plain text written by an external extraction tool
into structured Markdown, and applies page selections to PDF files:

- **Line Classification**: Labels each line as blank, page number, list item
  or body text from its content alone.
- **Heading Levels**: Promotes short, blank-preceded body lines to headings,
  scaled to the document's own median body-line length.
- **Markdown Rendering**: Drops page numbers, collapses blank runs and writes
  heading markers (#, ##).
- **Page Extraction**: Writes the pages of a PageSelection into a temporary
  PDF using pypdf.

Example:
    from pdftool.lib.pdf_processor import decode_extracted_text, recover_structure

    markdown = recover_structure(decode_extracted_text(raw_bytes))

Functions:
    recover_structure: Convert extracted text into structured Markdown
    decode_extracted_text: Decode extractor output with a Latin-1 fallback
    extract_pdf_pages: Extract selected pages from a PDF file
"""

from pdftool.lib.pdf_processor.heading_levels import (
    assign_heading_levels,
    compute_heading_threshold,
)
from pdftool.lib.pdf_processor.line_classifier import (
    classify_line,
    classify_lines,
    is_list_item,
    split_lines,
)
from pdftool.lib.pdf_processor.markdown_renderer import (
    collapse_blank_lines,
    render_markdown,
)
from pdftool.lib.pdf_processor.page_extractor import extract_pdf_pages
from pdftool.lib.pdf_processor.structure import recover_structure
from pdftool.lib.pdf_processor.text_decoder import decode_extracted_text

__all__ = [
    "assign_heading_levels",
    "classify_line",
    "classify_lines",
    "collapse_blank_lines",
    "compute_heading_threshold",
    "decode_extracted_text",
    "extract_pdf_pages",
    "is_list_item",
    "recover_structure",
    "render_markdown",
    "split_lines",
]
