"""PDF page extraction using pypdf.

Applies a PageSelection to a PDF file, writing the selected pages into a
temporary PDF. This is where selections are checked against the real page
count; ``parse_page_range`` never sees the document.
"""

import tempfile
from pathlib import Path

from pdftool.lib.errors import PageOutOfRangeError, PageRangeError
from pdftool.lib.logging_config import get_logger
from pdftool.models.structure import PageSelection

logger = get_logger(__name__)


def extract_pdf_pages(file_path: Path, selection: PageSelection) -> Path:
    """Extract selected pages from a PDF into a temporary file.

    Args:
        file_path: Path to original PDF file
        selection: 1-based pages to keep, in document order

    Returns:
        Path to temporary PDF file with extracted pages. The caller owns the
        file and is responsible for deleting it.

    Raises:
        ImportError: If pypdf is not installed
        PageOutOfRangeError: If a selected page exceeds the page count
    """
    try:
        from pypdf import PdfReader, PdfWriter
    except ImportError as e:
        raise ImportError(
            "pypdf is required for PDF page extraction. "
            "Install with: pip install pypdf"
        ) from e

    logger.debug("Extracting pages %s from PDF: %s", list(selection), file_path)

    try:
        reader = PdfReader(str(file_path))
        writer = PdfWriter()
        total_pages = len(reader.pages)

        for page in selection:
            if page > total_pages:
                raise PageOutOfRangeError(page, total_pages)

        for index in selection.to_zero_based():
            writer.add_page(reader.pages[index])

        tmp = tempfile.NamedTemporaryFile(suffix=".pdf", delete=False)  # noqa: SIM115
        tmp_path = Path(tmp.name)
        try:
            writer.write(tmp)
        except Exception:
            tmp.close()
            tmp_path.unlink(missing_ok=True)
            raise
        tmp.close()

        logger.debug(
            "Extracted %d pages from PDF to temp file: %s", len(selection), tmp_path
        )
        return tmp_path

    except PageRangeError:
        raise
    except Exception as e:
        logger.warning("PDF page extraction failed: %s", e)
        raise

