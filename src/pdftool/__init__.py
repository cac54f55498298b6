"""pdftool - Recover document structure from text extracted out of PDFs.

PDF text extractors emit plain lines with page breaks and no formatting. pdftool
rebuilds a Markdown document from that stream and parses page selections for
page extraction.

Main features:
- Heading detection scaled to each document's median body-line length
- Page-number and page-break suppression
- Canonical page selection parsing ("1,3-5,8")
- Configurable heuristics via YAML or PDFTOOL_* environment variables
"""

from pdftool.config.loader import load_structure_config
from pdftool.lib.errors import ConfigError, PageRangeError, PdfToolError
from pdftool.lib.page_range import parse_page_range
from pdftool.lib.pdf_processor import recover_structure
from pdftool.models.config import StructureConfig
from pdftool.models.structure import PageSelection

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "PageRangeError",
    "PageSelection",
    "PdfToolError",
    "StructureConfig",
    "load_structure_config",
    "parse_page_range",
    "recover_structure",
]
