"""Decoding of raw text produced by external extraction tools."""

from pdftool.lib.logging_config import get_logger

logger = get_logger(__name__)


def decode_extracted_text(data: bytes) -> str:
    """Decode extractor output as UTF-8, falling back to Latin-1.

    Extraction tools are asked for UTF-8, but some builds ignore the request.
    When strict decoding fails every byte is mapped to the code point of the
    same value, which never fails.

    Args:
        data: Raw bytes written by the extraction tool

    Returns:
        Decoded text.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning(
            "Extracted text is not valid UTF-8 (byte %d), decoding as Latin-1",
            e.start,
        )
        return data.decode("latin-1")
