"""Tests for custom exception hierarchy in pdftool.lib.errors."""

from pdftool.lib.errors import (
    ConfigError,
    InvalidPageNumberError,
    InvalidRangeBoundError,
    InvertedRangeError,
    NonPositivePageError,
    PageOutOfRangeError,
    PageRangeError,
    PdfToolError,
)


class TestPdfToolError:
    """Tests for base PdfToolError exception."""

    def test_pdftool_error_creates_with_message(self) -> None:
        """Test that PdfToolError can be created with a message."""
        error = PdfToolError("Test error message")
        assert str(error) == "Test error message"

    def test_pdftool_error_is_exception(self) -> None:
        """Test that PdfToolError is an Exception subclass."""
        assert isinstance(PdfToolError("Test"), Exception)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_config_error_includes_field_name(self) -> None:
        """Test that ConfigError includes field name in error message."""
        error = ConfigError("min_median_length", "Invalid value")
        assert "min_median_length" in str(error)
        assert error.field == "min_median_length"
        assert error.message == "Invalid value"

    def test_config_error_is_pdftool_error(self) -> None:
        """Test that ConfigError is a PdfToolError subclass."""
        assert isinstance(ConfigError("field", "message"), PdfToolError)


class TestPageRangeErrors:
    """Tests for page selection exceptions."""

    def test_invalid_page_number_reports_token(self) -> None:
        """Test InvalidPageNumberError keeps and reports the token."""
        error = InvalidPageNumberError("abc")
        assert error.token == "abc"
        assert "'abc'" in str(error)
        assert isinstance(error, PageRangeError)

    def test_invalid_range_bound_reports_bound(self) -> None:
        """Test InvalidRangeBoundError names which bound failed."""
        error = InvalidRangeBoundError("x", "end")
        assert error.bound == "end"
        assert error.token == "x"
        assert "range end" in str(error)

    def test_non_positive_page(self) -> None:
        """Test NonPositivePageError message."""
        error = NonPositivePageError("0")
        assert "greater than 0" in str(error)
        assert error.token == "0"

    def test_inverted_range_keeps_bounds(self) -> None:
        """Test InvertedRangeError stores both bounds."""
        error = InvertedRangeError(5, 2)
        assert (error.start, error.end) == (5, 2)
        assert error.token == "5-2"
        assert "start > end" in str(error)

    def test_page_out_of_range(self) -> None:
        """Test PageOutOfRangeError reports page and document size."""
        error = PageOutOfRangeError(9, 3)
        assert error.page == 9
        assert error.total_pages == 3
        assert "Page 9 out of range (PDF has 3 pages)" == str(error)

    def test_all_page_errors_share_base(self) -> None:
        """Test every page error can be caught as PdfToolError."""
        errors = [
            InvalidPageNumberError("a"),
            InvalidRangeBoundError("a", "start"),
            NonPositivePageError("0"),
            InvertedRangeError(2, 1),
            PageOutOfRangeError(2, 1),
        ]
        for error in errors:
            assert isinstance(error, PageRangeError)
            assert isinstance(error, PdfToolError)
