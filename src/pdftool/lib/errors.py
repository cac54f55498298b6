"""Custom exception hierarchy for pdftool configuration and operations."""


class PdfToolError(Exception):
    """Base exception for all pdftool errors.

    All pdftool-specific exceptions inherit from this class, enabling
    centralized exception handling by callers.
    """

    pass


class ConfigError(PdfToolError):
    """Exception raised for configuration errors.

    This exception is raised when configuration loading or parsing fails.
    It includes field-specific information to help users identify and fix
    configuration issues.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class PageRangeError(PdfToolError):
    """Base exception for page selection failures.

    Every page range failure aborts the whole parse and reports the token or
    value the user has to correct.

    Attributes:
        token: The offending token or value
        message: Human-readable error message
    """

    def __init__(self, token: str, message: str) -> None:
        """Initialize PageRangeError with the offending token.

        Args:
            token: Token or value that failed
            message: Descriptive error message
        """
        self.token = token
        self.message = message
        super().__init__(message)


class InvalidPageNumberError(PageRangeError):
    """Raised when a standalone page token is not a valid integer."""

    def __init__(self, token: str) -> None:
        """Create an error for an unparseable page number."""
        super().__init__(token, f"Invalid page number: '{token}'")


class InvalidRangeBoundError(PageRangeError):
    """Raised when either bound of a range is not a valid integer.

    Attributes:
        bound: Which bound failed, "start" or "end"
    """

    def __init__(self, token: str, bound: str) -> None:
        """Create an error for an unparseable range bound."""
        self.bound = bound
        super().__init__(token, f"Invalid range {bound}: '{token}'")


class NonPositivePageError(PageRangeError):
    """Raised when a page number or range bound is zero."""

    def __init__(self, token: str) -> None:
        """Create an error for a zero page number."""
        super().__init__(token, f"Page numbers must be greater than 0 (got '{token}')")


class InvertedRangeError(PageRangeError):
    """Raised when a range starts after it ends.

    Attributes:
        start: Parsed range start
        end: Parsed range end
    """

    def __init__(self, start: int, end: int) -> None:
        """Create an error for a range whose start exceeds its end."""
        self.start = start
        self.end = end
        super().__init__(
            f"{start}-{end}", f"Invalid range: {start}-{end} (start > end)"
        )


class PageOutOfRangeError(PageRangeError):
    """Raised when a selected page does not exist in the target document.

    Attributes:
        page: The 1-based page number that was requested
        total_pages: Number of pages in the document
    """

    def __init__(self, page: int, total_pages: int) -> None:
        """Create an error for a page past the end of the document."""
        self.page = page
        self.total_pages = total_pages
        super().__init__(
            str(page), f"Page {page} out of range (PDF has {total_pages} pages)"
        )
