"""Default configuration values for pdftool."""

# Structure recovery heuristics
STRUCTURE_DEFAULTS: dict[str, int | str] = {
    "min_median_length": 20,  # characters
    "min_heading_length": 3,  # characters
    "max_page_number_digits": 4,
    "heading_marker": "#",
}

# Environment variable to field name mapping
STRUCTURE_ENV_VARS: dict[str, str] = {
    "min_median_length": "PDFTOOL_MIN_MEDIAN_LENGTH",
    "min_heading_length": "PDFTOOL_MIN_HEADING_LENGTH",
    "max_page_number_digits": "PDFTOOL_MAX_PAGE_NUMBER_DIGITS",
    "heading_marker": "PDFTOOL_HEADING_MARKER",
}
