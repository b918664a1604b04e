"""
Validation utilities for inputs.
"""
from typing import Optional


MISSING_INPUT_MESSAGE = "Request must contain either 'text' or 'url' field"
BOTH_INPUTS_MESSAGE = "Request must contain only one of 'text' or 'url', not both"


def validate_analysis_input(text: Optional[str], url: Optional[str]) -> Optional[str]:
    """
    Validate that exactly one analysis source is supplied.

    Empty values count as absent.

    Args:
        text: Raw text to analyze
        url: URL of the document to analyze

    Returns:
        Error message if invalid, None if valid
    """
    if not text and not url:
        return MISSING_INPUT_MESSAGE
    if text and url:
        return BOTH_INPUTS_MESSAGE
    return None
