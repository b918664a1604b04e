"""
Response helpers for standardized API responses.
Every failure of the analysis pipeline leaves through ``error_response``.
"""
import logging
from functools import wraps
from typing import Any, Callable, Dict, Optional, Tuple

from flask import Response, jsonify

logger = logging.getLogger(__name__)


# =============================================================================
# ERROR TAXONOMY
# =============================================================================

VALIDATION_ERROR = "validation_error"
PROCESSING_ERROR = "processing_error"
AUTHENTICATION_ERROR = "AuthenticationError"

INVALID_TEXT = "INVALID_TEXT"
INVALID_URL = "INVALID_URL"
ANALYSIS_FAILED = "ANALYSIS_FAILED"
MISSING_TOKEN = "MISSING_TOKEN"
INVALID_TOKEN = "INVALID_TOKEN"

DEFAULT_ERROR_MESSAGE = "An error occurred during analysis"


# =============================================================================
# STANDARDIZED RESPONSE FUNCTIONS
# =============================================================================

def results_response(results: Optional[Dict[str, Any]]) -> Tuple[Response, int]:
    """Wrap provider results; an absent payload becomes an empty mapping."""
    return jsonify({"results": results or {}}), 200


def error_response(
    message: Optional[str],
    status_code: int = 500,
    code: Optional[str] = None,
    error_type: Optional[str] = None,
) -> Tuple[Response, int]:
    """
    Create a standardized pipeline error response.

    Type and code default from the status code: 400 maps to a validation
    error on the submitted text, anything else to a failed analysis.

    Args:
        message: Error message for the client
        status_code: HTTP status code (default 500)
        code: Machine readable error code
        error_type: ``validation_error`` or ``processing_error``

    Returns:
        Tuple of (jsonify response, status code)
    """
    if error_type is None:
        error_type = VALIDATION_ERROR if status_code == 400 else PROCESSING_ERROR
    if code is None:
        code = INVALID_TEXT if status_code == 400 else ANALYSIS_FAILED

    body = {
        "error": {
            "type": error_type,
            "code": code,
            "message": message or DEFAULT_ERROR_MESSAGE,
            "details": {},
        }
    }
    return jsonify(body), status_code


def validation_error(message: str) -> Tuple[Response, int]:
    """Create a validation error response."""
    return error_response(message, 400, INVALID_TEXT, VALIDATION_ERROR)


def processing_error(message: str, code: str = INVALID_TEXT) -> Tuple[Response, int]:
    """Create a response for a failure reported by the provider."""
    return error_response(message, 400, code, PROCESSING_ERROR)


def auth_error(code: str, message: str) -> Tuple[Response, int]:
    """Create an authentication error response (no ``details`` field)."""
    return jsonify({
        "error": {
            "type": AUTHENTICATION_ERROR,
            "code": code,
            "message": message,
        }
    }), 401


def internal_error(exception: Exception, context: str = "") -> Tuple[Response, int]:
    """
    Create an internal server error response.
    Logs the full exception and passes its message to the client.

    Args:
        exception: The caught exception
        context: Additional context for logging

    Returns:
        500 processing error response
    """
    logger.error(f"Internal error in {context}: {exception}", exc_info=True)
    return error_response(str(exception) or None, 500, ANALYSIS_FAILED, PROCESSING_ERROR)


# =============================================================================
# DECORATORS
# =============================================================================

def handle_exceptions(context: str = ""):
    """
    Decorator to handle exceptions consistently.
    Any exception escaping the view degrades to a 500 processing error.

    Args:
        context: Context string for logging
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return internal_error(e, context or func.__name__)
        return wrapper
    return decorator
