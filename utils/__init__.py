"""
Utility functions for the Text Intelligence backend.
"""
from .validators import validate_analysis_input
from .response_helpers import error_response, results_response

__all__ = [
    'validate_analysis_input',
    'error_response',
    'results_response'
]
