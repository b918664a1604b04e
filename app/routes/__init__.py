"""
Routes module for the Text Intelligence API.
"""
from .session import session_bp
from .text_intelligence import text_intelligence_bp
from .metadata import metadata_bp
from .health import health_bp
from .frontend import frontend_bp

__all__ = ['session_bp', 'text_intelligence_bp', 'metadata_bp', 'health_bp', 'frontend_bp']
