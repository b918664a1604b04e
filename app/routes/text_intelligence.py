"""
Text intelligence endpoint routes.
Forwards text or URL analysis requests to the provider.
"""
import logging
from flask import Blueprint, current_app, request

from app.routes.session import session_required
from app.services.analysis_pipeline import run_analysis
from services.text_intelligence_service import TextIntelligenceService
from utils.response_helpers import handle_exceptions

logger = logging.getLogger(__name__)

text_intelligence_bp = Blueprint('text_intelligence', __name__)


def get_text_intelligence_service() -> TextIntelligenceService:
    """Provider client created by the application factory."""
    service = current_app.extensions.get('text_intelligence')
    if service is None:
        raise RuntimeError("Text intelligence service is not configured (DEEPGRAM_API_KEY missing)")
    return service


@text_intelligence_bp.route('/api/text-intelligence', methods=['POST'])
@text_intelligence_bp.route('/text-intelligence/analyze', methods=['POST'])
@session_required
@handle_exceptions('text_intelligence')
def analyze():
    """
    Main text intelligence endpoint.

    Request body:
    {
        "text": "Text to analyze"
    }
    or
    {
        "url": "https://example.com/article.txt"
    }

    Query parameters:
        language: Language code (default "en")
        summarize: "true" or "v2" ("v1" is rejected)
        topics, sentiment, intents: "true" to enable

    Returns:
        {"results": {...}} or an error envelope
    """
    body = request.get_json(force=True)
    return run_analysis(get_text_intelligence_service(), body, request.args)
