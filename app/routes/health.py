"""
Health check endpoint.
"""
from flask import Blueprint, current_app, jsonify
from datetime import datetime, timezone

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health():
    """
    Health check endpoint.

    Returns:
        Status and timestamp
    """
    return jsonify({
        'status': 'ok',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'service': 'Text Intelligence API',
        'version': '1.0.0',
        'dev_mode': current_app.config['DEV_MODE']
    }), 200
