"""
Metadata endpoint.
Exposes the [meta] table of the project's deepgram.toml.
"""
import logging
import tomllib
from flask import Blueprint, current_app, jsonify

logger = logging.getLogger(__name__)

metadata_bp = Blueprint('metadata', __name__)


@metadata_bp.route('/metadata', methods=['GET'])
def metadata():
    """
    Return the [meta] section verbatim.

    Returns:
        Metadata mapping, or 500 if the file or section is unavailable
    """
    path = current_app.config['METADATA_FILE']

    try:
        with open(path, 'rb') as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.error(f"Error reading metadata: {e}", exc_info=True)
        return jsonify({
            'error': 'INTERNAL_SERVER_ERROR',
            'message': 'Failed to read metadata from deepgram.toml'
        }), 500

    meta = data.get('meta')
    if meta is None:
        return jsonify({
            'error': 'INTERNAL_SERVER_ERROR',
            'message': 'Missing [meta] section in deepgram.toml'
        }), 500

    return jsonify(meta), 200
