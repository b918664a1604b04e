"""
Main entry point for the Text Intelligence backend.
"""
import logging
import os
import sys
from app import create_app
from config import config

logger = logging.getLogger(__name__)

MISSING_KEY_HELP = """
ERROR: Deepgram API key not found!

Please set your API key using one of these methods:

1. Create a .env file (recommended):
   DEEPGRAM_API_KEY=your_api_key_here

2. Environment variable:
   export DEEPGRAM_API_KEY=your_api_key_here

Get your API key at: https://console.deepgram.com
"""


def log_banner(app):
    """Log the listening address and available routes."""
    port = app.config['PORT']
    logger.info("=" * 70)
    logger.info(f"Backend API Server running at http://localhost:{port}")
    logger.info("GET  /api/session")
    logger.info("POST /api/text-intelligence (auth required)")
    logger.info("GET  /api/metadata")
    if app.config['DEV_MODE']:
        logger.info(f"Proxying frontend to http://localhost:{app.config['FRONTEND_PORT']}")
    logger.info("=" * 70)


def main():
    config_name = os.getenv('FLASK_ENV', 'default')
    config_class = config.get(config_name, config['default'])

    try:
        config_class.validate()
    except ValueError as e:
        print(MISSING_KEY_HELP, file=sys.stderr)
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    app = create_app(config_name=config_name)
    log_banner(app)
    app.run(
        host=app.config['HOST'],
        port=app.config['PORT'],
        debug=app.config['DEBUG'],
        threaded=True
    )


if __name__ == '__main__':
    main()
