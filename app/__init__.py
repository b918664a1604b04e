"""
Flask application factory for the Text Intelligence backend.
"""
from flask import Flask, request
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_sock import Sock
import logging
from config import config
from utils.response_helpers import INVALID_TOKEN, MISSING_TOKEN, auth_error

# Initialize extensions
cors = CORS()
jwt = JWTManager()
sock = Sock()


@jwt.unauthorized_loader
def missing_token_callback(reason: str):
    return auth_error(MISSING_TOKEN, "Authorization header with Bearer token is required")


@jwt.invalid_token_loader
def invalid_token_callback(reason: str):
    return auth_error(INVALID_TOKEN, "Invalid or expired session token")


@jwt.expired_token_loader
def expired_token_callback(jwt_header: dict, jwt_payload: dict):
    return auth_error(INVALID_TOKEN, "Invalid or expired session token")


def create_app(config_name: str = 'default') -> Flask:
    """
    Application factory pattern.

    Args:
        config_name: Configuration name (development, production, testing)

    Returns:
        Flask application instance
    """
    app = Flask(__name__)
    config_class = config.get(config_name, config['default'])

    # Load configuration
    app.config.from_object(config_class)
    app.config.setdefault('SOCK_SERVER_OPTIONS', {'subprotocols': ['vite-hmr', 'vite-ping']})

    # Initialize extensions
    cors.init_app(app, resources={
        r"/*": {
            "origins": app.config['CORS_ORIGINS'],
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"],
            "send_wildcard": True
        }
    })
    jwt.init_app(app)
    sock.init_app(app)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, app.config['LOG_LEVEL'].upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(app.config['LOG_FILE']) if app.config['LOG_FILE'] else logging.StreamHandler()
        ]
    )

    # Provider client, shared read-only across requests
    from services.text_intelligence_service import TextIntelligenceService
    if app.config.get('DEEPGRAM_API_KEY'):
        app.extensions['text_intelligence'] = TextIntelligenceService(
            api_key=app.config['DEEPGRAM_API_KEY'],
            base_url=app.config['DEEPGRAM_API_URL'],
            timeout=app.config['DEEPGRAM_TIMEOUT']
        )

    # CORS preflight for every path
    @app.before_request
    def preflight():
        if request.method == 'OPTIONS':
            return '', 204

    # Register blueprints
    from app.routes import session_bp, text_intelligence_bp, metadata_bp, health_bp, frontend_bp
    app.register_blueprint(session_bp, url_prefix='/api')
    app.register_blueprint(text_intelligence_bp)
    app.register_blueprint(metadata_bp, url_prefix='/api')
    app.register_blueprint(health_bp, url_prefix='/api')
    app.register_blueprint(frontend_bp)

    # Register error handlers
    @app.errorhandler(404)
    def not_found(error):
        return {'error': 'Not Found', 'message': 'Endpoint not found'}, 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return {'error': 'Method Not Allowed', 'message': 'Method not allowed for this endpoint'}, 405

    @app.errorhandler(500)
    def internal_error(error):
        return {'error': 'Internal server error'}, 500

    return app
