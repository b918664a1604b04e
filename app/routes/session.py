"""
Session endpoints.
Issues short-lived anonymous session tokens and guards protected routes.
"""
import logging
from functools import wraps
from typing import Callable

from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import create_access_token, verify_jwt_in_request

logger = logging.getLogger(__name__)

session_bp = Blueprint('session', __name__)

# Tokens carry no user identity, only this fixed subject and issuance time.
SESSION_SUBJECT = 'anonymous-session'


def create_session_token() -> str:
    """Sign a new session token valid for JWT_ACCESS_TOKEN_EXPIRES."""
    return create_access_token(identity=SESSION_SUBJECT)


def session_required(func: Callable):
    """
    Decorator verifying the Bearer session token before the view runs.
    Verification failures are rendered by the JWT loader callbacks.
    Skipped when SESSION_AUTH_ENABLED is false.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        if current_app.config.get('SESSION_AUTH_ENABLED', True):
            verify_jwt_in_request()
        return func(*args, **kwargs)
    return wrapper


@session_bp.route('/session', methods=['GET'])
def get_session():
    """
    Issue a signed session token.

    Returns:
        {"token": "<jwt>"}
    """
    token = create_session_token()
    logger.debug("Issued session token")
    return jsonify({'token': token}), 200
