"""
Shared fixtures for the Text Intelligence backend tests.
"""
import pytest
from unittest.mock import Mock

from app import create_app
from services.text_intelligence_service import OutcomeStatus, RemoteOutcome, TextIntelligenceService


@pytest.fixture
def mock_service():
    """Provider client double returning an empty successful analysis."""
    service = Mock(spec=TextIntelligenceService)
    service.analyze.return_value = RemoteOutcome(OutcomeStatus.SUCCESS, results={})
    return service


@pytest.fixture
def app(mock_service, tmp_path):
    """Create test Flask app."""
    app = create_app('testing')
    app.extensions['text_intelligence'] = mock_service
    app.config['FRONTEND_DIST_DIR'] = str(tmp_path / 'dist')
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    """Authorization header carrying a freshly issued session token."""
    token = client.get('/api/session').get_json()['token']
    return {'Authorization': f'Bearer {token}'}
