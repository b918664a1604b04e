"""
Tests for session token issuance and verification.
"""
import time
from datetime import timedelta

from flask_jwt_extended import create_access_token, decode_token

from app.routes.session import SESSION_SUBJECT


def test_session_issues_token(app, client):
    response = client.get('/api/session')

    assert response.status_code == 200
    token = response.get_json()['token']

    with app.app_context():
        claims = decode_token(token)
    assert claims['sub'] == SESSION_SUBJECT
    assert claims['exp'] - claims['iat'] == 3600


def test_session_token_accepted(client, auth_headers):
    response = client.post('/api/text-intelligence', json={'text': 'Hello'}, headers=auth_headers)
    assert response.status_code == 200


def test_expired_token_rejected(app, client):
    with app.app_context():
        token = create_access_token(identity=SESSION_SUBJECT, expires_delta=timedelta(seconds=-1))

    response = client.post(
        '/api/text-intelligence',
        json={'text': 'Hello'},
        headers={'Authorization': f'Bearer {token}'}
    )

    assert response.status_code == 401
    error = response.get_json()['error']
    assert error['type'] == 'AuthenticationError'
    assert error['code'] == 'INVALID_TOKEN'


def test_issued_token_expires(app, client):
    """A token from /api/session works inside its window and fails after it."""
    app.config['JWT_ACCESS_TOKEN_EXPIRES'] = timedelta(seconds=2)
    token = client.get('/api/session').get_json()['token']
    headers = {'Authorization': f'Bearer {token}'}

    response = client.post('/api/text-intelligence', json={'text': 'Hello'}, headers=headers)
    assert response.status_code == 200

    time.sleep(3)

    response = client.post('/api/text-intelligence', json={'text': 'Hello'}, headers=headers)
    assert response.status_code == 401
    assert response.get_json()['error']['code'] == 'INVALID_TOKEN'


def test_tampered_token_rejected(client):
    token = client.get('/api/session').get_json()['token']
    header, payload, signature = token.split('.')
    forged = '.'.join([header, payload, ('A' if signature[0] != 'A' else 'B') + signature[1:]])

    response = client.post(
        '/api/text-intelligence',
        json={'text': 'Hello'},
        headers={'Authorization': f'Bearer {forged}'}
    )

    assert response.status_code == 401
    assert response.get_json()['error']['code'] == 'INVALID_TOKEN'


def test_garbage_token_rejected(client):
    response = client.post(
        '/api/text-intelligence',
        json={'text': 'Hello'},
        headers={'Authorization': 'Bearer not-a-jwt'}
    )
    assert response.status_code == 401
    assert response.get_json()['error']['code'] == 'INVALID_TOKEN'


def test_non_bearer_scheme_is_missing_token(client):
    response = client.post(
        '/api/text-intelligence',
        json={'text': 'Hello'},
        headers={'Authorization': 'Basic dXNlcjpwYXNz'}
    )
    assert response.status_code == 401
    assert response.get_json()['error']['code'] == 'MISSING_TOKEN'


def test_token_from_other_secret_rejected(app, client):
    token = client.get('/api/session').get_json()['token']
    app.config['JWT_SECRET_KEY'] = 'rotated-secret'

    response = client.post(
        '/api/text-intelligence',
        json={'text': 'Hello'},
        headers={'Authorization': f'Bearer {token}'}
    )

    assert response.status_code == 401
    assert response.get_json()['error']['code'] == 'INVALID_TOKEN'
