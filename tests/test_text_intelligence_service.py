"""
Tests for the Deepgram text intelligence client.
"""
import json

import httpx
import pytest

from app.schemas.text_intelligence import AnalysisOptions, AnalysisRequest
from services.text_intelligence_service import OutcomeStatus, TextIntelligenceService


def make_service(handler):
    return TextIntelligenceService(
        api_key='dg-key',
        base_url='https://api.deepgram.test/v1/read',
        transport=httpx.MockTransport(handler)
    )


def test_analyze_text_success():
    """Options become query parameters and text the JSON body."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen['params'] = dict(request.url.params)
        seen['body'] = json.loads(request.content)
        seen['auth'] = request.headers['Authorization']
        return httpx.Response(200, json={
            'metadata': {'request_id': 'abc'},
            'results': {'summary': {'text': 'A greeting.'}}
        })

    service = make_service(handler)
    outcome = service.analyze(
        AnalysisRequest(text='Hello world'),
        AnalysisOptions(summarize=True, topics=True)
    )

    assert outcome.ok
    assert outcome.results == {'summary': {'text': 'A greeting.'}}
    assert seen['params'] == {'language': 'en', 'summarize': 'true', 'topics': 'true'}
    assert seen['body'] == {'text': 'Hello world'}
    assert seen['auth'] == 'Token dg-key'


def test_analyze_url_body():
    def handler(request: httpx.Request) -> httpx.Response:
        assert json.loads(request.content) == {'url': 'https://example.com/a.txt'}
        assert request.url.params['summarize'] == 'v2'
        return httpx.Response(200, json={'results': {'summary': {}}})

    outcome = make_service(handler).analyze(
        AnalysisRequest(url='https://example.com/a.txt'),
        AnalysisOptions(summarize='v2')
    )
    assert outcome.status == OutcomeStatus.SUCCESS


def test_missing_results_become_empty_mapping():
    service = make_service(lambda request: httpx.Response(200, json={'metadata': {}}))
    outcome = service.analyze(AnalysisRequest(text='Hello'), AnalysisOptions())
    assert outcome.ok
    assert outcome.results == {}


def test_remote_error_message():
    """Provider errors carry err_msg and are not retried."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(400, json={
            'err_code': 'Bad Request',
            'err_msg': 'Invalid URL provided',
            'request_id': 'abc'
        })

    outcome = make_service(handler).analyze(AnalysisRequest(url='nope'), AnalysisOptions())

    assert outcome.status == OutcomeStatus.REMOTE_ERROR
    assert outcome.error == 'Invalid URL provided'
    assert len(calls) == 1


def test_remote_error_plain_text():
    service = make_service(lambda request: httpx.Response(502, text='upstream down'))
    outcome = service.analyze(AnalysisRequest(text='Hello'), AnalysisOptions())
    assert outcome.status == OutcomeStatus.REMOTE_ERROR
    assert outcome.error == 'upstream down'


def test_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError('Connection refused')

    outcome = make_service(handler).analyze(AnalysisRequest(text='Hello'), AnalysisOptions())

    assert outcome.status == OutcomeStatus.TRANSPORT_ERROR
    assert 'Connection refused' in outcome.error


def test_malformed_success_body_raises():
    service = make_service(lambda request: httpx.Response(200, text='<html>oops</html>'))
    with pytest.raises(ValueError):
        service.analyze(AnalysisRequest(text='Hello'), AnalysisOptions())
