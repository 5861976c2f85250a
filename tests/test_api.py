"""Tests for the Figma REST client and OAuth helpers (HTTP is faked)."""
import pytest
import requests

from figma_to_html import auth, settings
from figma_to_html.api import FigmaAPI
from figma_to_html.exceptions import FigmaAPIError, FigmaConfigError

from conftest import FakeResponse


@pytest.fixture
def fake_request(monkeypatch):
    calls = []
    responses = []

    def request(method, url, headers=None, **kwargs):
        calls.append({'method': method, 'url': url, 'headers': headers, **kwargs})
        response = responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(requests, 'request', request)
    return calls, responses


class TestFigmaAPI:

    def test_requires_token(self):
        with pytest.raises(FigmaConfigError):
            FigmaAPI('')

    def test_get_file_nodes(self, fake_request):
        calls, responses = fake_request
        responses.append(FakeResponse(payload={'name': 'Doc', 'nodes': {}}))

        data = FigmaAPI('tok').get_file_nodes('KEY', ['1:2', '3:4'])

        assert data == {'name': 'Doc', 'nodes': {}}
        assert calls[0]['method'] == 'GET'
        assert calls[0]['url'] == 'https://api.figma.com/v1/files/KEY/nodes'
        assert calls[0]['params'] == {'ids': '1:2,3:4'}
        assert calls[0]['headers']['X-Figma-Token'] == 'tok'

    def test_get_file_depth(self, fake_request):
        calls, responses = fake_request
        responses.extend([FakeResponse(), FakeResponse()])
        api = FigmaAPI('tok')

        api.get_file('KEY', depth=2)
        api.get_file('KEY')

        assert calls[0]['params'] == {'depth': 2}
        assert calls[1]['params'] is None

    def test_get_images_params(self, fake_request):
        calls, responses = fake_request
        responses.append(FakeResponse(payload={'images': {}}))

        FigmaAPI('tok').get_images('KEY', ['1:2'], format='jpg', scale=1)

        assert calls[0]['url'].endswith('/images/KEY')
        assert calls[0]['params'] == {'ids': '1:2', 'format': 'jpg', 'scale': 1}

    def test_non_2xx_raises_with_status_and_body(self, fake_request):
        _, responses = fake_request
        responses.append(FakeResponse(status_code=403, text='{"err":"Forbidden"}'))

        with pytest.raises(FigmaAPIError) as exc_info:
            FigmaAPI('tok').get_me()

        assert exc_info.value.status_code == 403
        assert exc_info.value.body == '{"err":"Forbidden"}'
        assert str(exc_info.value) == 'Figma API error: 403 - {"err":"Forbidden"}'

    def test_rate_limit_retries_with_retry_after(self, fake_request, no_sleep):
        calls, responses = fake_request
        responses.extend([
            FakeResponse(status_code=429, headers={'Retry-After': '3'}),
            FakeResponse(status_code=429),
            FakeResponse(payload={'id': 'me'}),
        ])

        assert FigmaAPI('tok').get_me() == {'id': 'me'}
        assert len(calls) == 3
        assert no_sleep == [3, 2]

    def test_rate_limit_gives_up(self, fake_request, no_sleep, monkeypatch):
        monkeypatch.setattr(settings, 'MAX_RETRIES', 2)
        _, responses = fake_request
        responses.extend([FakeResponse(status_code=429), FakeResponse(status_code=429, text='slow down')])

        with pytest.raises(FigmaAPIError) as exc_info:
            FigmaAPI('tok').get_me()
        assert exc_info.value.status_code == 429

    def test_connection_errors_retried(self, fake_request, no_sleep):
        calls, responses = fake_request
        responses.extend([requests.exceptions.ConnectionError('boom'), FakeResponse(payload={})])

        assert FigmaAPI('tok').get_me() == {}
        assert no_sleep == [1]


@pytest.fixture
def oauth_app(monkeypatch):
    monkeypatch.setattr(settings, 'FIGMA_CLIENT_ID', 'client-id')
    monkeypatch.setattr(settings, 'FIGMA_CLIENT_SECRET', 'secret')
    monkeypatch.setattr(settings, 'FIGMA_REDIRECT_URI', 'https://app.test/callback')


@pytest.fixture
def fake_post(monkeypatch):
    calls = []
    responses = []

    def post(url, data=None, headers=None, timeout=None):
        calls.append({'url': url, 'data': data, 'headers': headers})
        return responses.pop(0)

    monkeypatch.setattr(requests, 'post', post)
    return calls, responses


class TestOAuth:

    def test_auth_url(self, oauth_app):
        url = auth.get_auth_url(state='xyz')
        assert url.startswith('https://www.figma.com/oauth?')
        assert 'client_id=client-id' in url
        assert 'redirect_uri=https%3A%2F%2Fapp.test%2Fcallback' in url
        assert 'scope=file_content%3Aread' in url
        assert 'response_type=code' in url
        assert url.endswith('state=xyz')

    def test_auth_url_without_client_id(self, monkeypatch):
        monkeypatch.setattr(settings, 'FIGMA_CLIENT_ID', '')
        with pytest.raises(FigmaConfigError):
            auth.get_auth_url()

    def test_exchange_code(self, oauth_app, fake_post):
        calls, responses = fake_post
        responses.append(FakeResponse(payload={
            'access_token': 'a', 'refresh_token': 'r', 'expires_in': 7776000, 'user_id': 'u1',
        }))

        tokens = auth.exchange_code_for_tokens('the-code')

        assert tokens == auth.FigmaTokens('a', 'r', 7776000, 'u1')
        assert calls[0]['url'] == settings.FIGMA_OAUTH_TOKEN_URL
        assert calls[0]['data']['grant_type'] == 'authorization_code'
        assert calls[0]['data']['code'] == 'the-code'

    def test_refresh_keeps_refresh_token(self, oauth_app, fake_post):
        calls, responses = fake_post
        responses.append(FakeResponse(payload={'access_token': 'new', 'expires_in': 60}))

        tokens = auth.refresh_access_token('keep-me')

        assert tokens.access_token == 'new'
        assert tokens.refresh_token == 'keep-me'
        assert calls[0]['data']['refresh_token'] == 'keep-me'

    def test_missing_credentials_fail_before_request(self, monkeypatch, fake_post):
        calls, _ = fake_post
        monkeypatch.setattr(settings, 'FIGMA_CLIENT_SECRET', '')
        monkeypatch.setattr(settings, 'FIGMA_CLIENT_ID', 'client-id')

        with pytest.raises(FigmaConfigError, match='credentials not configured'):
            auth.exchange_code_for_tokens('code')
        with pytest.raises(FigmaConfigError):
            auth.refresh_access_token('r')
        assert calls == []

    def test_error_response(self, oauth_app, fake_post):
        _, responses = fake_post
        responses.append(FakeResponse(status_code=400, text='invalid_grant'))

        with pytest.raises(FigmaAPIError) as exc_info:
            auth.exchange_code_for_tokens('bad')
        assert exc_info.value.status_code == 400
        assert exc_info.value.body == 'invalid_grant'
