"""
Integration tests for requests based URL signing

No request is sent; the auth hook is applied to prepared requests directly.
"""

from urllib.parse import parse_qs, urlsplit

import requests

from jwplayer_api import (
    Client,
    SignedURLAuth,
    create_signing_session,
    verify_signed_url,
)

API_KEY = 'XOqEAfxj'
API_SECRET = 'uA96CFtJa138E2T5GhKfngml'


def prepare(client, url, params=None):
    """Prepare a GET request signed with SignedURLAuth."""
    request = requests.Request('GET', url, params=params, auth=SignedURLAuth(client))
    return request.prepare()


class TestSignedURLAuth:
    """Test the requests auth hook"""
    
    def test_signs_prepared_url(self, client):
        """Path and params of the prepared request are signed"""
        prepared = prepare(client, client.base_url + 'videos/list', {'text': 'démo'})
        parts = urlsplit(prepared.url)
        params = parse_qs(parts.query)
        
        assert parts.netloc == 'api.jwplatform.com'
        assert parts.path == '/v1/videos/list'
        assert params['text'] == ['démo']
        assert 'api_signature' in params
        assert verify_signed_url(prepared.url, API_SECRET).is_valid
    
    def test_uses_client_host(self):
        """Scheme and host come from the client configuration"""
        client = Client(key=API_KEY, secret=API_SECRET, host='www.myownhost.com', scheme='http')
        prepared = prepare(client, 'https://placeholder.example.com/v2/accounts/show')
        
        assert prepared.url.startswith('http://www.myownhost.com/v2/accounts/show?')
    
    def test_request_without_path(self, client):
        """A bare host is signed as the root path"""
        prepared = prepare(client, 'https://api.jwplatform.com')
        assert urlsplit(prepared.url).path == '/'


class TestSigningSession:
    """Test session helpers"""
    
    def test_create_signing_session(self, client):
        """A new session gets the auth hook installed"""
        session = create_signing_session(client)
        
        assert isinstance(session, requests.Session)
        assert isinstance(session.auth, SignedURLAuth)
        assert session.auth.client is client
    
    def test_existing_session_is_configured(self, client):
        """An existing session is reused"""
        session = requests.Session()
        assert create_signing_session(client, session) is session
        assert isinstance(session.auth, SignedURLAuth)
    
    def test_session_prepares_signed_requests(self, client):
        """Requests prepared by the session are signed"""
        session = create_signing_session(client)
        prepared = session.prepare_request(requests.Request('GET', client.base_url + 'videos/list'))
        
        assert verify_signed_url(prepared.url, API_SECRET).is_valid
