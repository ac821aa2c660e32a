"""
HTTP client integration for URL signing

This module plugs URL signing into ``requests``: outgoing prepared requests
get their URL replaced by a signed one just before they are sent.
"""

import logging
from typing import TYPE_CHECKING, Optional
from urllib.parse import parse_qsl, urlsplit

import requests
from requests.auth import AuthBase
from requests.models import PreparedRequest

if TYPE_CHECKING:
    from ..client import Client

logger = logging.getLogger(__name__)


class SignedURLAuth(AuthBase):
    """
    ``requests`` auth hook that signs the request URL.
    
    The path and query of the prepared URL are signed with the client's
    configuration; scheme and host come from the client.
    
    Example:
        >>> session = requests.Session()
        >>> session.auth = SignedURLAuth(client)
        >>> session.get(client.base_url + "videos/list", params={"text": "démo"})
    """
    
    def __init__(self, client: 'Client'):
        self.client = client
    
    def __call__(self, request: PreparedRequest) -> PreparedRequest:
        parts = urlsplit(request.url)
        params = parse_qsl(parts.query, keep_blank_values=True)
        
        request.url = self.client.signed_url(parts.path or '/', params)
        logger.debug(f"Signed {request.method} request to {parts.path}")
        return request


def create_signing_session(
    client: 'Client',
    session: Optional[requests.Session] = None
) -> requests.Session:
    """
    Create (or configure) a requests session that signs every request.
    
    Args:
        client: Client used to sign URLs
        session: Optional existing session to configure
        
    Returns:
        requests.Session: Session with ``SignedURLAuth`` installed
    """
    session = session or requests.Session()
    session.auth = SignedURLAuth(client)
    return session
