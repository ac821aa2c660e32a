"""
JW Player platform API client

Builds signed URLs for the JW Player platform API. The client never sends
requests itself; hand the URL to any HTTP library.
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional
from urllib.parse import SplitResult, urljoin, urlsplit

from .config.client_config import ClientConfig
from .config.credentials import CredentialProvider
from .signing.attributes import classify_attributes
from .signing.signer import QuerySigner
from .signing.types import RequestParams, SigningContext, SigningOptions
from .signing.utils import generate_nonce, generate_timestamp, normalize_params, to_text

logger = logging.getLogger(__name__)


class Client:
    """
    Signed URL builder for the JW Player platform API.
    
    The configuration is immutable once the client is built. Nonce, timestamp
    and parameters of each call live in a call-local ``SigningContext``, so a
    single client can sign from many threads at once.
    
    Example:
        >>> client = Client(key="XOqEAfxj", secret="uA96CFtJa138E2T5GhKfngml")
        >>> client.sign("videos/list", {"text": "démo"})
        'https://api.jwplatform.com/v1/videos/list?text=d%C3%A9mo&api_key=...'
    """
    
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        credential_provider: Optional[CredentialProvider] = None,
        **options: Any
    ):
        """
        Initialize the client.
        
        Args:
            config: Ready made configuration
            credential_provider: Source of key/secret defaults when building
                the configuration from ``options``
            **options: Client options (host, scheme, version, key, secret,
                format, ...) plus optional ``nonce_generator`` and
                ``timestamp_generator`` callables
            
        Raises:
            MissingCredentialError: If key or secret is missing
        """
        if config is None:
            nonce_generator = options.pop("nonce_generator", None)
            timestamp_generator = options.pop("timestamp_generator", None)
            config = ClientConfig.from_mapping(
                options,
                credential_provider,
                nonce_generator=nonce_generator,
                timestamp_generator=timestamp_generator
            )
        elif options:
            raise ValueError("Pass either a ClientConfig or options, not both")
        
        self._config = config
        self._signer = QuerySigner(config.secret)
        
        logger.info(f"Initialized JW Player API client for {self.base_url} (key: {config.key})")
    
    @property
    def config(self) -> ClientConfig:
        return self._config
    
    @property
    def options(self) -> Mapping[str, Any]:
        """Read-only view of the configured options"""
        return MappingProxyType(self._config.to_mapping())
    
    @property
    def base_url(self) -> str:
        """Scheme, host and version segment that request paths resolve against"""
        config = self._config
        return f"{to_text(config.scheme)}://{to_text(config.host)}/{to_text(config.version)}/"
    
    def signed_uri(
        self,
        path: str,
        params: RequestParams = None,
        options: Optional[SigningOptions] = None
    ) -> SplitResult:
        """
        Build a signed URL for ``path``.
        
        A relative path is resolved below the version segment; an absolute
        path such as ``/v2/videos/list`` replaces it.
        
        Args:
            path: API path, e.g. ``videos/list``
            params: Extra query parameters to send and sign
            options: Optional nonce/timestamp overrides for this call
            
        Returns:
            SplitResult: Normalized URL components
            
        Raises:
            ConfigurationError: If the configuration holds unknown option keys
        """
        context = self._create_signing_context(params, options)
        
        signing_options = self._config.to_mapping()
        signing_options.update(context.signable_values())
        attributes = classify_attributes(signing_options)
        
        signed = self._signer.sign(context.params, attributes)
        
        parts = urlsplit(urljoin(self.base_url, path))
        uri = SplitResult(
            scheme=parts.scheme.lower(),
            netloc=parts.netloc.lower(),
            path=parts.path or '/',
            query=signed.query,
            fragment=''
        )
        
        logger.debug(f"Signed request for {uri.path} (nonce: {context.nonce})")
        return uri
    
    def signed_url(
        self,
        path: str,
        params: RequestParams = None,
        options: Optional[SigningOptions] = None
    ) -> str:
        """Signed URL for ``path`` as a string"""
        return self.signed_uri(path, params, options).geturl()
    
    sign = signed_url
    
    def _create_signing_context(
        self,
        params: RequestParams,
        options: Optional[SigningOptions]
    ) -> SigningContext:
        """
        Create the call-local signing context.
        
        Injected values win over the configured generators, which win over
        the built-in ones.
        """
        options = options or SigningOptions()
        
        nonce = options.nonce
        if nonce is None:
            nonce_gen = self._config.nonce_generator or generate_nonce
            nonce = nonce_gen()
        
        timestamp = options.timestamp
        if timestamp is None:
            timestamp_gen = self._config.timestamp_generator or generate_timestamp
            timestamp = timestamp_gen()
        
        return SigningContext(
            nonce=to_text(nonce),
            timestamp=to_text(timestamp),
            params=normalize_params(params)
        )


def create_client(**options: Any) -> Client:
    """
    Create a new client from options.
    
    Args:
        **options: Client options
        
    Returns:
        Client: Configured client instance
    """
    return Client(**options)


def sign_url(path: str, params: RequestParams = None, **options: Any) -> str:
    """
    Sign a single URL with the given options.
    
    Args:
        path: API path
        params: Extra query parameters
        **options: Client options
        
    Returns:
        str: Signed URL
    """
    return create_client(**options).sign(path, params)
