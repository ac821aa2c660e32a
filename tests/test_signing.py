"""
Test suite for the URL signature generation steps

Data examples, parameters and expected values are taken from the JW Player
platform API authentication reference.
"""

import random
import re
import time
from unittest.mock import patch

import pytest

from jwplayer_api.exceptions import ConfigurationError, ErrorCodes
from jwplayer_api.signing import (
    ALLOWED_KEYS,
    IGNORED_KEYS,
    QuerySigner,
    SignableKey,
    IgnoredKey,
    SigningContext,
    build_canonical_query,
    classify_attributes,
    escape,
    generate_nonce,
    generate_timestamp,
    normalize_params,
    salted_params,
    signature,
    sorted_params,
    to_query,
    validate_nonce,
    validate_timestamp,
)

API_KEY = 'XOqEAfxj'
API_SECRET = 'uA96CFtJa138E2T5GhKfngml'

EXAMPLE_PARAMS = [
    ('api_format', 'xml'),
    ('api_key', 'XOqEAfxj'),
    ('api_nonce', 80684843),
    ('api_timestamp', 1237387851),
    ('text', 'démo'),
]
EXAMPLE_QUERY = 'api_format=xml&api_key=XOqEAfxj&api_nonce=80684843&api_timestamp=1237387851&text=d%C3%A9mo'
EXAMPLE_SIGNATURE = 'fbdee51a45980f9876834dc5ee1ec5e93f67cb89'


class TestEscape:
    """Steps 1 & 2: UTF-8 text parameters are URL-encoded"""
    
    def test_encodes_multibyte_characters(self):
        """Each UTF-8 byte is encoded with uppercase hex digits"""
        assert escape('démo') == 'd%C3%A9mo'
    
    def test_unreserved_characters_are_kept(self):
        """Letters, digits, '-', '.', '_' and '~' are left alone"""
        value = 'AZaz09-._~'
        assert escape(value) == value
    
    def test_reserved_characters_are_encoded(self):
        """Separators and spaces are always encoded"""
        assert escape('a b&c=d/e+f') == 'a%20b%26c%3Dd%2Fe%2Bf'
        assert escape('*') == '%2A'
    
    def test_non_string_values(self):
        """Values are converted to text before encoding"""
        assert escape(80684843) == '80684843'
        assert escape(None) == ''
        assert escape(b'd\xc3\xa9mo') == 'd%C3%A9mo'
        assert escape(SignableKey.FORMAT) == 'format'
    
    def test_invalid_utf8_bytes(self):
        """Raw bytes are encoded byte by byte even when not valid UTF-8"""
        assert escape(b'\xff') == '%FF'
        assert escape(b'\xff\xfe') == '%FF%FE'
        assert escape(b'd\xe9mo') == 'd%E9mo'


class TestNonceAndTimestamp:
    """Test per-call nonce and timestamp generation"""
    
    def test_generate_nonce(self):
        """Nonces are 8 digit strings"""
        nonce = generate_nonce()
        assert isinstance(nonce, str)
        assert re.match(r'^\d{8}$', nonce)
        assert validate_nonce(nonce)
    
    def test_nonce_is_zero_padded(self):
        """Small random values still give 8 digits"""
        with patch('jwplayer_api.signing.utils.secrets.randbelow', return_value=42):
            assert generate_nonce() == '00000042'
    
    def test_nonces_differ(self):
        """Generated nonces are random"""
        nonces = {generate_nonce() for _ in range(20)}
        assert len(nonces) > 1
    
    def test_generate_timestamp(self):
        """Timestamp is the current Unix time in seconds, as text"""
        timestamp = generate_timestamp()
        assert isinstance(timestamp, str)
        assert validate_timestamp(timestamp)
        assert abs(int(timestamp) - int(time.time())) < 2
    
    def test_validate_nonce(self):
        """Test nonce validation"""
        assert validate_nonce('80684843')
        assert not validate_nonce('1234567')
        assert not validate_nonce('123456789')
        assert not validate_nonce('abcdefgh')
        assert not validate_nonce(80684843)
        assert not validate_nonce(None)
    
    def test_validate_timestamp(self):
        """Test timestamp validation"""
        assert validate_timestamp('1237387851')
        assert not validate_timestamp('946684799')  # Before 2000
        assert not validate_timestamp('4102444801')  # After 2100
        assert not validate_timestamp('-1')
        assert not validate_timestamp(1237387851)


class TestAttributeClassification:
    """Test splitting options into signed attributes"""
    
    def test_key_sets(self):
        """Signable and ignored key sets are disjoint and closed"""
        assert ALLOWED_KEYS == {'format', 'key', 'nonce', 'timestamp'}
        assert IGNORED_KEYS == {'host', 'scheme', 'secret', 'signature', 'version'}
        assert not ALLOWED_KEYS & IGNORED_KEYS
        assert IgnoredKey.SECRET == 'secret'
    
    def test_returns_signable_subset(self):
        """Only signable keys become api_* attributes, in mapping order"""
        options = {
            'host': 'api.jwplatform.com',
            'scheme': 'https',
            'version': 'v1',
            'key': API_KEY,
            'secret': API_SECRET,
            'format': 'json',
            'nonce': '80684843',
            'timestamp': '1237387851',
        }
        
        assert classify_attributes(options) == [
            ('api_key', API_KEY),
            ('api_format', 'json'),
            ('api_nonce', '80684843'),
            ('api_timestamp', '1237387851'),
        ]
    
    def test_ignored_keys_are_dropped(self):
        """A 'signature' option is legal but never signed"""
        attributes = classify_attributes({'key': API_KEY, 'signature': 'abc', 'secret': API_SECRET})
        assert attributes == [('api_key', API_KEY)]
    
    def test_unknown_keys_raise(self):
        """Every unknown key is reported, not just the first one"""
        with pytest.raises(ConfigurationError) as exc_info:
            classify_attributes({'key': API_KEY, 'extra': 'forbidden', 'other': 1})
        
        error = exc_info.value
        assert error.error_code == ErrorCodes.UNKNOWN_OPTION_KEYS
        assert error.details['unknown_keys'] == ['extra', 'other']
        assert "'extra'" in str(error)
        assert "'other'" in str(error)


class TestCanonicalQuery:
    """Steps 3 & 4: parameters are sorted and concatenated"""
    
    def test_sorted_params(self):
        """Entries are sorted by name in byte value order"""
        shuffled = list(EXAMPLE_PARAMS)
        random.Random(7).shuffle(shuffled)
        
        assert sorted_params(shuffled) == EXAMPLE_PARAMS
    
    def test_sort_is_by_key_and_stable(self):
        """Duplicate keys keep their relative order regardless of value"""
        entries = [('b', '2'), ('a', 'z'), ('b', '1'), ('a', 'y')]
        assert sorted_params(entries) == [('a', 'z'), ('a', 'y'), ('b', '2'), ('b', '1')]
    
    def test_uppercase_sorts_before_lowercase(self):
        """Byte value ordering, not case-insensitive ordering"""
        entries = [('b', '1'), ('B', '2'), ('a', '3')]
        assert [key for key, _ in sorted_params(entries)] == ['B', 'a', 'b']
    
    def test_to_query(self):
        """Values are escaped and joined as key=value pairs"""
        assert to_query(EXAMPLE_PARAMS) == EXAMPLE_QUERY
    
    def test_build_canonical_query(self):
        """Request params and attributes are merged before sorting"""
        params = [('text', 'démo')]
        attributes = [
            ('api_key', 'XOqEAfxj'),
            ('api_format', 'xml'),
            ('api_nonce', '80684843'),
            ('api_timestamp', '1237387851'),
        ]
        
        assert build_canonical_query(params, attributes) == EXAMPLE_QUERY
    
    def test_duplicate_keys_are_kept(self):
        """A key in both sources is emitted twice"""
        query = build_canonical_query([('api_key', 'mine')], [('api_key', API_KEY)])
        assert query == f'api_key=mine&api_key={API_KEY}'
    
    def test_normalize_params(self):
        """Mappings and pair sequences normalize to tuples of pairs"""
        assert normalize_params(None) == ()
        assert normalize_params({'text': 'démo'}) == (('text', 'démo'),)
        assert normalize_params([('a', 1), ('a', 2)]) == (('a', 1), ('a', 2))


class TestSignature:
    """Steps 5 & 6: salting and SHA-1 digest"""
    
    def test_salted_params(self):
        """The secret is appended with no separator"""
        salted = salted_params(EXAMPLE_QUERY, API_SECRET)
        assert salted == EXAMPLE_QUERY + API_SECRET
        assert salted.endswith('d%C3%A9mouA96CFtJa138E2T5GhKfngml')
    
    def test_signature(self):
        """Known SHA-1 hex digest of the salted example"""
        token = salted_params(EXAMPLE_QUERY, API_SECRET)
        digest = signature(token)
        
        assert digest == EXAMPLE_SIGNATURE
        assert len(digest) == 40
        assert digest == digest.lower()
    
    def test_signature_is_deterministic(self):
        """Identical input gives identical output"""
        token = salted_params(EXAMPLE_QUERY, API_SECRET)
        assert signature(token) == signature(token)
    
    def test_query_signer(self):
        """Request query keeps params first and ends with the signature"""
        signer = QuerySigner(API_SECRET)
        attributes = [
            ('api_key', 'XOqEAfxj'),
            ('api_format', 'xml'),
            ('api_nonce', '80684843'),
            ('api_timestamp', '1237387851'),
        ]
        
        signed = signer.sign([('text', 'démo')], attributes)
        
        assert signed.canonical_query == EXAMPLE_QUERY
        assert signed.signature == EXAMPLE_SIGNATURE
        assert signed.query == (
            'text=d%C3%A9mo&api_key=XOqEAfxj&api_format=xml&api_nonce=80684843'
            '&api_timestamp=1237387851&api_signature=' + EXAMPLE_SIGNATURE
        )
        assert signer.compute_signature([('text', 'démo')], attributes) == EXAMPLE_SIGNATURE


class TestSigningContext:
    """Test the call-local signing context"""
    
    def test_signable_values(self):
        """Nonce and timestamp are exposed as option values"""
        context = SigningContext(nonce='80684843', timestamp='1237387851')
        assert context.signable_values() == {'nonce': '80684843', 'timestamp': '1237387851'}
        assert context.params == ()
    
    def test_empty_values_rejected(self):
        """Test context validation"""
        with pytest.raises(ValueError):
            SigningContext(nonce='', timestamp='1237387851')
        
        with pytest.raises(ValueError):
            SigningContext(nonce='80684843', timestamp='')
    
    def test_context_is_immutable(self):
        """Contexts cannot be mutated after creation"""
        context = SigningContext(nonce='80684843', timestamp='1237387851')
        with pytest.raises(AttributeError):
            context.nonce = '1'
