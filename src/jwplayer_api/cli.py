"""
Command-line interface for the JW Player API client
Prints signed URLs, checks them, and stores credentials in the OS keyring
"""

import argparse
import getpass
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

from . import __version__
from .client import Client
from .config.client_config import ClientConfig, load_options_file
from .config.credentials import KeyringCredentialProvider, default_credential_provider
from .exceptions import JWPlayerSDKError, MissingCredentialError
from .verification import verify_signed_url


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='jwplayer-sign',
        description='Build and check signed JW Player platform API URLs'
    )
    
    parser.add_argument(
        '--version',
        action='version',
        version=f'JW Player API client {__version__}'
    )
    
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    
    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    
    setup_sign_parser(subparsers)
    setup_verify_parser(subparsers)
    setup_store_parser(subparsers)
    
    return parser


def add_credential_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by commands that need API credentials."""
    parser.add_argument('--key', help='API key (default: JWPLAYER_API_KEY)')
    parser.add_argument('--secret', help='API secret (default: JWPLAYER_API_SECRET)')
    parser.add_argument(
        '--use-keyring',
        action='store_true',
        help='Fall back to credentials stored in the OS keyring'
    )


def setup_sign_parser(subparsers):
    """Setup sign subcommand."""
    sign_parser = subparsers.add_parser('sign', help='Print a signed URL for an API path')
    sign_parser.add_argument('path', help='API path, e.g. videos/list')
    sign_parser.add_argument(
        '-p', '--param',
        action='append',
        default=[],
        metavar='NAME=VALUE',
        help='Extra query parameter (repeatable)'
    )
    sign_parser.add_argument('--config', help='JSON file with client options')
    sign_parser.add_argument('--host', help='API host')
    sign_parser.add_argument('--scheme', help='URL scheme')
    sign_parser.add_argument('--api-version', help='API version path segment')
    sign_parser.add_argument('--format', help='Response format')
    add_credential_arguments(sign_parser)


def setup_verify_parser(subparsers):
    """Setup verify subcommand."""
    verify_parser = subparsers.add_parser('verify', help='Check the signature of a signed URL')
    verify_parser.add_argument('url', help='Signed URL')
    verify_parser.add_argument('--max-age', type=int, help='Maximum signature age in seconds')
    add_credential_arguments(verify_parser)


def setup_store_parser(subparsers):
    """Setup store-credentials subcommand."""
    store_parser = subparsers.add_parser(
        'store-credentials',
        help='Save API key and secret in the OS keyring'
    )
    store_parser.add_argument('--key', required=True, help='API key')
    store_parser.add_argument('--secret', help='API secret (prompted when omitted)')


def parse_params(values: List[str]) -> List[Tuple[str, str]]:
    """Split NAME=VALUE arguments into pairs."""
    params = []
    for value in values:
        name, sep, param_value = value.partition('=')
        if not sep or not name:
            raise ValueError(f"Invalid parameter '{value}', expected NAME=VALUE")
        params.append((name, param_value))
    return params


def collect_options(args) -> Dict[str, Any]:
    """Merge config file options with command line overrides."""
    options: Dict[str, Any] = {}
    if getattr(args, 'config', None):
        options.update(load_options_file(args.config))
    
    overrides = {
        'key': args.key,
        'secret': args.secret,
        'host': getattr(args, 'host', None),
        'scheme': getattr(args, 'scheme', None),
        'version': getattr(args, 'api_version', None),
        'format': getattr(args, 'format', None),
    }
    options.update({name: value for name, value in overrides.items() if value is not None})
    return options


def handle_sign_command(args) -> int:
    """Handle printing a signed URL."""
    try:
        params = parse_params(args.param)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    config = ClientConfig.from_mapping(
        collect_options(args),
        default_credential_provider(use_keyring=args.use_keyring)
    )
    client = Client(config)
    print(client.sign(args.path, params))
    return 0


def handle_verify_command(args) -> int:
    """Handle checking a signed URL."""
    provider = default_credential_provider(use_keyring=args.use_keyring)
    secret = args.secret or provider.get_secret()
    if not secret:
        raise MissingCredentialError(
            f"Missing 'secret' option or {provider.describe('secret')}",
            {"option": "secret"}
        )
    
    result = verify_signed_url(args.url, secret, args.max_age)
    
    if result.is_valid:
        print("✓ Signature is valid")
        return 0
    
    print(f"✗ Signature is {result.status.value}: {result.message}")
    return 1


def handle_store_command(args) -> int:
    """Handle saving credentials to the keyring."""
    secret = args.secret or getpass.getpass('API secret: ')
    if not secret:
        print("Error: API secret cannot be empty", file=sys.stderr)
        return 1
    
    KeyringCredentialProvider().store(args.key, secret)
    print("✓ Credentials stored in keyring")
    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI
    
    Args:
        argv: Command line arguments (None to use sys.argv)
        
    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]
    
    parser = create_parser()
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s %(message)s'
    )
    
    try:
        if args.command == 'sign':
            return handle_sign_command(args)
        elif args.command == 'verify':
            return handle_verify_command(args)
        elif args.command == 'store-credentials':
            return handle_store_command(args)
        else:
            # No command specified, show help
            parser.print_help()
            return 1
        
    except JWPlayerSDKError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
