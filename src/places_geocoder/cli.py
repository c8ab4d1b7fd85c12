"""CLI entry point for places-geocoder command."""

import argparse
import dataclasses
import json
from typing import List, Optional
import sys

from .client import GeocodingClient, redact_url
from .config import ClientConfig, components_from_pairs
from .exceptions import (
    ApiStatusError,
    ConfigurationError,
    GeocoderError,
    TransportError,
    UsageError,
)
from .logging_config import configure_logging


def _setup_argument_parser() -> argparse.ArgumentParser:
    """Setup and return command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='places-geocoder',
        description='Geocode a place with the Google Places API. '
                    'Reads GMAP_KEY (and optionally GMAP_CLIENT) from the environment.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('location', help='place text, or "lat,lng" with --reverse')
    parser.add_argument('--reverse', action='store_true', help='reverse geocode a "lat,lng" pair')
    parser.add_argument('--all', action='store_true', help='print every candidate instead of the first')
    parser.add_argument('--language', help='two-letter response language')
    parser.add_argument('--region', help='two-letter region bias')
    parser.add_argument(
        '--component', action='append', default=[], metavar='NAME=VALUE',
        help='components filter, may be repeated (e.g. country=uk)'
    )
    return parser


def _output_results(results, show_all: bool) -> int:
    """Output results to stdout."""
    if show_all:
        print(json.dumps(results, indent=2, ensure_ascii=False))
        return 0

    if not results:
        print("No results found", file=sys.stderr)
        return 1
    print(json.dumps(results[0], indent=2, ensure_ascii=False))
    return 0


def _create_client(args: argparse.Namespace) -> GeocodingClient:
    """Factory function to create and configure the client."""
    config = ClientConfig.from_env()
    overrides = {}
    if args.language:
        overrides['language'] = args.language
    if args.region:
        overrides['region'] = args.region
    if args.component:
        overrides['components'] = components_from_pairs(args.component)
    return GeocodingClient(dataclasses.replace(config, **overrides))


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = _setup_argument_parser()

    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code or 0

    configure_logging()

    try:
        client = _create_client(args)
        if args.reverse:
            results = client.reverse_geocode(args.location)
        else:
            results = client.geocode(args.location)
        return _output_results(results, args.all)

    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 1
    except UsageError as e:
        print(str(e), file=sys.stderr)
        return 1
    except ApiStatusError as e:
        print(f"Error: {redact_url(e.url)}: Google Places API returned status '{e.status}'", file=sys.stderr)
        return 1
    except TransportError as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 1
    except GeocoderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
