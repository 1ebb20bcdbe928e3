#!/usr/bin/env python3
"""
Command line entry point for the USPTO trademark extractor.

Usage:
    python run_parser.py --file status.xml          # Parse a downloaded TSDR document
    python run_parser.py --serial 87654321          # Fetch from TSDR and parse
    python run_parser.py --file status.xml --json   # Print the record as JSON
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from trademark_extractor.config import load_config, setup_logging
from trademark_extractor.tsdr_client import TSDRClient
from trademark_extractor.xml_parser import MalformedXMLError, TrademarkXMLParser
from dotenv import load_dotenv


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Extract a normalized record from a USPTO TSDR trademark XML document.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_parser.py --file status.xml            Parse a local document
  python run_parser.py --serial 87654321            Fetch from TSDR and parse
  python run_parser.py --serial 87654321 --json     Print JSON instead of a summary
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)

    source.add_argument(
        '--file', '-f',
        type=str,
        help='Path to a TSDR XML document'
    )

    source.add_argument(
        '--serial', '-s',
        type=str,
        help='Serial number to fetch from the TSDR API'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the record as JSON'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        default='config/config.yaml',
        help='Path to configuration file'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    args = parser.parse_args(argv)

    # Load environment variables
    load_dotenv()

    config = load_config(args.config)
    if args.verbose:
        # A bare 'logging:' key loads as None
        config['logging'] = config.get('logging') or {}
        config['logging']['level'] = 'DEBUG'
    setup_logging(config)

    try:
        if args.file:
            record = TrademarkXMLParser().parse_file(args.file)
        else:
            client = TSDRClient.from_config(config)
            record = client.fetch_record(args.serial)
            if record is None:
                print(f"Could not retrieve trademark {args.serial} from TSDR")
                return 1
    except MalformedXMLError as e:
        print(f"Error: document is not well-formed XML: {e.detail}")
        return 1
    except OSError as e:
        print(f"Error reading {args.file}: {e}")
        return 1

    if args.json:
        print(record.to_json())
    else:
        print_summary(record)

    return 0


def print_summary(record):
    """Print a human-readable summary of a parsed record."""
    print("=" * 60)
    print("  PARSED USPTO TRADEMARK DATA")
    if record.fallback_mode:
        print("  (no Trademark element, read from document root)")
    print("=" * 60)

    print("\n--- Registration Info ---")
    print(f"  Registration #: {record.basic_info.registration_number}")
    print(f"  Application #:  {record.basic_info.application_number}")
    print(f"  Filed:          {record.dates.application_date}")
    print(f"  Registered:     {record.dates.registration_date}")

    if record.mark:
        print("\n--- Mark ---")
        print(f"  Text: {record.mark.text}")
        print(f"  Standard Character: {record.mark.is_standard_character}")
        if record.mark.disclaimer:
            print(f"  Disclaimer: {record.mark.disclaimer}")

    if record.owner:
        print("\n--- Owner ---")
        print(f"  Name: {record.owner.name}")
        print(f"  Type: {record.owner.legal_entity_name}")
        print(f"  State: {record.owner.incorporation_state}")
        _print_address(record.owner.address)

    if record.correspondent:
        print("\n--- Correspondent ---")
        print(f"  Name: {record.correspondent.name}")
        print(f"  Firm: {record.correspondent.organization}")
        print(f"  Email: {record.correspondent.email}")
        _print_address(record.correspondent.address)

    if record.attorney:
        print("\n--- Attorney ---")
        print(f"  Name: {record.attorney.name}")
        print(f"  Docket: {record.attorney.docket_number}")

    if record.goods_services:
        print("\n--- Goods/Services ---")
        for gs in record.goods_services:
            description = (gs.description or '')[:100]
            print(f"  Class {gs.class_number}: {description}")

    print("\n--- Status ---")
    print(f"  {record.status.code} ({record.status.date}): {record.status.description}")

    if record.prosecution_history:
        print("\n--- Prosecution History ---")
        for event in record.prosecution_history[:10]:
            print(f"  {event.date or '----------'}  {event.code or '':6} {event.description or ''}")
        if len(record.prosecution_history) > 10:
            print(f"  ... and {len(record.prosecution_history) - 10} more events")


def _print_address(address):
    if address is None:
        return
    print(f"  Address: {', '.join(address.lines)}")
    print(f"  City/State: {address.city}, {address.state_or_region} {address.postal_code or ''}".rstrip())


if __name__ == '__main__':
    sys.exit(main())
