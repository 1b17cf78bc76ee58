#!/usr/bin/env python3
"""
Command line interface for querying OpenLDBSVWS.

Usage:
    ldbsv service <RID> [-t TOKEN] [--json]
"""

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from code_tables import describe_category
from config import AppConfig, get_config
from models import LatenessStatus, ServiceDetails, ServiceLocation
from train_tools import TrainTools

logger = logging.getLogger(__name__)


LOG_HANDLER_NAMES = ('ldbsv.console', 'ldbsv.file')


def setup_logging(config: AppConfig) -> None:
    """Configure console and rotating file logging from configuration, replacing any earlier setup."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, config.log_level))
    for handler in list(root.handlers):
        if handler.get_name() in LOG_HANDLER_NAMES:
            root.removeHandler(handler)
            handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.set_name(LOG_HANDLER_NAMES[0])
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root.addHandler(console_handler)

    # File handler (not in testing mode)
    if not config.testing:
        log_dir = os.path.dirname(config.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.log_file, maxBytes=config.log_max_bytes, backupCount=config.log_backup_count
        )
        file_handler.set_name(LOG_HANDLER_NAMES[1])
        file_handler.setLevel(getattr(logging, config.log_level))
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        root.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='ldbsv', description='Query data from OpenLDBSVWS')
    subparsers = parser.add_subparsers(dest='command', required=True)

    service = subparsers.add_parser('service', help='Get information about a service')
    service.add_argument('rid', metavar='SERVICE', help='RTTI ID of the service')
    service.add_argument('-t', '--token', help='OpenLDBSVWS token (defaults to LDB_TOKEN)')
    service.add_argument('--json', action='store_true', help='Print the parsed service as JSON')
    return parser


def _format_time(location: ServiceLocation) -> str:
    time = location.time
    scheduled = time.scheduled_departure or time.scheduled_arrival
    if scheduled is None:
        return '     '
    return scheduled.strftime('%H:%M')


def _format_status(location: ServiceLocation) -> str:
    if location.is_cancelled:
        return 'Cancelled'
    record = location.time.departure or location.time.arrival
    lateness = record.lateness() if record else None
    if lateness is None:
        return ''
    minutes = int(lateness.delta.total_seconds() / 60)
    if lateness.status is LatenessStatus.LATE:
        return f"{minutes} min late"
    if lateness.status is LatenessStatus.EARLY:
        return f"{-minutes} min early"
    return 'On time'


def format_service_details(details: ServiceDetails) -> str:
    """Format service details into readable text."""
    lines = [
        f"Service {details.rid}",
        f"UID {details.uid}",
        f"RSID {details.rsid or 'unknown'}",
        f"Headcode {details.trainid}",
        f"Departs {details.sdd.isoformat()}",
        f"Type {describe_category(details.category)} ({details.category})",
        f"Operated by {details.operator} ({details.operator_code})",
    ]
    if details.cancel_reason:
        lines.append(f"Cancelled: {details.cancel_reason}")
    if details.delay_reason:
        lines.append(f"Delayed: {details.delay_reason}")
    lines.append('')

    for location in details.locations:
        if location.is_pass:
            continue
        platform = f"Plat {location.platform}" if location.platform is not None and not location.platform_is_hidden else ''
        lines.append(
            f"{_format_time(location)}  {location.location.name:<30} {platform:<8} {_format_status(location)}".rstrip()
        )
    return '\n'.join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    setup_logging(config)

    if not args.token:
        missing_keys = config.validate_required_keys()
        if missing_keys:
            logger.warning(f'Missing required configuration: {", ".join(missing_keys)}')

    logger.debug(f"Fetching service {args.rid}")
    tools = TrainTools(ldb_token=args.token)
    result = tools.get_service_details(args.rid)

    if not isinstance(result, ServiceDetails):
        print(f"Error: {result.error}: {result.message}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(format_service_details(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
