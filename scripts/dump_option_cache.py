#!/usr/bin/env python3
"""
CLI tool for inspecting the ClickUp dropdown option cache.

Refreshes an OptionCache from the configured applications list (same
settings as the API: environment / .env) and prints it as JSON. Optionally
resolves a sample answer against one field, which is the quickest way to see
why a storefront answer was dropped.

Usage:
    python scripts/dump_option_cache.py
    python scripts/dump_option_cache.py --field aec8f523-e21d-4cd7-a359-d52f712009cb --value "U.S. citizen"
    python scripts/dump_option_cache.py --list-id 901100 --verbose

Exit codes:
    0 - cache loaded (and sample resolved, when requested)
    1 - no dropdown fields loaded
    2 - sample value did not resolve
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.domain.applications.services.option_cache import OptionCache
from src.domain.applications.services.option_matchers import default_matchers
from src.domain.applications.services.option_resolver import OptionResolver
from src.infrastructure.clickup import ClickUpClient
from src.shared.config import AppSettings, configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Dump the ClickUp dropdown option cache",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Dump every dropdown field of CLICKUP_LIST_ID
  python scripts/dump_option_cache.py

  # Check how an answer resolves on the work-eligibility field
  python scripts/dump_option_cache.py --field aec8f523-e21d-4cd7-a359-d52f712009cb --value "US citizen"
        """,
    )
    parser.add_argument(
        "--list-id",
        default=None,
        help="List to load (default: CLICKUP_LIST_ID)",
    )
    parser.add_argument(
        "--field",
        default=None,
        help="Custom-field id to resolve --value against",
    )
    parser.add_argument(
        "--value",
        default=None,
        help="Sample free-text answer to resolve",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Main execution function. Returns the process exit code."""
    args = parse_args(argv)
    settings = AppSettings.from_env()
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    client = ClickUpClient(
        token=settings.clickup_token,
        base_url=settings.clickup_api_url,
        team_id=settings.clickup_team_id,
        timeout=settings.request_timeout_seconds,
    )
    try:
        cache = OptionCache(client, args.list_id or settings.clickup_list_id)
        loaded = await cache.refresh()
        print(json.dumps(cache.snapshot(), indent=2, ensure_ascii=False))

        if loaded == 0:
            logger.error("No dropdown fields loaded; check CLICKUP_TOKEN and CLICKUP_LIST_ID")
            return 1

        if args.field and args.value is not None:
            resolver = OptionResolver(cache, default_matchers(settings.fields.work_eligibility))
            option_id = resolver.resolve(args.field, args.value)
            if option_id is None:
                logger.warning(f"'{args.value}' did not resolve on field {args.field}")
                return 2
            logger.info(f"'{args.value}' -> {option_id}")
        return 0
    finally:
        await client.aclose()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
