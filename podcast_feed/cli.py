#!/usr/bin/env python3
"""Main CLI entry point for podcast feed loading."""

import argparse
import json
import logging
import sys
from datetime import timedelta

from .config import load_config
from .exceptions import PodcastError
from .logger import logger, setup_logger
from .models import Podcast
from .podcast import load_feed


def _print_summary(podcast: Podcast):
    """Print a human readable overview of a podcast."""
    print(podcast.title or podcast.url)
    if podcast.copyright:
        print(f"  by {podcast.copyright}")
    if podcast.link:
        print(f"  {podcast.link}")
    print(f"  {len(podcast.episodes)} episode(s)")

    for episode in podcast.episodes:
        date = episode.published_at.strftime("%Y-%m-%d") if episode.published_at else "----------"
        print(f"{date}  {episode.title or episode.guid or '(untitled)'}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Load a podcast RSS feed')
    parser.add_argument('url', help='Feed URL')
    parser.add_argument('--config', '-c', type=str,
                        help='Path to config file (default: config.toml)')
    parser.add_argument('--timeout', '-t', type=int,
                        help='Request timeout in milliseconds')
    parser.add_argument('--cache-max-age', type=int, metavar='SECONDS',
                        help='Serve the feed from the cache while younger than this')
    parser.add_argument('--cache-dir', type=str,
                        help='Directory for cached feeds')
    parser.add_argument('--json', action='store_true',
                        help='Print the podcast as JSON')
    parser.add_argument('--progress', action='store_true',
                        help='Show a download progress bar')
    parser.add_argument('--debug', '-d', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv=None):
    """Main entry point: load config, load the feed and print it."""
    args = build_parser().parse_args(argv)

    if args.debug:
        setup_logger(level=logging.DEBUG)

    config = load_config(args.config)

    # CLI flags override config values
    timeout = args.timeout if args.timeout is not None else config.timeout
    cache_max_age = config.cache_max_age
    if args.cache_max_age is not None:
        cache_max_age = timedelta(seconds=args.cache_max_age)
    cache_dir = args.cache_dir or config.get_cache_dir()

    try:
        podcast = load_feed(
            args.url,
            timeout=timeout,
            cache_max_age=cache_max_age,
            cache_directory=cache_dir,
            show_progress=args.progress,
        )
    except PodcastError as e:
        logger.error(f"Error loading feed '{args.url}': {e}")
        return 1

    if args.json:
        print(json.dumps(podcast.to_dict(), indent=2))
    else:
        _print_summary(podcast)
    return 0


if __name__ == "__main__":
    sys.exit(main())
