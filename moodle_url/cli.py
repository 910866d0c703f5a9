#!/usr/bin/env python3
import argparse
import json
import logging
import sys

from .config_manager import get_config_from_env
from .describe import describe_url
from .exceptions import MoodleUrlError
from .parser import parse, parse_valid_url
from .resolver import guess_moodle_domain, same_domain_and_path, to_absolute_url, to_relative_url
from .vimeo import get_vimeo_player_url


class StaticSite:
    """Site built from command line values."""

    def __init__(self, url: str, token: str):
        self.url = url
        self.token = token

    def get_url(self) -> str:
        return self.url

    def get_token(self) -> str:
        return self.token


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='moodle-url', description='Moodle site URL helpers')
    parser.add_argument('--compact', action='store_true', help='Compact JSON output')
    parser.add_argument('--log-file', help='Write debug log to specified file')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    commands = parser.add_subparsers(dest='command', required=True)

    parse_cmd = commands.add_parser('parse', help='Split a URL into its parts')
    parse_cmd.add_argument('url')
    parse_cmd.add_argument('--strict', action='store_true',
                           help='Fail if the URL is not valid for connecting to a site')

    describe_cmd = commands.add_parser('describe', help='Summarize one or more URLs')
    describe_cmd.add_argument('urls', nargs='+')

    guess_cmd = commands.add_parser('guess-domain', help='Guess the Moodle site domain of a URL')
    guess_cmd.add_argument('url')

    absolute_cmd = commands.add_parser('absolute', help='Make a URL absolute against a parent URL')
    absolute_cmd.add_argument('parent_url')
    absolute_cmd.add_argument('url')

    relative_cmd = commands.add_parser('relative', help='Make a URL relative to a parent URL')
    relative_cmd.add_argument('parent_url')
    relative_cmd.add_argument('url')

    same_cmd = commands.add_parser('same', help='Check if two URLs have the same domain and path')
    same_cmd.add_argument('url_a')
    same_cmd.add_argument('url_b')

    vimeo_cmd = commands.add_parser('vimeo', help='Get the site player URL for a Vimeo video')
    vimeo_cmd.add_argument('url')
    vimeo_cmd.add_argument('--site-url', required=True, help='Site base URL')
    vimeo_cmd.add_argument('--token', required=True, help='Site session token')

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config_from_env()
    except MoodleUrlError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    log_level = logging.DEBUG if args.debug else config.logging.level
    logging.basicConfig(
        level=log_level,
        filename=args.log_file,
        format=config.logging.format
    )

    indent = None if args.compact else 2
    exit_code = 0

    try:
        if args.command == 'parse':
            parts = parse_valid_url(args.url, config=config) if args.strict else parse(args.url, config=config)
            result = parts.to_dict()
        elif args.command == 'describe':
            result = [describe_url(url, config=config) for url in args.urls]
        elif args.command == 'guess-domain':
            result = guess_moodle_domain(args.url, config=config)
        elif args.command == 'absolute':
            result = to_absolute_url(args.parent_url, args.url, config=config)
        elif args.command == 'relative':
            result = to_relative_url(args.parent_url, args.url, config=config)
        elif args.command == 'same':
            result = same_domain_and_path(args.url_a, args.url_b, config=config)
            exit_code = 0 if result else 1
        else:
            site = StaticSite(args.site_url, args.token)
            result = get_vimeo_player_url(args.url, site, config=config)
    except MoodleUrlError as e:
        logging.error(f"Command '{args.command}' failed: {e}")
        print(f"✗ {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=indent))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
