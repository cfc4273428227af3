import argparse
import logging
import sys
from typing import List, Optional

from .clients import PokeAPIError
from .config import ConfigurationError, get_settings
from .dependencies import close_poke_client, get_pokemon_service
from .services import format_summary

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    # Logs go to stderr so stdout only carries the command output
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def cmd_get(args: argparse.Namespace) -> int:
    service = get_pokemon_service()
    try:
        summary = service.get_summary(args.name)
    except PokeAPIError as e:
        # The client has already logged the failure
        print(f"Error: {e.detail}", file=sys.stderr)
        return 1
    except ValueError as e:
        logger.error(f"Invalid Pokemon name: {args.name!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in format_summary(summary):
        print(line)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokecli",
        description="Query PokeAPI from the command line.",
    )
    subparsers = parser.add_subparsers(dest="command")

    get_parser = subparsers.add_parser(
        "get",
        help="Get related information from PokeAPI by using a pokemon name as the argument",
    )
    get_parser.add_argument("name", help="Pokemon name or id, e.g. ditto")
    get_parser.set_defaults(handler=cmd_get)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)

    if not getattr(args, "handler", None):
        parser.print_help()
        return 2

    try:
        return args.handler(args)
    finally:
        close_poke_client()


if __name__ == "__main__":
    sys.exit(main())
