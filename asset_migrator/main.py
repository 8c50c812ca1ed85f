"""Command-line entry point."""
import argparse
import asyncio
import logging
import sys

from asset_migrator import __version__
from asset_migrator.config import load_settings
from asset_migrator.exceptions import CatalogError, ConfigurationError
from asset_migrator.services.migration import migrate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asset-migrator",
        description="Copy every asset of a source upload API to a media host.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP calls")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        configure_logging("DEBUG" if args.verbose else "INFO")
        logger.error("%s", e)
        return 1

    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        asyncio.run(migrate(settings))
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1
    except CatalogError as e:
        logger.error("Could not list source assets: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
