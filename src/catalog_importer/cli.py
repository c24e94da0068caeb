"""Command-line interface for catalog-importer."""

import argparse
import logging
import sys
from pathlib import Path

from catalog_importer.clients import ClientError, PayloadClient
from catalog_importer.importer import process_catalog_file
from catalog_importer.parser import CatalogNotFoundError, ParseError

DEFAULT_API_URL = "http://localhost:3000"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def import_catalog(args: argparse.Namespace) -> int:
    """Parse a catalog file and save it, or only report it on a dry run.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    file_path = args.file.resolve()

    try:
        if args.dry_run:
            summary = process_catalog_file(
                file_path, dry_run=True, verbose=args.verbose
            )
        else:
            config = {"base_url": args.api_url}
            if args.api_key:
                config["api_key"] = args.api_key
            with PayloadClient(config) as client:
                summary = process_catalog_file(
                    file_path, store=client, verbose=args.verbose
                )

    except CatalogNotFoundError as e:
        logger.error(e.message)
        return 1
    except ParseError as e:
        logger.error(f"Failed to parse catalog: {e.message}")
        return 1
    except ClientError as e:
        logger.error(f"Datastore error: {e.message}")
        return 1
    except Exception as e:
        logger.error(f"Catalog import failed: {e}")
        return 1

    action = "Parsed" if args.dry_run else "Saved"
    logger.info(f"Catalog import complete for {file_path.name}")
    logger.info(f"  {action} article groups: {summary.saved_article_groups}")
    logger.info(f"  {action} articles: {summary.saved_articles}")

    if summary.errors:
        logger.warning(f"  Errors: {len(summary.errors)}")
        for error in summary.errors:
            logger.warning(f"    - {error}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="catalog-importer",
        description="Import articles and article groups from a vendor XML catalog",
    )
    parser.add_argument(
        "file",
        type=Path,
        help="Path to the catalog XML file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output, including every XML event",
    )
    parser.add_argument(
        "-d", "--dry-run",
        action="store_true",
        help="Parse the catalog without saving anything to the datastore",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=DEFAULT_API_URL,
        help=f"Payload CMS base URL (default: {DEFAULT_API_URL})",
    )
    parser.add_argument(
        "--api-key",
        type=str,
        default=None,
        help="Payload CMS API key",
    )

    args = parser.parse_args(argv)
    return import_catalog(args)


if __name__ == "__main__":
    sys.exit(main())
