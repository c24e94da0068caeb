"""End-to-end import of a catalog file into the datastore."""

import logging
from pathlib import Path

from catalog_importer.loaders import CatalogLoader, DocumentStore
from catalog_importer.parser import parse_catalog
from schemas.load_summary import LoadSummary

logger = logging.getLogger(__name__)


def process_catalog_file(
    file_path: Path | str,
    store: DocumentStore | None = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> LoadSummary:
    """Parse a catalog file and save its records.

    In dry-run mode nothing is written: the parsed counts and a sample
    group and article are logged, and the summary reports the parsed
    counts.

    Args:
        file_path: Path to the catalog XML file
        store: Datastore to save into (required unless dry_run)
        dry_run: If True, parse only and never touch the datastore
        verbose: If True, log every tokenizer event

    Returns:
        LoadSummary of the saved (or, in dry-run mode, parsed) records

    Raises:
        ParseError: If the file is missing or malformed
        ValueError: If no store is given outside dry-run mode
    """
    logger.info(f"Processing catalog file {file_path} (dry_run={dry_run})")

    result = parse_catalog(file_path, verbose=verbose)

    if dry_run:
        logger.info("Dry run: nothing will be saved to the datastore")
        logger.info(
            f"Parsed {len(result.article_groups)} article groups and "
            f"{len(result.articles)} articles"
        )
        if result.article_groups:
            sample_group = next(iter(result.article_groups.values()))
            logger.info(
                f"Sample article group:\n{sample_group.model_dump_json(indent=2, by_alias=True)}"
            )
        if result.articles:
            sample_article = next(iter(result.articles.values()))
            logger.info(
                f"Sample article:\n{sample_article.model_dump_json(indent=2, by_alias=True)}"
            )
        return LoadSummary(
            saved_article_groups=len(result.article_groups),
            saved_articles=len(result.articles),
        )

    if store is None:
        raise ValueError("A datastore is required unless dry_run is set")

    summary = CatalogLoader(store).save(result.article_groups, result.articles)
    if summary.errors:
        logger.warning(f"{len(summary.errors)} records could not be saved")
    return summary
