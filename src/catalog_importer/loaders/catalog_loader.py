"""Catalog loader upserting parsed records into the datastore."""

import logging
from typing import Any, Protocol

from schemas.catalog import Article, ArticleGroup
from schemas.load_summary import LoadSummary

logger = logging.getLogger(__name__)

ARTICLE_GROUPS_COLLECTION = "ez_articleGroups"
ARTICLES_COLLECTION = "ez_articles"


class DocumentStore(Protocol):
    """Document store operations the loader relies on."""

    def find(self, collection: str, filter: dict[str, Any]) -> list[dict[str, Any]]:
        ...

    def create(self, collection: str, data: dict[str, Any]) -> dict[str, Any]:
        ...

    def update(
        self, collection: str, id: str, data: dict[str, Any]
    ) -> dict[str, Any]:
        ...


class CatalogLoader:
    """Upserts article groups and articles by natural key.

    Groups are matched on ``externalId`` and articles on ``sku``. All groups
    are saved before any article so that each article's natural-key group
    reference can be replaced by the group's internal document id.

    Saving is best effort per record: a failure is logged and recorded in
    the summary, and the remaining records are still saved.

    Example:
        with PayloadClient(config) as client:
            summary = CatalogLoader(client).save(result.article_groups, result.articles)
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    def save(
        self,
        article_groups: dict[str, ArticleGroup],
        articles: dict[str, Article],
    ) -> LoadSummary:
        """Save groups, then articles.

        Args:
            article_groups: Groups keyed by external id
            articles: Articles keyed by SKU

        Returns:
            LoadSummary with counts of saved records and per-record errors
        """
        summary = LoadSummary()
        group_ids: dict[str, str] = {}

        logger.info(f"Saving {len(article_groups)} article groups")
        for external_id, group in article_groups.items():
            try:
                group_ids[external_id] = self._save_article_group(external_id, group)
                summary.saved_article_groups += 1
            except Exception as e:
                logger.error(f"Failed to save article group {external_id} ({group.name}): {e}")
                summary.errors.append(f"Article group {external_id}: {e}")

        logger.info(f"Saving {len(articles)} articles")
        for sku, article in articles.items():
            try:
                self._save_article(article, group_ids)
                summary.saved_articles += 1
            except Exception as e:
                logger.error(f"Failed to save article {sku}: {e}")
                summary.errors.append(f"Article {sku}: {e}")

        logger.info(
            f"Saved {summary.saved_article_groups} article groups and "
            f"{summary.saved_articles} articles"
        )
        return summary

    def _save_article_group(self, external_id: str, group: ArticleGroup) -> str:
        """Upsert one group and return its internal document id."""
        data = {"name": group.name, "externalId": external_id}
        doc = self._upsert(ARTICLE_GROUPS_COLLECTION, "externalId", external_id, data)
        return str(doc["id"])

    def _save_article(self, article: Article, group_ids: dict[str, str]) -> None:
        self._upsert(
            ARTICLES_COLLECTION,
            "sku",
            article.sku,
            self._article_document(article, group_ids),
        )

    def _upsert(
        self, collection: str, key_field: str, key: str, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Update the document matching ``key_field == key``, or create it."""
        existing = self.store.find(collection, {key_field: {"equals": key}})

        if existing:
            doc = self.store.update(collection, existing[0]["id"], data)
            logger.debug(f"Updated {collection} document {key}")
        else:
            doc = self.store.create(collection, data)
            logger.debug(f"Created {collection} document {key}")
        return doc

    def _article_document(
        self, article: Article, group_ids: dict[str, str]
    ) -> dict[str, Any]:
        """Build the datastore document for an article.

        The natural-key group reference is resolved to the internal id;
        related articles are left out because the datastore relation needs
        internal ids of the other articles.
        """
        group = None
        if article.group_id and article.group_id in group_ids:
            group = group_ids[article.group_id]

        return {
            "sku": article.sku,
            "typeNumber": article.type_number,
            "description": article.description,
            "group": group,
            "specifications": [
                spec.model_dump(by_alias=True, exclude_none=True)
                for spec in article.specifications
            ],
            "assets": [
                {
                    "type": asset.storage_type,
                    "url": asset.url,
                    "originalFile": asset.original_file,
                }
                for asset in article.assets
            ],
            "classifications": [
                classification.model_dump() for classification in article.classifications
            ],
        }
