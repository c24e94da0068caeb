"""Loaders writing parsed catalog records to a datastore."""

from .catalog_loader import (
    ARTICLE_GROUPS_COLLECTION,
    ARTICLES_COLLECTION,
    CatalogLoader,
    DocumentStore,
)

__all__ = [
    "ARTICLE_GROUPS_COLLECTION",
    "ARTICLES_COLLECTION",
    "CatalogLoader",
    "DocumentStore",
]
