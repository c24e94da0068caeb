"""Schema definitions for the catalog importer."""

from .catalog import (
    Article,
    ArticleGroup,
    ArticleSpecification,
    Asset,
    Classification,
    RelatedArticle,
    Specification,
)
from .load_summary import LoadSummary

__all__ = [
    "Article",
    "ArticleGroup",
    "ArticleSpecification",
    "Asset",
    "Classification",
    "LoadSummary",
    "RelatedArticle",
    "Specification",
]
