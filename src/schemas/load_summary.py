"""Load summary schema."""

from pydantic import BaseModel


class LoadSummary(BaseModel):
    """Outcome of saving a parsed catalog to the datastore.

    Attributes:
        saved_article_groups: Number of groups created or updated
        saved_articles: Number of articles created or updated
        errors: One message per record that could not be saved
    """

    saved_article_groups: int = 0
    saved_articles: int = 0
    errors: list[str] = []
