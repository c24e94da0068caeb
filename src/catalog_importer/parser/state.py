"""Working memory of the catalog mapper."""

import time
from dataclasses import dataclass, field

from schemas.catalog import (
    Article,
    ArticleGroup,
    ArticleSpecification,
    Asset,
    Classification,
    RelatedArticle,
    Specification,
)


@dataclass
class ParserState:
    """Mutable context for a single catalog parse.

    One instance belongs to exactly one parse and must never be shared
    between parses.

    Attributes:
        path: Tag names from the document root to the open tag
        current_text: Character data seen since the last open or close tag
        current_node_depth: Open-tag count, incremented per open tag and
            decremented per close tag
        is_reading_name: True while a ``name`` tag is open
        is_reading_article_group: True while the innermost typed ``node``
            is an article group
        article_groups: Committed groups keyed by external id
        articles: Committed articles keyed by SKU
        group_base_depth: Depth just before the open group node began
        article_base_depth: Depth just before the open article node began
    """

    path: list[str] = field(default_factory=list)
    current_text: str = ""

    article_groups: dict[str, ArticleGroup] = field(default_factory=dict)
    articles: dict[str, Article] = field(default_factory=dict)

    current_article_group: ArticleGroup | None = None
    current_article: Article | None = None
    current_specification: Specification | None = None
    current_article_specification: ArticleSpecification | None = None
    current_asset: Asset | None = None
    current_classification: Classification | None = None
    current_related_article: RelatedArticle | None = None

    current_node_depth: int = 0
    is_reading_name: bool = False
    is_reading_article_group: bool = False

    group_base_depth: int | None = None
    article_base_depth: int | None = None

    _sku_counter: int = field(default=0, repr=False)

    def generate_unique_sku(self) -> str:
        """Generate a SKU for an article that has none.

        The counter part is strictly increasing, so two generated SKUs
        from the same state never collide.
        """
        self._sku_counter += 1
        return f"GEN-{int(time.time() * 1000)}-{self._sku_counter}"

    def push_tag(self, tag: str) -> None:
        self.path.append(tag)

    def pop_tag(self) -> str:
        """Remove and return the innermost tag, or "" when the path is empty."""
        if not self.path:
            return ""
        return self.path.pop()

    def current_path(self) -> str:
        return "/".join(self.path)

    def path_endswith(self, segment: str) -> bool:
        """Check whether the innermost path segment is exactly ``segment``.

        Only whole segments match: a path ending in ``articlespecification``
        does not end with ``specification``.
        """
        return bool(self.path) and self.path[-1] == segment

    def reset_text(self) -> None:
        self.current_text = ""

    def relative_depth(self, base_depth: int | None) -> int | None:
        """Depth of the open tags relative to a node's starting depth."""
        if base_depth is None:
            return None
        return self.current_node_depth - base_depth
