"""Event handlers mapping catalog XML events onto catalog records.

The catalog format reuses a generic ``node`` tag (typed by its ``type``
attribute) and flat child tags such as ``name`` and ``specification`` in
more than one context, so records are built by dispatching on the trailing
path segment of each event rather than by deserializing a tree.

Every dispatch below is an independent check on the innermost path segment;
more than one branch may act on the same event.
"""

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

from .state import ParserState

NODE_TYPE_ARTICLE_GROUP = "articlesgroup"
NODE_TYPE_ARTICLE = "article"


@dataclass
class XMLNode:
    """An open-tag event: lowercased tag name and attributes."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)


def handle_open_tag(state: ParserState, node: XMLNode) -> None:
    """Enter a tag, allocating the record it opens, if any."""
    state.reset_text()
    state.push_tag(node.name)
    state.current_node_depth += 1
    attributes = node.attributes

    if state.path_endswith("name"):
        state.is_reading_name = True

    if state.path_endswith("node"):
        node_type = attributes.get("type", "")
        external_id = attributes.get("id", "")

        if node_type == NODE_TYPE_ARTICLE_GROUP:
            state.is_reading_article_group = True
            state.group_base_depth = state.current_node_depth - 1
            state.current_article_group = ArticleGroup(external_id=external_id)
        elif node_type == NODE_TYPE_ARTICLE:
            article = Article(
                sku=attributes.get("sku") or state.generate_unique_sku(),
                type_number=attributes.get("typenumber") or None,
                external_id=external_id or None,
            )
            if state.current_article_group is not None:
                article.group_id = state.current_article_group.external_id

            # The article is now the innermost context for its children.
            state.is_reading_article_group = False
            state.article_base_depth = state.current_node_depth - 1
            state.current_article = article

    if state.path_endswith("specification"):
        state.current_specification = Specification()

    if state.path_endswith("articlespecification"):
        state.current_article_specification = ArticleSpecification()

    if state.path_endswith("asset"):
        state.current_asset = Asset()
        if attributes.get("type"):
            state.current_asset.type = attributes["type"]

    if state.path_endswith("classification"):
        state.current_classification = Classification(
            type=attributes.get("type", "")
        )

    if state.path_endswith("relatedarticle"):
        state.current_related_article = RelatedArticle()
        if attributes.get("relationship"):
            state.current_related_article.relationship = attributes["relationship"]


def handle_close_tag(state: ParserState, tag_name: str) -> None:
    """Leave a tag, finalizing the record whose scope just ended."""
    text = state.current_text.strip()
    state.current_node_depth -= 1

    if state.path_endswith("name"):
        state.is_reading_name = False

    if tag_name == "node":
        _close_node(state)

    if state.path_endswith("name") and text:
        if state.is_reading_article_group and state.current_article_group:
            state.current_article_group.name = text
        elif state.current_article is not None:
            state.current_article.description = text

    if state.path_endswith("specification") and state.current_specification:
        if state.current_article_group is not None:
            state.current_article_group.specifications.append(
                state.current_specification
            )
        state.current_specification = None

    if state.path_endswith("specificationname") and text and state.current_specification:
        state.current_specification.name = text

    if state.path_endswith("specificationvalue") and text and state.current_specification:
        state.current_specification.value = text

    if (
        state.path_endswith("articlespecification")
        and state.current_article_specification
    ):
        if state.current_article is not None:
            state.current_article.specifications.append(
                state.current_article_specification
            )
        state.current_article_specification = None

    if (
        state.path_endswith("articlespecificationname")
        and text
        and state.current_article_specification
    ):
        state.current_article_specification.name = text

    if (
        state.path_endswith("articlespecificationvalue")
        and text
        and state.current_article_specification
    ):
        state.current_article_specification.value = text

    if state.path_endswith("asset") and state.current_asset:
        if state.current_article is not None:
            state.current_article.assets.append(state.current_asset)
        state.current_asset = None

    if state.path_endswith("asseturl") and text and state.current_asset:
        state.current_asset.url = text

    if state.path_endswith("assetoriginalfile") and text and state.current_asset:
        state.current_asset.original_file = text

    if state.path_endswith("classification") and state.current_classification:
        if state.current_article is not None:
            state.current_article.classifications.append(
                state.current_classification
            )
        state.current_classification = None

    if (
        state.path_endswith("classificationvalue")
        and text
        and state.current_classification
    ):
        state.current_classification.value = text

    if state.path_endswith("relatedarticle") and state.current_related_article:
        if state.current_article is not None:
            state.current_article.related_articles.append(
                state.current_related_article
            )
        state.current_related_article = None

    if (
        state.path_endswith("relatedarticlesku")
        and text
        and state.current_related_article
    ):
        state.current_related_article.sku = text

    state.reset_text()
    state.pop_tag()


def handle_text(state: ParserState, text: str) -> None:
    """Append character data; split text nodes concatenate."""
    state.current_text += text


def _close_node(state: ParserState) -> None:
    """Commit the group and/or article owning the ``node`` tag being closed."""
    if state.is_reading_article_group and state.current_article_group:
        group = state.current_article_group
        if group.name.strip():
            state.article_groups[group.external_id] = group

        if state.relative_depth(state.group_base_depth) == 0:
            state.is_reading_article_group = False
            state.current_article_group = None
            state.group_base_depth = None

    if state.current_article is not None:
        article = state.current_article
        if article.sku:
            state.articles[article.sku] = article

        if state.relative_depth(state.article_base_depth) == 0:
            state.current_article = None
            state.article_base_depth = None
            # Back inside the enclosing group, if there is one.
            state.is_reading_article_group = state.current_article_group is not None
