"""Catalog record schemas.

Records produced by the catalog parser and handed to the datastore loader.
Attribute names are snake_case; the aliases are the field names used by the
Payload CMS collections, so ``model_dump(by_alias=True)`` yields a document
ready for the datastore.
"""

from pydantic import BaseModel, Field

ASSET_STORAGE_TYPES = ("image", "document", "other")


class Specification(BaseModel):
    """A name-value pair attached to an article group."""

    name: str = ""
    value: str = ""


class ArticleSpecification(BaseModel):
    """A specification attached to a single article.

    Attributes:
        name: Specification name
        value: Specification value
        unit: Unit of measurement, if the source provides one
        property_type: Source property type, if the source provides one
    """

    name: str = ""
    value: str = ""
    unit: str | None = None
    property_type: str | None = Field(default=None, alias="propertyType")

    model_config = {"populate_by_name": True}


class Asset(BaseModel):
    """An image, document or other file referenced by an article.

    The parsed record keeps the source type unchanged, so it may hold values
    other than image, document or other; ``storage_type`` restricts it to
    those for the datastore.

    Attributes:
        type: Asset type as found in the source (defaults to "image")
        url: Location of the asset
        original_file: Original file name, e.g. "10460.jpg"
    """

    type: str = "image"
    url: str = ""
    original_file: str = Field(default="", alias="originalFile")

    model_config = {"populate_by_name": True}

    @property
    def storage_type(self) -> str:
        """The asset type restricted to the values the datastore accepts."""
        if self.type in ASSET_STORAGE_TYPES:
            return self.type
        return "other"


class Classification(BaseModel):
    """A classification of an article (type from attribute, value from text)."""

    type: str = ""
    value: str = ""


class RelatedArticle(BaseModel):
    """A reference from one article to another by SKU."""

    sku: str = ""
    relationship: str = "related"


class ArticleGroup(BaseModel):
    """A group of articles, keyed by its external identifier.

    Attributes:
        name: Display name; groups without a name are never committed
        external_id: Identifier from the source system (natural key)
        specifications: Group-level specifications in document order
    """

    name: str = ""
    external_id: str = Field(alias="externalId")
    specifications: list[Specification] = []

    model_config = {"populate_by_name": True}


class Article(BaseModel):
    """A single catalog article, keyed by SKU.

    Attributes:
        sku: Article number (natural key), generated when the source has none
        type_number: Manufacturer type number
        description: Human-readable description
        external_id: Identifier from the source system
        group_id: External identifier of the enclosing article group
        specifications: Article specifications in document order
        assets: Images and documents in document order
        classifications: Classifications in document order
        related_articles: References to other articles in document order
    """

    sku: str
    type_number: str | None = Field(default=None, alias="typeNumber")
    description: str | None = None
    external_id: str | None = Field(default=None, alias="externalId")
    group_id: str | None = Field(default=None, alias="groupId")
    specifications: list[ArticleSpecification] = []
    assets: list[Asset] = []
    classifications: list[Classification] = []
    related_articles: list[RelatedArticle] = Field(
        default=[], alias="relatedArticles"
    )

    model_config = {"populate_by_name": True}
