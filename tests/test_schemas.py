"""Tests for schema definitions."""

import json

import pytest
from pydantic import ValidationError

from schemas import (
    Article,
    ArticleGroup,
    ArticleSpecification,
    Asset,
    Classification,
    LoadSummary,
    RelatedArticle,
    Specification,
)


class TestArticleGroup:
    """Tests for the ArticleGroup model."""

    def test_creation_by_field_name(self):
        group = ArticleGroup(external_id="G1")

        assert group.external_id == "G1"
        assert group.name == ""
        assert group.specifications == []

    def test_creation_by_alias(self):
        group = ArticleGroup.model_validate({"externalId": "G1", "name": "Pumps"})

        assert group.external_id == "G1"
        assert group.name == "Pumps"

    def test_external_id_required(self):
        with pytest.raises(ValidationError):
            ArticleGroup()

    def test_specification_lists_are_not_shared(self):
        first = ArticleGroup(external_id="G1")
        second = ArticleGroup(external_id="G2")

        first.specifications.append(Specification(name="a", value="b"))

        assert second.specifications == []

    def test_dump_by_alias(self):
        group = ArticleGroup(
            external_id="G1",
            name="Pumps",
            specifications=[Specification(name="Material", value="Steel")],
        )

        assert group.model_dump(by_alias=True) == {
            "name": "Pumps",
            "externalId": "G1",
            "specifications": [{"name": "Material", "value": "Steel"}],
        }


class TestArticle:
    """Tests for the Article model."""

    def test_creation_with_required_fields(self):
        article = Article(sku="SKU1")

        assert article.sku == "SKU1"
        assert article.type_number is None
        assert article.description is None
        assert article.external_id is None
        assert article.group_id is None
        assert article.specifications == []
        assert article.assets == []
        assert article.classifications == []
        assert article.related_articles == []

    def test_sku_required(self):
        with pytest.raises(ValidationError):
            Article()

    def test_json_uses_camel_case_names(self):
        article = Article(
            sku="SKU1",
            type_number="T-1",
            group_id="G1",
            related_articles=[RelatedArticle(sku="SKU2")],
        )

        data = json.loads(article.model_dump_json(by_alias=True))

        assert data["typeNumber"] == "T-1"
        assert data["groupId"] == "G1"
        assert data["relatedArticles"] == [{"sku": "SKU2", "relationship": "related"}]

    def test_fields_are_mutable(self):
        article = Article(sku="SKU1")

        article.description = "Pump"
        article.assets.append(Asset(url="http://x/1.jpg"))

        assert article.description == "Pump"
        assert len(article.assets) == 1


class TestArticleSpecification:
    """Tests for the ArticleSpecification model."""

    def test_optional_fields(self):
        spec = ArticleSpecification(name="Power", value="2")

        assert spec.unit is None
        assert spec.property_type is None

    def test_property_type_alias(self):
        spec = ArticleSpecification(name="Power", value="2", unit="kW", property_type="num")

        assert spec.model_dump(by_alias=True, exclude_none=True) == {
            "name": "Power",
            "value": "2",
            "unit": "kW",
            "propertyType": "num",
        }


class TestAsset:
    """Tests for the Asset model."""

    def test_defaults(self):
        asset = Asset()

        assert asset.type == "image"
        assert asset.url == ""
        assert asset.original_file == ""

    def test_dump_keeps_source_type(self):
        """Samples show the source type; only storage_type is restricted."""
        asset = Asset(type="video", url="http://x/clip.mp4")

        assert asset.model_dump(by_alias=True)["type"] == "video"
        assert asset.storage_type == "other"

    @pytest.mark.parametrize(
        "raw_type,storage_type",
        [
            ("image", "image"),
            ("document", "document"),
            ("other", "other"),
            ("video", "other"),
            ("", "other"),
        ],
    )
    def test_storage_type(self, raw_type, storage_type):
        assert Asset(type=raw_type).storage_type == storage_type


class TestSmallRecords:
    """Tests for the Specification, Classification and RelatedArticle models."""

    def test_specification_defaults(self):
        assert Specification().model_dump() == {"name": "", "value": ""}

    def test_classification_defaults(self):
        assert Classification().model_dump() == {"type": "", "value": ""}

    def test_related_article_default_relationship(self):
        assert RelatedArticle(sku="SKU2").relationship == "related"


class TestLoadSummary:
    """Tests for the LoadSummary model."""

    def test_defaults(self):
        summary = LoadSummary()

        assert summary.saved_article_groups == 0
        assert summary.saved_articles == 0
        assert summary.errors == []
