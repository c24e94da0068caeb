"""Pytest fixtures for catalog importer tests."""

import pytest

SAMPLE_CATALOG = """<?xml version="1.0" encoding="UTF-8"?>
<Catalog>
  <Node Type="articlesgroup" Id="G1">
    <Name>Pumps</Name>
    <Specification>
      <SpecificationName>Material</SpecificationName>
      <SpecificationValue>Steel</SpecificationValue>
    </Specification>
    <Node Type="article" Id="A1" SKU="SKU1" TypeNumber="P-100">
      <Name>desc text</Name>
      <ArticleSpecification>
        <ArticleSpecificationName>Power</ArticleSpecificationName>
        <ArticleSpecificationValue>2 kW</ArticleSpecificationValue>
      </ArticleSpecification>
      <Asset Type="document">
        <AssetUrl>http://x/doc.pdf</AssetUrl>
      </Asset>
      <Classification Type="etim">
        <ClassificationValue>EC000001</ClassificationValue>
      </Classification>
      <RelatedArticle Relationship="accessory">
        <RelatedArticleSku>SKU9</RelatedArticleSku>
      </RelatedArticle>
    </Node>
  </Node>
</Catalog>
"""


class FakeStore:
    """In-memory document store recording every call."""

    def __init__(self):
        self.collections: dict[str, list[dict]] = {}
        self.calls: list[tuple] = []
        self._next_id = 1

    def find(self, collection, filter):
        self.calls.append(("find", collection, filter))
        (field, condition), = filter.items()
        return [
            doc
            for doc in self.collections.get(collection, [])
            if doc.get(field) == condition["equals"]
        ]

    def create(self, collection, data):
        self.calls.append(("create", collection, data))
        doc = {"id": f"id-{self._next_id}", **data}
        self._next_id += 1
        self.collections.setdefault(collection, []).append(doc)
        return doc

    def update(self, collection, id, data):
        self.calls.append(("update", collection, id, data))
        for doc in self.collections.get(collection, []):
            if doc["id"] == id:
                doc.update(data)
                return doc
        raise KeyError(id)


@pytest.fixture
def sample_catalog_xml():
    """Catalog with one group holding one fully populated article."""
    return SAMPLE_CATALOG


@pytest.fixture
def write_catalog(tmp_path):
    """Write catalog XML text to a file and return its path."""

    def _write(content: str, name: str = "catalog.xml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_catalog_file(write_catalog, sample_catalog_xml):
    """Path to a file containing the sample catalog."""
    return write_catalog(sample_catalog_xml)


@pytest.fixture
def fake_store():
    """Empty in-memory document store."""
    return FakeStore()
