"""Payload CMS REST client used as the catalog datastore."""

from typing import Any

from .client import Client
from .exceptions import ValidationError


class PayloadClient(Client):
    """Client for the Payload CMS REST API.

    Implements the document store operations used by the catalog loader:
    ``find`` by field filter, ``create`` and ``update`` by document id.
    Documents are addressed by collection slug under ``/api``.

    Extra config keys:
        api_key: Payload API key; sent in the Authorization header when set
        auth_collection: Slug of the collection owning the API key
            (default: "users")

    Example:
        config = {"base_url": "http://localhost:3000", "api_key": "secret"}
        with PayloadClient(config) as client:
            docs = client.find("ez_articles", {"sku": {"equals": "SKU1"}})
    """

    API_PREFIX = "/api"
    DEFAULT_AUTH_COLLECTION = "users"

    @property
    def headers(self) -> dict[str, str]:
        headers = super().headers
        api_key = self._config.get("api_key")
        if api_key:
            auth_collection = self._config.get(
                "auth_collection", self.DEFAULT_AUTH_COLLECTION
            )
            headers["Authorization"] = f"{auth_collection} API-Key {api_key}"
        return headers

    def fetch(
        self,
        collection: str,
        where: dict[str, Any] | None = None,
        limit: int | None = None,
        depth: int = 0,
    ) -> list[dict[str, Any]]:
        """Fetch documents from a collection.

        Args:
            collection: Collection slug
            where: Payload query, e.g. {"sku": {"equals": "SKU1"}}
            limit: Maximum number of documents (server default if None)
            depth: Relationship population depth

        Returns:
            List of documents

        Raises:
            ValidationError: If the response has no ``docs`` list
            APIError: If the API returns a non-2xx response
            ConnectionError: If the network connection fails
        """
        params: dict[str, Any] = {"depth": depth}
        if limit is not None:
            params["limit"] = limit
        if where:
            params.update(self._build_where_params(where))

        response = self.get(self._collection_path(collection), params=params)
        data = response.json()

        docs = data.get("docs") if isinstance(data, dict) else None
        if not isinstance(docs, list):
            raise ValidationError(
                f"Unexpected response listing {collection}: missing 'docs'"
            )
        return docs

    def find(self, collection: str, filter: dict[str, Any]) -> list[dict[str, Any]]:
        """Find documents matching a field filter."""
        return self.fetch(collection, where=filter)

    def create(self, collection: str, data: dict[str, Any]) -> dict[str, Any]:
        """Create a document and return it (including its id)."""
        response = self.post(self._collection_path(collection), json=data)
        return self._extract_doc(collection, response.json())

    def update(
        self, collection: str, id: str, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Update a document by id and return it."""
        response = self.patch(f"{self._collection_path(collection)}/{id}", json=data)
        return self._extract_doc(collection, response.json())

    def _collection_path(self, collection: str) -> str:
        return f"{self.API_PREFIX}/{collection}"

    def _build_where_params(
        self, where: dict[str, Any], prefix: str = "where"
    ) -> dict[str, Any]:
        """Flatten a nested query into Payload's bracketed query parameters.

        {"sku": {"equals": "A"}} becomes {"where[sku][equals]": "A"}.
        """
        params: dict[str, Any] = {}
        for key, value in where.items():
            name = f"{prefix}[{key}]"
            if isinstance(value, dict):
                params.update(self._build_where_params(value, name))
            else:
                params[name] = value
        return params

    def _extract_doc(self, collection: str, data: Any) -> dict[str, Any]:
        """Return the ``doc`` of a create/update response."""
        doc = data.get("doc") if isinstance(data, dict) else None
        if not isinstance(doc, dict) or "id" not in doc:
            raise ValidationError(
                f"Unexpected response writing to {collection}: missing 'doc' id"
            )
        return doc
