"""
Cloud Firestore adapter.
"""

from typing import Any, Dict, List, Optional
import httpx

from ...core.exceptions import DocumentNotFoundError, DocumentStoreError, EasyDoctorError
from ...core.models import StoreDocument
from .service import ExternalAPIService


def decode_value(value: Dict[str, Any]) -> Any:
    """Convert a Firestore typed value into a plain Python value."""
    if "nullValue" in value:
        return None
    if "booleanValue" in value:
        return bool(value["booleanValue"])
    if "integerValue" in value:
        return int(value["integerValue"])
    if "doubleValue" in value:
        return float(value["doubleValue"])
    if "stringValue" in value:
        return value["stringValue"]
    if "timestampValue" in value:
        return value["timestampValue"]
    if "referenceValue" in value:
        return value["referenceValue"]
    if "bytesValue" in value:
        return value["bytesValue"]
    if "geoPointValue" in value:
        return dict(value["geoPointValue"])
    if "arrayValue" in value:
        return [decode_value(v) for v in value["arrayValue"].get("values", [])]
    if "mapValue" in value:
        return decode_fields(value["mapValue"].get("fields", {}))
    raise DocumentStoreError(f"Unsupported Firestore value: {sorted(value)}")


def decode_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {name: decode_value(v) for name, v in fields.items()}


def encode_value(value: Any) -> Dict[str, Any]:
    """Convert a filter operand into a Firestore typed value."""
    if value is None:
        return {"nullValue": None}
    if isinstance(value, bool):
        return {"booleanValue": value}
    if isinstance(value, int):
        return {"integerValue": str(value)}
    if isinstance(value, float):
        return {"doubleValue": value}
    if isinstance(value, str):
        return {"stringValue": value}
    raise TypeError(f"Unsupported filter value type: {type(value).__name__}")


class FirestoreService(ExternalAPIService):
    """Query and delete documents through the Firestore REST API."""

    error_class = DocumentStoreError

    def __init__(self, *args, id_token: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.id_token = id_token

    def _status_error(self, response: httpx.Response) -> EasyDoctorError:
        if response.status_code == 404:
            return DocumentNotFoundError("Document not found")
        return DocumentStoreError(f"HTTP error {response.status_code}")

    def _auth(self) -> tuple[Dict[str, str], Dict[str, str]]:
        params = {"key": self.config.api_key} if self.config.api_key else {}
        headers = {"Authorization": f"Bearer {self.id_token}"} if self.id_token else {}
        return params, headers

    def _require_project(self) -> None:
        if not self.config.is_firestore_configured():
            raise DocumentStoreError("Firestore is not configured")

    async def query_where(self, collection: str, field: str, value: Any) -> List[StoreDocument]:
        """
        Return every document in ``collection`` whose ``field`` equals ``value``.

        No ordering is requested, so results come back in the store's query order.
        """
        self._require_project()
        params, headers = self._auth()
        body = {
            "structuredQuery": {
                "from": [{"collectionId": collection}],
                "where": {
                    "fieldFilter": {
                        "field": {"fieldPath": field},
                        "op": "EQUAL",
                        "value": encode_value(value),
                    }
                },
            }
        }

        result = await self._make_request(
            "POST", self.config.get_run_query_url(), json=body, params=params, headers=headers
        )

        if not isinstance(result, list):
            raise DocumentStoreError("Malformed runQuery response")

        documents: List[StoreDocument] = []
        for item in result:
            doc = item.get("document") if isinstance(item, dict) else None
            if not doc:
                # readTime-only entries carry no document
                continue
            documents.append(
                StoreDocument(
                    id=doc["name"].rsplit("/", 1)[-1],
                    fields=decode_fields(doc.get("fields", {})),
                )
            )
        return documents

    async def delete_by_id(self, collection: str, document_id: str) -> None:
        """
        Delete one document.

        Raises:
            DocumentNotFoundError: the document does not exist
            DocumentStoreError: the store could not be reached
        """
        self._require_project()
        params, headers = self._auth()
        params["currentDocument.exists"] = "true"

        await self._make_request(
            "DELETE",
            self.config.get_document_url(collection, document_id),
            params=params,
            headers=headers,
        )
