"""
Abstract interface for the embedded document store.

Documents are schema-less JSON mappings addressed by a generated string id.
Implementations keep the whole collection in one JSON document, either on
local disk or in S3-compatible object storage (Tigris), and raise StoreError
for every engine-level failure.
"""
import copy
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional


class StoreError(Exception):
    """Raised when the document store cannot read or write its data."""


class DocumentStore(ABC):
    """Abstract base class for document store backends."""

    @abstractmethod
    def query(self, fields: Iterable[str], include_id: bool = False) -> List[Dict[str, Any]]:
        """
        Project every document onto the given fields.

        Args:
            fields: Field names to select. Fields a document lacks are omitted
                from its row.
            include_id: Whether to add the document id under the "id" key.

        Returns:
            One row per document, in store order.
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of documents in the store."""

    @abstractmethod
    def save(self, document: Dict[str, Any]) -> str:
        """
        Insert a new document.

        Args:
            document: Document body

        Returns:
            The generated document id.
        """

    @abstractmethod
    def get_document(self, document_id: str) -> Optional[Dict[str, Any]]:
        """Return the document body for an id, or None if it does not exist."""

    @abstractmethod
    def delete(self, document_id: str) -> bool:
        """
        Delete a document by id.

        Returns:
            True if the document was deleted, False if it was not found.
        """


class JsonDocumentStore(DocumentStore):
    """
    Document store kept as a single JSON mapping of id to document body.

    Subclasses provide the raw load and save of that mapping.
    """

    @abstractmethod
    def _load_documents(self) -> Dict[str, Dict[str, Any]]:
        """Load the id -> document mapping. Must raise StoreError on failure."""

    @abstractmethod
    def _save_documents(self, documents: Dict[str, Dict[str, Any]]) -> None:
        """Persist the id -> document mapping. Must raise StoreError on failure."""

    @staticmethod
    def _wrap(documents: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
        return {"version": "1.0", "documents": documents}

    @staticmethod
    def _unwrap(data: Optional[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
        if data is None:
            return {}
        documents = data.get("documents", {}) if isinstance(data, dict) else None
        if not isinstance(documents, dict):
            raise StoreError("Document store data is corrupt: 'documents' must be a mapping")
        if not all(isinstance(body, dict) for body in documents.values()):
            raise StoreError("Document store data is corrupt: every document must be a mapping")
        return documents

    def query(self, fields: Iterable[str], include_id: bool = False) -> List[Dict[str, Any]]:
        fields = list(fields)
        rows = []
        for document_id, body in self._load_documents().items():
            row = {name: copy.deepcopy(body[name]) for name in fields if name in body}
            if include_id:
                row["id"] = document_id
            rows.append(row)
        return rows

    def count(self) -> int:
        return len(self._load_documents())

    def save(self, document: Dict[str, Any]) -> str:
        documents = self._load_documents()
        document_id = str(uuid.uuid4())
        documents[document_id] = copy.deepcopy(document)
        self._save_documents(documents)
        return document_id

    def get_document(self, document_id: str) -> Optional[Dict[str, Any]]:
        body = self._load_documents().get(document_id)
        return copy.deepcopy(body) if body is not None else None

    def delete(self, document_id: str) -> bool:
        documents = self._load_documents()
        if document_id not in documents:
            return False
        del documents[document_id]
        self._save_documents(documents)
        return True
