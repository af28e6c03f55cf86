"""
Tigris/S3-compatible storage implementation of the document store.

Keeps the saved articles in an S3-compatible object so several deployments
can share one bookmark list.
Object key: state/saved_articles.json
"""
from typing import Any, Dict

from newsapp.base_json_store import BaseTigrisStore
from newsapp.document_store import JsonDocumentStore


class TigrisDocumentStore(BaseTigrisStore, JsonDocumentStore):
    """
    Tigris/S3-compatible storage implementation of the document store.

    Object key: state/saved_articles.json
    """

    def _get_object_key(self) -> str:
        """Get the S3 object key for document storage."""
        return "state/saved_articles.json"

    def _load_documents(self) -> Dict[str, Dict[str, Any]]:
        return self._unwrap(self._load_from_s3())

    def _save_documents(self, documents: Dict[str, Dict[str, Any]]) -> None:
        self._save_to_s3(self._wrap(documents))
