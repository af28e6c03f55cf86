"""
Local disk implementation of the document store.

Stores all documents in one JSON file on the local filesystem.
Default location: state/saved_articles.json
"""
from typing import Any, Dict

from newsapp.base_json_store import BaseLocalDiskStore
from newsapp.document_store import JsonDocumentStore


class LocalDiskDocumentStore(BaseLocalDiskStore, JsonDocumentStore):
    """
    Local disk implementation of the document store.

    Stores documents in a JSON file on the local filesystem.
    Default location: state/saved_articles.json
    """

    def __init__(self, state_dir: str = "state", filename: str = "saved_articles.json"):
        """
        Initialize the local disk document store.

        Args:
            state_dir: Directory for the store file (default: "state")
            filename: Store file name inside state_dir
        """
        super().__init__(state_dir=state_dir)
        self.filename = filename

    def _get_filename(self) -> str:
        """Get the filename for document storage."""
        return self.filename

    def _load_documents(self) -> Dict[str, Dict[str, Any]]:
        return self._unwrap(self._load_data(self._wrap({})))

    def _save_documents(self, documents: Dict[str, Dict[str, Any]]) -> None:
        self._save_data(self._wrap(documents))
