"""
Factory function for creating document stores.
"""
import os

from newsapp.document_store import DocumentStore
from newsapp.local_disk_document_store import LocalDiskDocumentStore
from newsapp.tigris_document_store import TigrisDocumentStore


def create_document_store(state_dir: str = "state") -> DocumentStore:
    """
    Create a document store based on environment configuration.

    Reads the ARTICLE_STORAGE_TYPE environment variable to determine
    which implementation to use:
    - 'local' or unset: LocalDiskDocumentStore (default)
    - 'tigris': TigrisDocumentStore

    Args:
        state_dir: Directory for local disk storage (default: "state")

    Returns:
        DocumentStore: Configured document store instance
    """
    storage_type = os.getenv('ARTICLE_STORAGE_TYPE', 'local').lower()

    if storage_type == 'tigris':
        return TigrisDocumentStore()
    return LocalDiskDocumentStore(state_dir=state_dir)
