from typing import List, Optional
from loguru import logger
from .models import Document


class DocumentStore:
    """In-memory document collection.

    Records keep their insertion order and receive sequential ids that are
    never reused while the process lives. Nothing is persisted and there is
    no locking; all access happens on the event loop thread.
    """

    def __init__(self):
        self._documents: List[Document] = []
        self._next_id = 1

    def add(self, document: Document) -> Document:
        """Assign the next id and append the document"""
        stored = document.model_copy(update={"id": self._next_id})
        self._next_id += 1
        self._documents.append(stored)
        logger.debug(f"Stored document {stored.id}: {stored.filename}")
        return stored

    def list(self) -> List[Document]:
        return list(self._documents)

    def get(self, document_id: int) -> Optional[Document]:
        return next((doc for doc in self._documents if doc.id == document_id), None)

    def remove(self, document_id: int) -> bool:
        """Remove a document if present; unknown ids are a no-op"""
        before = len(self._documents)
        self._documents = [doc for doc in self._documents if doc.id != document_id]
        return len(self._documents) < before

    def clear(self):
        self._documents = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._documents)


# Global document store instance
document_store = DocumentStore()
