from abc import ABC, abstractmethod
from typing import Optional


class DocumentStoreInterface(ABC):
    """
    Key-value collections of JSON-like documents. Documents are dicts in the wire shape,
    the id is the key of the document and is never stored inside it.
    """

    @abstractmethod
    async def get(self, collection: str, doc_id: str) -> Optional[dict]:
        """
        Fetches a single document.

        :param collection: Name of the collection.
        :param doc_id: Identifier of the document.
        :return: The document or None if it doesn't exist.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_all(self, collection: str) -> list[tuple[str, dict]]:
        """
        Fetches every document of the collection as (id, document) pairs in store order.
        """
        raise NotImplementedError

    @abstractmethod
    async def add(self, collection: str, data: dict) -> str:
        """
        Inserts a document under a newly generated id.

        :return: The generated id.
        """
        raise NotImplementedError

    @abstractmethod
    async def set(self, collection: str, doc_id: str, data: dict) -> None:
        """
        Overwrites the document stored under doc_id, creating it if it doesn't exist.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, collection: str, doc_id: str) -> None:
        """
        Removes the document. Deleting a missing document is not an error.
        """
        raise NotImplementedError
