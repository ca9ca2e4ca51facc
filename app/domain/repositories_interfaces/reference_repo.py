from abc import ABC, abstractmethod


class ReferenceRepoInterface(ABC):
    """
    Raw mutations of the id lists that link documents of different collections.
    Song and playlist repositories share it instead of calling each other.
    """

    @abstractmethod
    async def append_id(self, collection: str, doc_id: str, field: str, ref_id: str, unique: bool = False) -> list[str]:
        """
        Appends ref_id to the id list stored in field of the document.

        :param unique: Treat the list as a set, appending an id that is already present is a no-op.
        :return: The updated id list.
        :raises EntityNotFoundError: If the document doesn't exist.
        """
        raise NotImplementedError

    @abstractmethod
    async def remove_id(self, collection: str, doc_id: str, field: str, ref_id: str, missing_ok: bool = False) -> list[str]:
        """
        Removes every occurrence of ref_id from the id list stored in field of the document.

        :param missing_ok: Return an empty list instead of raising if the document doesn't exist.
        :return: The updated id list.
        :raises EntityNotFoundError: If the document doesn't exist and missing_ok is False.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete_documents(self, collection: str, doc_ids: list[str]) -> None:
        """
        Deletes the documents concurrently. No rollback if one of the deletions fails.
        """
        raise NotImplementedError
