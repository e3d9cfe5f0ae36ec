from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Any, Dict

from bson import ObjectId
from pymongo.results import InsertOneResult, UpdateResult, DeleteResult

Document = Dict[str, Any]


class Collection(str, Enum):
    """The two collections of the coffee database."""
    COFFEE = "coffee"
    USERS = "users"


class BaseRepository(ABC):
    @abstractmethod
    async def connect(self, uri: str) -> None:
        pass

    @abstractmethod
    async def close(self) -> None:
        pass

    @abstractmethod
    async def ping(self) -> bool:
        pass

    ### Reads

    @abstractmethod
    async def find_all(self, collection: Collection) -> List[Document]:
        pass

    @abstractmethod
    async def find_one_by_id(self, collection: Collection, object_id: ObjectId) -> Optional[Document]:
        pass

    @abstractmethod
    async def find_one_by_field(self, collection: Collection, field: str, value: Any) -> Optional[Document]:
        pass

    ### Writes

    @abstractmethod
    async def insert_one(self, collection: Collection, document: Document) -> InsertOneResult:
        pass

    @abstractmethod
    async def update_one(self, collection: Collection, filter: Document, fields: Document, upsert: bool = False) -> UpdateResult:
        """Merge ``fields`` into the first document matching ``filter`` ($set)."""
        pass

    @abstractmethod
    async def replace_one(self, collection: Collection, object_id: ObjectId, document: Document, upsert: bool = False) -> UpdateResult:
        """Replace every non-identifier field of the document with ``object_id``."""
        pass

    @abstractmethod
    async def delete_one(self, collection: Collection, object_id: ObjectId) -> DeleteResult:
        pass
