from pymongo import AsyncMongoClient
from pymongo.server_api import ServerApi
from typing import Optional, List, Any, Dict

from bson import ObjectId

from .base_repo import BaseRepository, Collection, Document
from ..common.helpers import mask_uri
from ..common.log import (
    log_database_connected, log_database_connection_failed, log_database_error, log_database_disconnected,
    log_collections_opened, log_documents_fetched
)


class MongoRepository(BaseRepository):
    """
    Persistence gateway for the coffee shop.

    Holds one client and a live handle for each collection of ``db_name``.
    An instance is created once at process start and handed to the app;
    every route shares it (and with it the driver's connection pool).
    """

    def __init__(self, db_name: str = "coffeeDB") -> None:
        self.uri = None
        self.db_name = db_name
        self.client = None
        self.db = None
        self.collections: Dict[Collection, Any] = {}

    # ---------------------------
    #     Connection
    # ---------------------------

    async def connect(self, uri):
        self.uri = uri

        self.client = AsyncMongoClient(
            self.uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        self.db = self.client[self.db_name]
        self.collections = {
            collection: self.db.get_collection(collection.value) for collection in Collection
        }
        log_collections_opened(self.db_name, [c.value for c in Collection])

        # the server keeps listening without a database; requests fail until it is reachable
        if await self.ping():
            log_database_connected(mask_uri(self.uri))
        else:
            log_database_connection_failed(f"ping failed for {mask_uri(self.uri)}")

    async def close(self):
        try:
            if self.client:
                await self.client.close()
            log_database_disconnected()
        except Exception as e:
            log_database_error("close_connection", str(e))

    # ---------------------------
    #     Helper Methods
    # ---------------------------

    async def ping(self) -> bool:
        try:
            await self.client.admin.command('ping')
            return True
        except Exception as e:
            log_database_error("ping", str(e))
            return False

    def get_collection(self, collection: Collection):
        if collection not in self.collections:
            raise RuntimeError("MongoRepository is not connected, call connect() first")
        return self.collections[collection]

    # ---------------------------
    #     Access Database
    # ---------------------------

    async def find_all(self, collection: Collection) -> List[Document]:
        documents = await self.get_collection(collection).find().to_list()
        log_documents_fetched(collection.value, len(documents))
        return documents

    async def find_one_by_id(self, collection: Collection, object_id: ObjectId) -> Optional[Document]:
        return await self.get_collection(collection).find_one({"_id": object_id})

    async def find_one_by_field(self, collection: Collection, field: str, value: Any) -> Optional[Document]:
        return await self.get_collection(collection).find_one({field: value})

    async def insert_one(self, collection: Collection, document: Document):
        return await self.get_collection(collection).insert_one(document)

    async def update_one(self, collection: Collection, filter: Document, fields: Document, upsert: bool = False):
        return await self.get_collection(collection).update_one(filter, {"$set": fields}, upsert=upsert)

    async def replace_one(self, collection: Collection, object_id: ObjectId, document: Document, upsert: bool = False):
        return await self.get_collection(collection).replace_one({"_id": object_id}, document, upsert=upsert)

    async def delete_one(self, collection: Collection, object_id: ObjectId):
        return await self.get_collection(collection).delete_one({"_id": object_id})
