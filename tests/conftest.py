import copy
import os
import pytest
from bson import ObjectId
from dotenv import load_dotenv
from fastapi.testclient import TestClient
from pymongo.errors import WriteError
from pymongo.results import InsertOneResult, UpdateResult, DeleteResult

# Load a local .env if present, then fill in the credentials the config requires
load_dotenv()
os.environ.setdefault("DB_USER", "test_user")
os.environ.setdefault("DB_PASS", "test_pass")

from coffee_api.database.base_repo import BaseRepository  # noqa: E402
from coffee_api.main import create_app  # noqa: E402


# --- Define dummy classes for testing ---

class DummyRepository(BaseRepository):
    """In-memory stand-in for MongoRepository that follows MongoDB's update semantics."""

    def __init__(self):
        self.collections = {"coffee": [], "users": []}
        self.connected_uri = None
        self.closed = False

    async def connect(self, uri):
        self.connected_uri = uri

    async def close(self):
        self.closed = True

    async def ping(self):
        return self.connected_uri is not None

    def _docs(self, collection):
        return self.collections[collection.value]

    def _find(self, collection, query):
        for doc in self._docs(collection):
            if all(doc.get(key) == value for key, value in query.items()):
                return doc
        return None

    async def find_all(self, collection):
        return copy.deepcopy(self._docs(collection))

    async def find_one_by_id(self, collection, object_id):
        return copy.deepcopy(self._find(collection, {"_id": object_id}))

    async def find_one_by_field(self, collection, field, value):
        return copy.deepcopy(self._find(collection, {field: value}))

    async def insert_one(self, collection, document):
        document.setdefault("_id", ObjectId())
        self._docs(collection).append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    async def update_one(self, collection, filter, fields, upsert=False):
        doc = self._find(collection, filter)
        if doc is not None:
            modified = any(doc.get(key) != value for key, value in fields.items())
            doc.update(copy.deepcopy(fields))
            return UpdateResult({"n": 1, "nModified": int(modified)}, True)
        if upsert:
            new_doc = {**filter, **copy.deepcopy(fields)}
            new_doc.setdefault("_id", ObjectId())
            self._docs(collection).append(new_doc)
            return UpdateResult({"n": 1, "nModified": 0, "upserted": new_doc["_id"]}, True)
        return UpdateResult({"n": 0, "nModified": 0}, True)

    async def replace_one(self, collection, object_id, document, upsert=False):
        if "_id" in document and document["_id"] != object_id:
            # MongoDB refuses to change _id through a replacement (ImmutableField)
            raise WriteError("Performing an update on the path '_id' would modify the immutable field '_id'", 66)
        replacement = {"_id": object_id}
        replacement.update({key: value for key, value in copy.deepcopy(document).items() if key != "_id"})
        docs = self._docs(collection)
        for index, doc in enumerate(docs):
            if doc["_id"] == object_id:
                docs[index] = replacement
                return UpdateResult({"n": 1, "nModified": int(doc != replacement)}, True)
        if upsert:
            # the _id equality of the filter ends up in the inserted document
            docs.append(replacement)
            return UpdateResult({"n": 1, "nModified": 0, "upserted": object_id}, True)
        return UpdateResult({"n": 0, "nModified": 0}, True)

    async def delete_one(self, collection, object_id):
        docs = self._docs(collection)
        for doc in docs:
            if doc["_id"] == object_id:
                docs.remove(doc)
                return DeleteResult({"n": 1}, True)
        return DeleteResult({"n": 0}, True)


@pytest.fixture
def repo():
    return DummyRepository()

@pytest.fixture
def client(repo):
    app = create_app(repo, "mongodb://dummy:27017")
    # unhandled errors should come back as 500 responses, like in production
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
