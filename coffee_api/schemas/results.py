from typing import Any, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pymongo.results import InsertOneResult, UpdateResult, DeleteResult

from ..common.helpers import serialize_document

# Write acknowledgments in the camelCase shape clients of the coffee
# service already consume (e.g. {"acknowledged": true, "deletedCount": 1}).

class Acknowledgment(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool = True


class InsertAck(Acknowledgment):
    inserted_id: Optional[Any] = None

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertAck":
        return cls(acknowledged=result.acknowledged, inserted_id=serialize_document(result.inserted_id))


class UpdateAck(Acknowledgment):
    matched_count: int = 0
    modified_count: int = 0
    upserted_count: int = 0
    upserted_id: Optional[Any] = None

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateAck":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=0 if upserted_id is None else 1,
            upserted_id=serialize_document(upserted_id),
        )


class DeleteAck(Acknowledgment):
    deleted_count: int = 0

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteAck":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
