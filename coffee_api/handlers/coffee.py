from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..common.helpers import parse_object_id
from ..common.log import log_coffee_added, log_coffee_replaced, log_document_deleted
from ..database.base_repo import Collection
from ..schemas.documents import CoffeeItem

if TYPE_CHECKING:
    from ..database.base_repo import BaseRepository


async def get_all_coffee(repo: "BaseRepository") -> List[Dict[str, Any]]:
    return await repo.find_all(Collection.COFFEE)


async def get_coffee(coffee_id: str, repo: "BaseRepository") -> Optional[Dict[str, Any]]:
    # absent ids come back as None, the route answers null
    return await repo.find_one_by_id(Collection.COFFEE, parse_object_id(coffee_id))


async def add_coffee(new_coffee: Dict[str, Any], repo: "BaseRepository"):
    log_coffee_added(CoffeeItem.model_validate(new_coffee).name)
    return await repo.insert_one(Collection.COFFEE, new_coffee)


async def replace_coffee(coffee_id: str, coffee: Dict[str, Any], repo: "BaseRepository"):
    """
    Replace the coffee stored under ``coffee_id`` with ``coffee``.

    Inserts the document when nothing matches. MongoDB copies the ``_id``
    of the filter into an upserted document, so the path id is kept.
    """
    result = await repo.replace_one(Collection.COFFEE, parse_object_id(coffee_id), coffee, upsert = True)
    log_coffee_replaced(coffee_id, result.upserted_id is not None)
    return result


async def delete_coffee(coffee_id: str, repo: "BaseRepository"):
    result = await repo.delete_one(Collection.COFFEE, parse_object_id(coffee_id))
    log_document_deleted(Collection.COFFEE.value, coffee_id, result.deleted_count)
    return result
