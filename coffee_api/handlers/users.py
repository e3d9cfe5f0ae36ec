from typing import TYPE_CHECKING, Any, Dict, List

from ..common.helpers import parse_object_id
from ..common.log import log_user_created, log_user_sign_in_updated, log_document_deleted
from ..database.base_repo import Collection
from ..schemas.documents import UserRecord

if TYPE_CHECKING:
    from ..database.base_repo import BaseRepository


async def get_all_users(repo: "BaseRepository") -> List[Dict[str, Any]]:
    return await repo.find_all(Collection.USERS)


async def create_user(new_user: Dict[str, Any], repo: "BaseRepository"):
    log_user_created(UserRecord.model_validate(new_user).email)
    return await repo.insert_one(Collection.USERS, new_user)


async def update_last_sign_in(sign_in: Dict[str, Any], repo: "BaseRepository"):
    """Set ``lastSignInTime`` on the user with the given email. Missing keys count as null."""
    user = UserRecord.model_validate(sign_in)
    result = await repo.update_one(
        Collection.USERS,
        {"email": user.email},
        {"lastSignInTime": user.lastSignInTime},
    )
    log_user_sign_in_updated(user.email, result.matched_count)
    return result


async def delete_user(user_id: str, repo: "BaseRepository"):
    result = await repo.delete_one(Collection.USERS, parse_object_id(user_id))
    log_document_deleted(Collection.USERS.value, user_id, result.deleted_count)
    return result
