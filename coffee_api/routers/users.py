from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends

from ..common.helpers import serialize_document
from ..database.base_repo import BaseRepository
from ..dependencies.dependencies import get_repo
from ..handlers import users as handlers
from ..schemas.results import InsertAck, UpdateAck, DeleteAck

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.get("")
async def read_all_users(repo: BaseRepository = Depends(get_repo)) -> List[Dict[str, Any]]:
    return serialize_document(await handlers.get_all_users(repo))


@router.post("")
async def create_user(new_user: Dict[str, Any] = Body(...), repo: BaseRepository = Depends(get_repo)) -> InsertAck:
    return InsertAck.from_result(await handlers.create_user(new_user, repo))


### sign-in bookkeeping, keyed by email instead of id ###

@router.patch("")
async def update_last_sign_in(sign_in: Dict[str, Any] = Body(...), repo: BaseRepository = Depends(get_repo)) -> UpdateAck:
    return UpdateAck.from_result(await handlers.update_last_sign_in(sign_in, repo))


@router.delete("/{user_id}")
async def delete_user(user_id: str, repo: BaseRepository = Depends(get_repo)) -> DeleteAck:
    return DeleteAck.from_result(await handlers.delete_user(user_id, repo))
