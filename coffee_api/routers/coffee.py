from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends

from ..common.helpers import serialize_document
from ..database.base_repo import BaseRepository
from ..dependencies.dependencies import get_repo
from ..handlers import coffee as handlers
from ..schemas.results import InsertAck, UpdateAck, DeleteAck

router = APIRouter(
    prefix="/coffee",
    tags=["coffee"],
)


@router.get("")
async def read_all_coffee(repo: BaseRepository = Depends(get_repo)) -> List[Dict[str, Any]]:
    return serialize_document(await handlers.get_all_coffee(repo))


@router.get("/{coffee_id}")
async def read_coffee(coffee_id: str, repo: BaseRepository = Depends(get_repo)) -> Optional[Dict[str, Any]]:
    return serialize_document(await handlers.get_coffee(coffee_id, repo))


@router.post("")
async def add_coffee(new_coffee: Dict[str, Any] = Body(...), repo: BaseRepository = Depends(get_repo)) -> InsertAck:
    return InsertAck.from_result(await handlers.add_coffee(new_coffee, repo))


@router.put("/{coffee_id}")
async def replace_coffee(coffee_id: str, coffee: Dict[str, Any] = Body(...), repo: BaseRepository = Depends(get_repo)) -> UpdateAck:
    return UpdateAck.from_result(await handlers.replace_coffee(coffee_id, coffee, repo))


@router.delete("/{coffee_id}")
async def delete_coffee(coffee_id: str, repo: BaseRepository = Depends(get_repo)) -> DeleteAck:
    return DeleteAck.from_result(await handlers.delete_coffee(coffee_id, repo))
