from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request, status

from ..services.mock_api import MockAPIService
from .deps import get_mock_api
from .responses import envelope_response

router = APIRouter()


@router.get("")
async def list_users(request: Request, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.get_users(dict(request.query_params)))


@router.get("/{user_id}")
async def get_user(user_id: int, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.get_user_by_id(user_id))


@router.post("")
async def create_user(
    payload: Dict[str, Any] = Body(...), api: MockAPIService = Depends(get_mock_api)
):
    return envelope_response(await api.create_user(payload), status.HTTP_201_CREATED)


@router.put("/{user_id}")
async def update_user(
    user_id: int,
    payload: Dict[str, Any] = Body(...),
    api: MockAPIService = Depends(get_mock_api),
):
    return envelope_response(await api.update_user(user_id, payload))


@router.delete("/{user_id}")
async def delete_user(user_id: int, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.delete_user(user_id))
