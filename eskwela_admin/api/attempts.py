from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request, status

from ..models.payloads import StartAttemptData
from ..services.mock_api import MockAPIService
from .deps import get_mock_api
from .responses import envelope_response

router = APIRouter()


@router.get("")
async def list_attempts(request: Request, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.get_quiz_attempts(dict(request.query_params)))


@router.get("/{attempt_id}")
async def get_attempt(attempt_id: int, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.get_quiz_attempt_by_id(attempt_id))


@router.post("")
async def start_attempt(payload: StartAttemptData, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(
        await api.start_quiz_attempt(payload.quiz_id, payload.user_id),
        status.HTTP_201_CREATED,
    )


@router.post("/{attempt_id}/submit")
async def submit_attempt(
    attempt_id: int,
    payload: Dict[str, Any] = Body(...),
    api: MockAPIService = Depends(get_mock_api),
):
    return envelope_response(await api.submit_quiz_attempt(attempt_id, payload))
