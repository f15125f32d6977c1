from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request, status

from ..services.mock_api import MockAPIService
from .deps import get_mock_api
from .responses import envelope_response

router = APIRouter()
questions_router = APIRouter()


@router.get("")
async def list_quizzes(request: Request, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.get_quizzes(dict(request.query_params)))


@router.get("/{quiz_id}")
async def get_quiz(quiz_id: int, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.get_quiz_by_id(quiz_id))


@router.post("")
async def create_quiz(
    payload: Dict[str, Any] = Body(...), api: MockAPIService = Depends(get_mock_api)
):
    return envelope_response(await api.create_quiz(payload), status.HTTP_201_CREATED)


@router.put("/{quiz_id}")
async def update_quiz(
    quiz_id: int,
    payload: Dict[str, Any] = Body(...),
    api: MockAPIService = Depends(get_mock_api),
):
    return envelope_response(await api.update_quiz(quiz_id, payload))


@router.delete("/{quiz_id}")
async def delete_quiz(quiz_id: int, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.delete_quiz(quiz_id))


@router.get("/{quiz_id}/questions")
async def list_questions(quiz_id: int, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.get_quiz_questions(quiz_id))


@router.post("/{quiz_id}/questions")
async def create_question(
    quiz_id: int,
    payload: Dict[str, Any] = Body(...),
    api: MockAPIService = Depends(get_mock_api),
):
    return envelope_response(
        await api.create_question(quiz_id, payload), status.HTTP_201_CREATED
    )


@router.put("/{quiz_id}/questions/reorder")
async def reorder_questions(
    quiz_id: int,
    payload: Dict[str, Any] = Body(...),
    api: MockAPIService = Depends(get_mock_api),
):
    return envelope_response(await api.reorder_questions(quiz_id, payload))


@questions_router.put("/{question_id}")
async def update_question(
    question_id: int,
    payload: Dict[str, Any] = Body(...),
    api: MockAPIService = Depends(get_mock_api),
):
    return envelope_response(await api.update_question(question_id, payload))


@questions_router.delete("/{question_id}")
async def delete_question(question_id: int, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.delete_question(question_id))
