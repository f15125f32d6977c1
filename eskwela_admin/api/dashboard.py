from fastapi import APIRouter, Depends

from ..services.mock_api import MockAPIService
from .deps import get_mock_api
from .responses import envelope_response

router = APIRouter()


@router.get("/stats")
async def dashboard_stats(api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.get_dashboard_stats())
