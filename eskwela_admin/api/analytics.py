from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from ..models.enums import ReportType
from ..services.mock_api import MockAPIService
from .deps import date_range_params, get_mock_api
from .responses import envelope_response

router = APIRouter()


@router.get("")
async def get_analytics(
    date_range: Optional[Dict[str, Any]] = Depends(date_range_params),
    grade_level: Optional[str] = Query(default=None, alias="gradeLevel"),
    subject: Optional[str] = Query(default=None),
    content_type: Optional[str] = Query(default=None, alias="contentType"),
    api: MockAPIService = Depends(get_mock_api),
):
    filters = {
        "dateRange": date_range,
        "gradeLevel": grade_level,
        "subject": subject,
        "contentType": content_type,
    }
    filters = {key: value for key, value in filters.items() if value is not None}
    return envelope_response(await api.get_analytics(filters))


@router.get("/students/{user_id}")
async def get_student_progress(
    user_id: int,
    date_range: Optional[Dict[str, Any]] = Depends(date_range_params),
    api: MockAPIService = Depends(get_mock_api),
):
    return envelope_response(await api.get_student_progress(user_id, date_range))


@router.get("/content-engagement")
async def get_content_engagement(
    date_range: Optional[Dict[str, Any]] = Depends(date_range_params),
    api: MockAPIService = Depends(get_mock_api),
):
    return envelope_response(await api.get_content_engagement(date_range))


@router.post("/reports/{report_type}")
async def generate_report(
    report_type: ReportType,
    filters: Optional[Dict[str, Any]] = Body(default=None),
    api: MockAPIService = Depends(get_mock_api),
):
    return envelope_response(await api.generate_report(report_type, filters))
