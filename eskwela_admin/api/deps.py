from typing import Any, Dict, Optional

from fastapi import Query, Request

from ..services.mock_api import MockAPIService


def get_mock_api(request: Request) -> MockAPIService:
    """Service instance created by the application lifespan."""
    return request.app.state.mock_api


def date_range_params(
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    preset: Optional[str] = Query(default=None),
) -> Optional[Dict[str, Any]]:
    """Date range from the query string, or None when no part of it was given."""
    params = {"startDate": start_date, "endDate": end_date, "preset": preset}
    params = {key: value for key, value in params.items() if value is not None}
    return params or None
