"""
AR content endpoints. Create and update take multipart form data with the
asset file; the file is reduced to its name, size and MIME type.
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status

from ..models.entities import FileHandle
from ..services.mock_api import MockAPIService
from .deps import get_mock_api
from .responses import envelope_response

router = APIRouter()


async def to_file_handle(upload: UploadFile) -> FileHandle:
    content = await upload.read()
    return FileHandle(
        name=upload.filename or "",
        size=len(content),
        type=upload.content_type or "application/octet-stream",
        content=content,
    )


@router.get("")
async def list_content(request: Request, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.get_content(dict(request.query_params)))


@router.post("/upload")
async def upload_file(
    file: UploadFile = File(...), api: MockAPIService = Depends(get_mock_api)
):
    handle = await to_file_handle(file)
    return envelope_response(await api.upload_file(handle), status.HTTP_201_CREATED)


@router.get("/{content_id}")
async def get_content(content_id: int, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.get_content_by_id(content_id))


@router.post("")
async def create_content(
    title: str = Form(...),
    subject: str = Form(...),
    grade_level: str = Form(..., alias="gradeLevel"),
    type: str = Form(...),
    file: UploadFile = File(...),
    description: Optional[str] = Form(default=None),
    api: MockAPIService = Depends(get_mock_api),
):
    data = {
        "title": title,
        "description": description,
        "subject": subject,
        "gradeLevel": grade_level,
        "type": type,
        "file": await to_file_handle(file),
    }
    return envelope_response(await api.create_content(data), status.HTTP_201_CREATED)


@router.put("/{content_id}")
async def update_content(
    content_id: int,
    title: Optional[str] = Form(default=None),
    description: Optional[str] = Form(default=None),
    subject: Optional[str] = Form(default=None),
    grade_level: Optional[str] = Form(default=None, alias="gradeLevel"),
    type: Optional[str] = Form(default=None),
    status_: Optional[str] = Form(default=None, alias="status"),
    file: Optional[UploadFile] = File(default=None),
    api: MockAPIService = Depends(get_mock_api),
):
    fields = {
        "title": title,
        "description": description,
        "subject": subject,
        "gradeLevel": grade_level,
        "type": type,
        "status": status_,
    }
    # Only submitted fields count as changes
    data = {key: value for key, value in fields.items() if value is not None}
    if file is not None:
        data["file"] = await to_file_handle(file)
    return envelope_response(await api.update_content(content_id, data))


@router.delete("/{content_id}")
async def delete_content(content_id: int, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.delete_content(content_id))


@router.post("/{content_id}/qr-code")
async def generate_qr_code(content_id: int, api: MockAPIService = Depends(get_mock_api)):
    return envelope_response(await api.generate_qr_code(content_id))
