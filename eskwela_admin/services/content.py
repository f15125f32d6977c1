"""
AR content management, file upload and QR code operations.
"""
import itertools
import logging
import uuid
from typing import Any, Callable, List, Optional, Union

from ..core.exceptions import NotFoundError, ValidationFailure
from ..models.base import utcnow
from ..models.entities import ARContent, FileHandle, FileUpload, QRCode
from ..models.envelope import Envelope
from ..models.enums import ALLOWED_FILE_EXTENSIONS, ContentType, RecordStatus
from ..models.filters import ContentFilters
from ..models.payloads import CreateContentData, UpdateContentData
from .base import BaseService, coerce, merge_record, operation
from .generators import qr_code_for
from .query import run_query

logger = logging.getLogger(__name__)


def validate_file_type(file_name: str, content_type: ContentType) -> None:
    """Reject a file whose lower-cased extension is not allowed for the type."""
    allowed = ALLOWED_FILE_EXTENSIONS[content_type]
    extension = FileHandle(name=file_name).extension
    if extension not in allowed:
        raise ValidationFailure(
            f"Invalid file type. Expected {' or '.join(allowed)} for {content_type.value}",
            extra={"file_name": file_name, "allowed": allowed},
        )


class ContentService(BaseService):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._qr_ids = itertools.count(1)

    def _require(self, content_id: int) -> ARContent:
        item = self.store.content.get(content_id)
        if item is None:
            raise NotFoundError("Content", content_id)
        return item

    @operation()
    async def get_content(
        self, params: Optional[Union[ContentFilters, dict]] = None
    ) -> Envelope[List[ARContent]]:
        filters = coerce(ContentFilters, params)
        items, pagination = run_query(self.store.content.all(), filters)
        return Envelope.ok(items, pagination=pagination)

    @operation()
    async def get_content_by_id(self, content_id: int) -> Envelope[ARContent]:
        return Envelope.ok(self._require(content_id))

    @operation()
    async def create_content(
        self, data: Union[CreateContentData, dict]
    ) -> Envelope[ARContent]:
        payload = coerce(CreateContentData, data)
        validate_file_type(payload.file.name, payload.type)

        async with self.store.lock:
            content_id = self.store.content.next_id()
            now = utcnow()
            item = self.store.content.put(ARContent(
                id=content_id,
                title=payload.title,
                description=payload.description,
                subject=payload.subject,
                grade_level=payload.grade_level,
                type=payload.type,
                qr_code=qr_code_for(payload.subject, content_id),
                thumbnail=f"/thumbnails/{payload.type.value}_{content_id}.jpg",
                file_url=f"/content/{payload.file.name}",
                file_name=payload.file.name,
                file_size=payload.file.size_label,
                created_at=now,
                updated_at=now,
                status=RecordStatus.ACTIVE,
            ))
        logger.info(f"Created content {item.id} ({item.type.value}, {item.file_name})")
        return Envelope.ok(item, message="Content created successfully")

    @operation()
    async def update_content(
        self, content_id: int, data: Union[UpdateContentData, dict]
    ) -> Envelope[ARContent]:
        payload = coerce(UpdateContentData, data)
        async with self.store.lock:
            existing = self._require(content_id)
            content_type = payload.type or existing.type
            file_name = payload.file.name if payload.file is not None else existing.file_name
            if (payload.file is not None or payload.type) and file_name:
                validate_file_type(file_name, content_type)

            changes = payload.changes(exclude={"file"})
            changes["updated_at"] = utcnow()
            if payload.subject:
                changes["qr_code"] = qr_code_for(payload.subject, content_id)
            if payload.type:
                changes["thumbnail"] = f"/thumbnails/{payload.type.value}_{content_id}.jpg"
            if payload.file is not None:
                changes.update(
                    file_name=payload.file.name,
                    file_url=f"/content/{payload.file.name}",
                    file_size=payload.file.size_label,
                )
            item = self.store.content.put(merge_record(existing, changes))
        logger.info(f"Updated content {content_id}: {sorted(changes)}")
        return Envelope.ok(item, message="Content updated successfully")

    @operation()
    async def delete_content(self, content_id: int) -> Envelope[Any]:
        async with self.store.lock:
            self._require(content_id)
            self.store.content.delete(content_id)
        logger.info(f"Deleted content {content_id}")
        return Envelope.ok(message="Content deleted successfully")

    @operation(latency=None)
    async def upload_file(
        self,
        file: Union[FileHandle, dict],
        on_progress: Optional[Callable[[int], None]] = None,
    ) -> Envelope[FileUpload]:
        handle = coerce(FileHandle, file)
        await self.latency.simulate_upload(on_progress)
        upload = FileUpload(
            id=uuid.uuid4().hex[:13],
            file_name=handle.name,
            file_size=handle.size,
            file_type=handle.type,
            url=f"/uploads/{handle.name}",
            uploaded_at=utcnow(),
        )
        logger.info(f"Uploaded {handle.name} ({handle.size} bytes)")
        return Envelope.ok(upload, message="File uploaded successfully")

    @operation()
    async def generate_qr_code(self, content_id: int) -> Envelope[QRCode]:
        item = self._require(content_id)
        qr_code = QRCode(
            id=next(self._qr_ids),
            content_id=content_id,
            code=item.qr_code,
            image_url=f"/qr-codes/{item.qr_code}.png",
            generated_at=utcnow(),
        )
        return Envelope.ok(qr_code, message="QR code generated successfully")
