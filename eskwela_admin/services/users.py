"""
User management operations.
"""
import logging
from typing import Any, List, Optional, Union

from ..core.exceptions import ConflictError, NotFoundError
from ..models.base import utcnow
from ..models.entities import User
from ..models.envelope import Envelope
from ..models.enums import RecordStatus
from ..models.filters import UserFilters
from ..models.payloads import CreateUserData, UpdateUserData
from .base import BaseService, coerce, merge_record, operation
from .query import run_query

logger = logging.getLogger(__name__)


class UserService(BaseService):

    def _require(self, user_id: int) -> User:
        user = self.store.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    @operation()
    async def get_users(
        self, params: Optional[Union[UserFilters, dict]] = None
    ) -> Envelope[List[User]]:
        filters = coerce(UserFilters, params)
        users, pagination = run_query(self.store.users.all(), filters)
        return Envelope.ok(users, pagination=pagination)

    @operation()
    async def get_user_by_id(self, user_id: int) -> Envelope[User]:
        return Envelope.ok(self._require(user_id))

    @operation()
    async def create_user(self, data: Union[CreateUserData, dict]) -> Envelope[User]:
        payload = coerce(CreateUserData, data)
        async with self.store.lock:
            if self.store.email_taken(payload.email):
                raise ConflictError("Email already exists", extra={"email": payload.email})
            now = utcnow()
            user = self.store.users.put(User(
                id=self.store.users.next_id(),
                name=payload.name,
                email=payload.email,
                role=payload.role,
                grade_level=payload.grade_level,
                last_active=now,
                created_at=now,
                status=RecordStatus.ACTIVE,
            ))
        logger.info(f"Created user {user.id} ({user.role.value})")
        return Envelope.ok(user, message="User created successfully")

    @operation()
    async def update_user(
        self, user_id: int, data: Union[UpdateUserData, dict]
    ) -> Envelope[User]:
        payload = coerce(UpdateUserData, data)
        async with self.store.lock:
            existing = self._require(user_id)
            if payload.email and payload.email != existing.email:
                if self.store.email_taken(payload.email, exclude_id=user_id):
                    raise ConflictError("Email already exists", extra={"email": payload.email})
            changes = payload.changes(exclude={"password"})
            user = self.store.users.put(merge_record(existing, changes))
        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return Envelope.ok(user, message="User updated successfully")

    @operation()
    async def delete_user(self, user_id: int) -> Envelope[Any]:
        async with self.store.lock:
            self._require(user_id)
            self.store.users.delete(user_id)
        logger.info(f"Deleted user {user_id}")
        return Envelope.ok(message="User deleted successfully")
