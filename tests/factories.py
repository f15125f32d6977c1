from datetime import datetime, timedelta, timezone

from eskwela_admin.models.entities import User
from eskwela_admin.models.enums import Role

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_user(user_id, name, role=Role.STUDENT, email=None, **fields):
    created = NOW - timedelta(days=user_id)
    return User(
        id=user_id,
        name=name,
        email=email or f"{name.lower().replace(' ', '.')}@eskwela.edu.ph",
        role=role,
        last_active=created,
        created_at=created,
        **fields,
    )
