"""
Adapter: User persistence.

Implements UserRepository port on top of SQLAlchemy Core.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError

from tradehub.domain.accounts.entities import User
from tradehub.domain.accounts.errors import EmailAlreadyRegisteredError
from tradehub.domain.accounts.ports import UserRepository
from tradehub.infrastructure.database import users

logger = logging.getLogger(__name__)


def _to_entity(row: RowMapping) -> User:
    created_at = row["created_at"]
    # SQLite drops the offset on the way back.
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return User(
        id=row["id"],
        email=row["email"],
        password_hash=row["password"],
        full_name=row["full_name"],
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    """Stores users in the `users` table.

    Implements the UserRepository port defined in the domain layer.
    Email uniqueness is enforced by the database constraint.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, email: str, password_hash: str, full_name: str) -> User:
        """Insert a new user.

        Args:
            email: Normalized email address.
            password_hash: bcrypt hash of the password.
            full_name: Display name.

        Returns:
            The stored User.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken.
        """
        user = User(
            id=str(uuid4()),
            email=email,
            password_hash=password_hash,
            full_name=full_name,
            created_at=datetime.now(timezone.utc),
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    insert(users).values(
                        id=user.id,
                        email=user.email,
                        password=user.password_hash,
                        full_name=user.full_name,
                        created_at=user.created_at,
                    )
                )
        except IntegrityError as exc:
            raise EmailAlreadyRegisteredError(email) from exc

        logger.debug("Inserted user id=%s", user.id)
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        with self._engine.connect() as conn:
            row = conn.execute(select(users).where(users.c.id == user_id)).mappings().first()
        return _to_entity(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with self._engine.connect() as conn:
            row = conn.execute(select(users).where(users.c.email == email)).mappings().first()
        return _to_entity(row) if row else None
