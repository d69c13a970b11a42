"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy.orm import Session

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.tables import UserRow


class SqlUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: str) -> User | None:
        row = self._session.get(UserRow, user_id)
        if row is None:
            return None
        return User(
            id=row.id,
            email=row.email,
            full_name=row.full_name,
            address=row.address,
            is_admin=row.is_admin,
        )

    def save(self, user: User) -> None:
        row = self._session.get(UserRow, user.id)
        if row is None:
            row = UserRow(id=user.id)
            self._session.add(row)
        row.email = user.email
        row.full_name = user.full_name
        row.address = user.address
        row.is_admin = user.is_admin
        self._session.flush()

    def update_address(self, user_id: str, address: str) -> None:
        row = self._session.get(UserRow, user_id)
        if row is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")
        row.address = address
        self._session.flush()
