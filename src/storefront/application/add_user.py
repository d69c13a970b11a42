"""Application service: Add User use case.

Registers a profile for a principal issued by the identity provider.
"""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User
from storefront.domain.repository.unit_of_work import UnitOfWork


class AddUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        user_id: str,
        email: str,
        full_name: str = "",
        is_admin: bool = False,
    ) -> User:
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")
        if "@" not in email:
            raise ValidationError(f"Invalid email address '{email}'")

        user = User(
            id=user_id.strip(),
            email=email.strip(),
            full_name=full_name.strip(),
            is_admin=is_admin,
        )
        with self._uow:
            if self._uow.users.get_by_id(user.id) is not None:
                raise ValidationError(f"User '{user.id}' already exists")
            self._uow.users.save(user)
            self._uow.commit()
        return user
