"""Read access to user profiles stored by the identity provider."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Session, joinedload

from app.domain.entities import Role, User
from app.infrastructure.models import RoleModel, UserModel


class UserRepository:
    """Query users by identifier, location, or role.

    The notification core never writes users; these rows are owned by the
    identity store.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(UserModel.id == user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def list_with_location(self) -> Sequence[User]:
        """Return every user with a full coordinate pair or a district.

        This is a full scan of the located users, which is acceptable for a
        single city's population.
        """

        query = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(
                or_(
                    and_(
                        UserModel.latitude.is_not(None),
                        UserModel.longitude.is_not(None),
                    ),
                    UserModel.district.is_not(None),
                )
            )
            .order_by(UserModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_ids_by_role_alias(self, alias: str) -> list[str]:
        query = (
            self.session.query(UserModel.id)
            .join(RoleModel, UserModel.role_id == RoleModel.id)
            .filter(func.lower(RoleModel.alias) == alias.lower())
            .order_by(UserModel.id)
        )
        return [user_id for (user_id,) in query.all()]

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        role = model.role
        if role is None:
            msg = f"User {model.id} has no role"
            raise ValueError(msg)
        return User(
            id=model.id,
            role=Role(id=role.id, name=role.name, alias=role.alias),
            name=model.name,
            latitude=model.latitude,
            longitude=model.longitude,
            district=model.district,
            created_at=model.created_at,
        )


__all__ = ["UserRepository"]
